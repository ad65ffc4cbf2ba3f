"""
FastAPI dependencies shared by the endpoint modules.
"""

from fastapi import Request

from ..services.user_service import UserService


def get_user_service(request: Request) -> UserService:
    """Return the ``UserService`` wired into the running application."""
    return request.app.state.user_service
