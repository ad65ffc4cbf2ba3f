"""
Top-level router.

Aggregates the endpoint routers.  Routes are mounted at the root of
the application: ``/`` for the greeting and ``/users`` for the user
resource.
"""

from fastapi import APIRouter

from .endpoints import root, users

router = APIRouter()

router.include_router(root.router, tags=["root"])
router.include_router(users.router, prefix="/users", tags=["users"])
