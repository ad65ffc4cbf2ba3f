"""
User endpoints.

CRUD over the single ``User`` resource.  Request bodies are parsed
into ``UserPayload``; a missing body counts as an empty payload and is
rejected with 400 by the service.  Errors raised by the service are
rendered by the handlers in ``core.errors``.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Response, status

from user_crud_api.app.api.deps import get_user_service
from user_crud_api.app.schemas.user import ErrorResponse, User, UserPayload
from user_crud_api.app.services.user_service import UserService

router = APIRouter()

BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}
NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}


@router.post(
    "",
    response_model=User,
    status_code=status.HTTP_201_CREATED,
    responses=BAD_REQUEST,
)
async def create_user(
    payload: Optional[UserPayload] = None,
    service: UserService = Depends(get_user_service),
) -> User:
    """Create a user and return it with its generated id."""
    return await service.create_user(payload or UserPayload())


@router.get("/{user_id}", response_model=User, responses=NOT_FOUND)
async def get_user(user_id: str, service: UserService = Depends(get_user_service)) -> User:
    return await service.get_user(user_id)


@router.put("/{user_id}", response_model=User, responses={**BAD_REQUEST, **NOT_FOUND})
async def update_user(
    user_id: str,
    payload: Optional[UserPayload] = None,
    service: UserService = Depends(get_user_service),
) -> User:
    """Replace name and email of a user.

    Both fields are required.  Field presence is checked before the
    user is looked up, so an incomplete body always yields 400.
    """
    return await service.update_user(user_id, payload or UserPayload())


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND,
)
async def delete_user(user_id: str, service: UserService = Depends(get_user_service)) -> Response:
    await service.delete_user(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
