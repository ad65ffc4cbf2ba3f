"""
Business logic for users.

``UserService`` validates payloads, assigns ids and delegates storage
to a ``UserStore``.  Both collaborators are passed in, so every
application instance (and every test) can work on its own store.
"""

import logging
from typing import Optional

from ..schemas.user import User, UserPayload
from .id_generator import IdGenerator, UUIDGenerator
from .user_store import UserStore

logger = logging.getLogger(__name__)


class UserService:
    """Create, read, update and delete users held in a ``UserStore``."""

    def __init__(self, store: UserStore, id_generator: Optional[IdGenerator] = None) -> None:
        self.store = store
        self.id_generator = id_generator or UUIDGenerator()

    async def create_user(self, data: UserPayload) -> User:
        """Validate ``data`` and store a new user with a fresh id."""
        name, email = data.require_fields()
        user = User(id=self.id_generator.new_id(), name=name, email=email)
        self.store.add(user)
        logger.info("Created user %s", user.id)
        return user

    async def get_user(self, user_id: str) -> User:
        return self.store.find_by_id(user_id)

    async def update_user(self, user_id: str, data: UserPayload) -> User:
        """Replace name and email of an existing user.

        Fields are validated before the lookup, so a bad payload is
        reported as ``ValidationError`` even when the id is unknown.
        """
        name, email = data.require_fields()
        user = self.store.replace(user_id, name, email)
        logger.info("Updated user %s", user_id)
        return user

    async def delete_user(self, user_id: str) -> None:
        self.store.remove_by_id(user_id)
        logger.info("Deleted user %s", user_id)
