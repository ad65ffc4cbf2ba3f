"""
In-memory storage for users.

``UserStore`` keeps users in an insertion-ordered list for the lifetime
of the process.  Nothing is persisted; a new store starts empty.
Records handed out are copies, so callers can only change stored
users through ``replace``.
"""

import threading
from typing import Iterator, List

from ..core.errors import NotFoundError
from ..schemas.user import User


class UserStore:
    """Ordered collection of ``User`` records looked up by id."""

    def __init__(self) -> None:
        self._users: List[User] = []
        # Handlers run on the event loop, but sync handlers would be
        # dispatched to a threadpool.
        self._lock = threading.Lock()

    def _index_of(self, user_id: str) -> int:
        for idx, user in enumerate(self._users):
            if user.id == user_id:
                return idx
        raise NotFoundError()

    def add(self, user: User) -> User:
        """Append a user whose id is already assigned."""
        with self._lock:
            self._users.append(user.model_copy())
        return user

    def find_by_id(self, user_id: str) -> User:
        """Return the user with ``user_id`` or raise ``NotFoundError``."""
        with self._lock:
            return self._users[self._index_of(user_id)].model_copy()

    def replace(self, user_id: str, name: str, email: str) -> User:
        """Overwrite name and email of an existing user, keeping its id."""
        with self._lock:
            idx = self._index_of(user_id)
            updated = self._users[idx].model_copy(update={"name": name, "email": email})
            self._users[idx] = updated
            return updated.model_copy()

    def remove_by_id(self, user_id: str) -> None:
        """Remove the user with ``user_id`` or raise ``NotFoundError``."""
        with self._lock:
            del self._users[self._index_of(user_id)]

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def __iter__(self) -> Iterator[User]:
        with self._lock:
            snapshot = [user.model_copy() for user in self._users]
        return iter(snapshot)
