"""
Id generation for new users.

Services depend on the ``IdGenerator`` protocol rather than on
``uuid`` directly so that tests can hand out predictable ids.
"""

import uuid
from typing import Protocol


class IdGenerator(Protocol):
    def new_id(self) -> str:
        """Return an identifier that has not been handed out before."""
        ...


class UUIDGenerator:
    """Random UUID4 ids, rendered in canonical string form."""

    def new_id(self) -> str:
        return str(uuid.uuid4())
