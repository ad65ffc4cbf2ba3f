"""
Pydantic models for user data.

``UserPayload`` is the body accepted by the create and update
endpoints.  Both fields are optional at the parsing level so that a
missing field becomes a ``ValidationError`` (HTTP 400) raised by
``require_fields`` instead of FastAPI's generic 422 response.
``User`` is the stored record and the response body.
"""

from typing import Any, Optional, Tuple

from pydantic import BaseModel, Field, model_validator

from ..core.errors import ValidationError


class UserPayload(BaseModel):
    """Schema for creating or replacing a user."""

    name: Optional[str] = Field(None, examples=["Ada"])
    email: Optional[str] = Field(None, examples=["ada@example.com"])

    @model_validator(mode="before")
    @classmethod
    def drop_incomplete(cls, data: Any) -> Any:
        """Discard an object lacking ``name`` or ``email`` before type checks.

        Presence is checked first, so ``{"name": 1}`` is reported by
        ``require_fields`` as missing fields rather than as a type error.
        """
        if isinstance(data, dict) and not (data.get("name") and data.get("email")):
            return {}
        return data

    def require_fields(self) -> Tuple[str, str]:
        """Return ``(name, email)`` or raise ``ValidationError``.

        An empty string is treated the same as a missing field.  No
        format check is applied to ``email``.
        """
        if not self.name or not self.email:
            raise ValidationError()
        return self.name, self.email


class User(BaseModel):
    """Schema for a stored user, returned by the API."""

    id: str = Field(..., examples=["0b6e1c8c-55a4-4a4e-9c4e-6c1f0d3c2a11"])
    name: str = Field(..., examples=["Ada"])
    email: str = Field(..., examples=["ada@example.com"])


class ErrorResponse(BaseModel):
    """Body of every 4xx response."""

    error: str
