"""
Pydantic models for user data.

``UserCreate`` deliberately declares ``name`` as optional: a request
that omits it still reaches the service, which either rejects it
(when name validation is enabled) or hands it to the store, where the
``NOT NULL`` constraint fails.
"""

from typing import Optional

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    """Payload for creating a user."""

    name: Optional[str] = Field(None, examples=["Alice"])


class UserRead(BaseModel):
    """A persisted user as returned by the API."""

    id: int
    name: str

    model_config = {
        "from_attributes": True,
    }
