"""User profile model."""

import typing as t
from datetime import datetime

from pydantic import Field

from .base import ApiModel


class User(ApiModel):
    """The Cloudcraft user owning the API key."""

    id: str | None = None
    name: str | None = None
    email: str | None = None
    settings: dict[str, t.Any] | None = None
    accessed_at: datetime | None = Field(default=None, alias="accessedAt")
    created_at: datetime | None = Field(default=None, alias="createdAt")
    updated_at: datetime | None = Field(default=None, alias="updatedAt")
