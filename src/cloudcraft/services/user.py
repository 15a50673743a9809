"""User operations."""

import asyncio

from ..domain.http import Response
from ..models.user import User
from .base import BaseService


class UserService(BaseService):
    """Operations on the "user" resource."""

    path = "user"

    async def me(
        self, *, timeout: float | None = None, cancel: asyncio.Event | None = None
    ) -> tuple[User, Response]:
        """Profile of the user owning the API key."""
        response = await self._call(
            "GET", self._resource("me"), timeout=timeout, cancel=cancel
        )
        return self._decode(response, User), response
