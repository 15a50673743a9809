"""Shared plumbing for API resource services."""

import asyncio
import typing as t
from urllib.parse import quote

from ..domain.exceptions import MissingResponseKeyError, ResponseDecodeError
from ..domain.http import Response
from ..models.base import ApiModel

if t.TYPE_CHECKING:
    from ..client import Client

M = t.TypeVar("M", bound=ApiModel)


def join_path(*segments: str) -> str:
    """Join path segments, percent-encoding each one.

    Examples:
        >>> join_path("blueprint", "a b", "png")
        'blueprint/a%20b/png'
    """
    return "/".join(quote(segment, safe="") for segment in segments)


class BaseService:
    """Base class for services grouping the operations on one API resource.

    Services are created by the Client and share its executor, so they hold
    no state of their own.
    """

    path: t.ClassVar[str] = ""

    def __init__(self, client: "Client") -> None:
        self._client = client

    def _resource(self, *segments: str) -> str:
        """Path of the resource, optionally followed by encoded segments."""
        return "/".join([self.path, join_path(*segments)]) if segments else self.path

    async def _call(
        self,
        method: str,
        path: str,
        *,
        payload: ApiModel | None = None,
        params: t.Mapping[str, str] | None = None,
        headers: t.Mapping[str, str] | None = None,
        json_body: bool = True,
        timeout: float | None = None,
        cancel: asyncio.Event | None = None,
    ) -> Response:
        request = self._client.build_request(
            method,
            path,
            body=payload.to_payload() if payload is not None else None,
            params=params,
            headers=headers,
            json_body=json_body,
        )
        return await self._client.do(request, timeout=timeout, cancel=cancel)

    @staticmethod
    def _decode(response: Response, model: type[M]) -> M:
        return model.from_payload(response.json())

    @staticmethod
    def _decode_list(response: Response, key: str, model: type[M]) -> list[M]:
        """Decode a list wrapped in an object, e.g. {"blueprints": [...]}.

        Raises:
            MissingResponseKeyError: If the body has no such key
            ResponseDecodeError: If the value is not a list of model objects
        """
        data = response.json()
        if not isinstance(data, dict) or key not in data:
            raise MissingResponseKeyError(key)

        items = data[key]
        if items is None:
            return []
        if not isinstance(items, list):
            raise ResponseDecodeError(f"list of {model.__name__}")
        return [model.from_payload(item) for item in items]
