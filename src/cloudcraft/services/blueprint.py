"""Blueprint operations."""

import asyncio

from ..domain.exceptions import MissingBlueprintError, MissingBlueprintIDError
from ..domain.http import Response
from ..models.blueprint import Blueprint
from ..models.params import (
    DEFAULT_BUDGET_FORMAT,
    DEFAULT_IMAGE_FORMAT,
    BudgetExportParams,
    ImageExportParams,
)
from .base import BaseService

BLUEPRINTS_KEY = "blueprints"

Blueprints = list[Blueprint]


class BlueprintService(BaseService):
    """Operations on the "blueprint" resource."""

    path = "blueprint"

    async def list(
        self, *, timeout: float | None = None, cancel: asyncio.Event | None = None
    ) -> tuple[Blueprints, Response]:
        """List the blueprints visible to the API key."""
        response = await self._call("GET", self.path, timeout=timeout, cancel=cancel)
        return self._decode_list(response, BLUEPRINTS_KEY, Blueprint), response

    async def get(
        self,
        blueprint_id: str,
        *,
        timeout: float | None = None,
        cancel: asyncio.Event | None = None,
    ) -> tuple[Blueprint, Response]:
        """Fetch a blueprint by ID.

        The response's ETag header can be passed to update() to reject the
        update if the blueprint changed in the meantime.
        """
        if not blueprint_id:
            raise MissingBlueprintIDError()

        response = await self._call(
            "GET", self._resource(blueprint_id), timeout=timeout, cancel=cancel
        )
        return self._decode(response, Blueprint), response

    async def create(
        self,
        blueprint: Blueprint | None,
        *,
        timeout: float | None = None,
        cancel: asyncio.Event | None = None,
    ) -> tuple[Blueprint, Response]:
        """Create a blueprint, returning it as stored by the API."""
        if blueprint is None:
            raise MissingBlueprintError()

        response = await self._call(
            "POST", self.path, payload=blueprint, timeout=timeout, cancel=cancel
        )
        return self._decode(response, Blueprint), response

    async def update(
        self,
        blueprint: Blueprint | None,
        etag: str = "",
        *,
        timeout: float | None = None,
        cancel: asyncio.Event | None = None,
    ) -> Response:
        """Replace a blueprint, identified by blueprint.id.

        Args:
            blueprint: New content of the blueprint
            etag: If given, sent as If-Match so the API rejects the update
                with 412 when the stored blueprint has a different ETag
        """
        if blueprint is None:
            raise MissingBlueprintError()
        if not blueprint.id:
            raise MissingBlueprintIDError()

        headers = {"If-Match": etag} if etag else None
        return await self._call(
            "PUT",
            self._resource(blueprint.id),
            payload=blueprint,
            headers=headers,
            timeout=timeout,
            cancel=cancel,
        )

    async def delete(
        self,
        blueprint_id: str,
        *,
        timeout: float | None = None,
        cancel: asyncio.Event | None = None,
    ) -> Response:
        if not blueprint_id:
            raise MissingBlueprintIDError()

        return await self._call(
            "DELETE", self._resource(blueprint_id), timeout=timeout, cancel=cancel
        )

    async def export_image(
        self,
        blueprint_id: str,
        format: str = DEFAULT_IMAGE_FORMAT,
        params: ImageExportParams | None = None,
        *,
        timeout: float | None = None,
        cancel: asyncio.Event | None = None,
    ) -> tuple[bytes, Response]:
        """Render a blueprint as svg, png, pdf or mxGraph.

        Args:
            blueprint_id: ID of the blueprint
            format: Output format
            params: Rendering options. Defaults to a 1920x1080 image.
        """
        if not blueprint_id:
            raise MissingBlueprintIDError()

        params = params or ImageExportParams.default()
        response = await self._call(
            "GET",
            self._resource(blueprint_id, format or DEFAULT_IMAGE_FORMAT),
            params=params.to_query(),
            json_body=False,
            timeout=timeout,
            cancel=cancel,
        )
        return response.body, response

    async def export_budget(
        self,
        blueprint_id: str,
        format: str = DEFAULT_BUDGET_FORMAT,
        params: BudgetExportParams | None = None,
        *,
        timeout: float | None = None,
        cancel: asyncio.Event | None = None,
    ) -> tuple[bytes, Response]:
        """Export the budget of a blueprint as csv or xlsx.

        Args:
            blueprint_id: ID of the blueprint
            format: Output format
            params: Currency, period and rate. Defaults to monthly USD.
        """
        if not blueprint_id:
            raise MissingBlueprintIDError()

        params = params or BudgetExportParams.default()
        response = await self._call(
            "GET",
            self._resource(blueprint_id, "budget", format or DEFAULT_BUDGET_FORMAT),
            params=params.to_query(),
            json_body=False,
            timeout=timeout,
            cancel=cancel,
        )
        return response.body, response
