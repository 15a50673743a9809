"""Operations shared by the cloud provider account services."""

import asyncio
import typing as t
from abc import ABC, abstractmethod

from ..domain.exceptions import (
    EmptyAccountIDError,
    EmptyRegionError,
    MissingAccountError,
)
from ..domain.http import Response
from ..models.accounts import AWSAccount, AzureAccount
from ..models.params import DEFAULT_SNAPSHOT_FORMAT, SnapshotParams
from .base import BaseService

A = t.TypeVar("A", AWSAccount, AzureAccount)

ACCOUNTS_KEY = "accounts"


class AccountService(BaseService, ABC, t.Generic[A]):
    """List, register, update, delete and snapshot cloud accounts.

    Subclasses set the resource path and model and validate accounts before
    they are sent.
    """

    path: t.ClassVar[str]
    model: type[A]

    @abstractmethod
    def _validate(self, account: A) -> None:
        """Raise a ValidationError if account cannot be sent."""

    async def list(
        self, *, timeout: float | None = None, cancel: asyncio.Event | None = None
    ) -> tuple[list[A], Response]:
        """List the accounts linked with Cloudcraft."""
        response = await self._call("GET", self.path, timeout=timeout, cancel=cancel)
        return self._decode_list(response, ACCOUNTS_KEY, self.model), response

    async def create(
        self,
        account: A | None,
        *,
        timeout: float | None = None,
        cancel: asyncio.Event | None = None,
    ) -> tuple[A, Response]:
        """Register a new account.

        Returns:
            The account as stored by the API, with its ID, and the response
        """
        if account is None:
            raise MissingAccountError()
        self._validate(account)

        response = await self._call(
            "POST", self.path, payload=account, timeout=timeout, cancel=cancel
        )
        return self._decode(response, self.model), response

    async def update(
        self,
        account: A | None,
        *,
        timeout: float | None = None,
        cancel: asyncio.Event | None = None,
    ) -> Response:
        """Update a registered account, identified by account.id."""
        if account is None:
            raise MissingAccountError()
        if not account.id:
            raise EmptyAccountIDError()
        self._validate(account)

        return await self._call(
            "PUT",
            self._resource(account.id),
            payload=account,
            timeout=timeout,
            cancel=cancel,
        )

    async def delete(
        self,
        account_id: str,
        *,
        timeout: float | None = None,
        cancel: asyncio.Event | None = None,
    ) -> Response:
        """Unlink an account from Cloudcraft."""
        if not account_id:
            raise EmptyAccountIDError()

        return await self._call(
            "DELETE",
            self._resource(account_id),
            timeout=timeout,
            cancel=cancel,
        )

    async def snapshot(
        self,
        account_id: str,
        region: str,
        format: str = DEFAULT_SNAPSHOT_FORMAT,
        params: SnapshotParams | None = None,
        *,
        timeout: float | None = None,
        cancel: asyncio.Event | None = None,
    ) -> tuple[bytes, Response]:
        """Scan a region of an account and render it.

        Args:
            account_id: ID of the registered account
            region: Region to scan, e.g. "us-east-1"
            format: Output format: json, svg, png, pdf or mxGraph
            params: Rendering options. Defaults to a 1920x1080 image.

        Returns:
            The rendered snapshot and the response
        """
        if not account_id:
            raise EmptyAccountIDError()
        if not region:
            raise EmptyRegionError()

        params = params or SnapshotParams.default()
        response = await self._call(
            "GET",
            self._resource(account_id, region, format or DEFAULT_SNAPSHOT_FORMAT),
            params=params.to_query(),
            json_body=False,
            timeout=timeout,
            cancel=cancel,
        )
        return response.body, response
