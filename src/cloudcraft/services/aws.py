"""AWS account operations."""

import asyncio

from ..domain.exceptions import EmptyAccountNameError, EmptyRoleARNError
from ..domain.http import Response
from ..models.accounts import AWSAccount, IAMParams, IAMPolicy
from .account import AccountService


class AWSService(AccountService[AWSAccount]):
    """Operations on the "aws/account" resource."""

    path = "aws/account"
    model = AWSAccount

    def _validate(self, account: AWSAccount) -> None:
        if not account.name:
            raise EmptyAccountNameError()
        if not account.role_arn:
            raise EmptyRoleARNError()

    async def iam_parameters(
        self, *, timeout: float | None = None, cancel: asyncio.Event | None = None
    ) -> tuple[IAMParams, Response]:
        """Parameters needed to create the IAM role Cloudcraft assumes."""
        response = await self._call(
            "GET", self._resource("iamParameters"), timeout=timeout, cancel=cancel
        )
        return self._decode(response, IAMParams), response

    async def iam_policy(
        self, *, timeout: float | None = None, cancel: asyncio.Event | None = None
    ) -> tuple[IAMPolicy, Response]:
        """Minimal IAM policy granting the permissions Cloudcraft needs."""
        response = await self._call(
            "GET",
            self._resource("iamParameters", "policy", "minimal"),
            timeout=timeout,
            cancel=cancel,
        )
        return self._decode(response, IAMPolicy), response
