"""Cloud provider accounts linked with Cloudcraft."""

import typing as t
from datetime import datetime

from pydantic import Field

from .base import ApiModel


class _Account(ApiModel):
    id: str | None = None
    name: str | None = None
    read_access: list[str] | None = Field(default=None, alias="readAccess")
    write_access: list[str] | None = Field(default=None, alias="writeAccess")
    creator_id: str | None = Field(default=None, alias="CreatorId")
    source: str | None = None
    created_at: datetime | None = Field(default=None, alias="createdAt")
    updated_at: datetime | None = Field(default=None, alias="updatedAt")


class AWSAccount(_Account):
    """An AWS account registered with Cloudcraft."""

    role_arn: str | None = Field(default=None, alias="roleArn")
    external_id: str | None = Field(default=None, alias="externalId")


class AzureAccount(_Account):
    """An Azure account registered with Cloudcraft."""

    application_id: str | None = Field(default=None, alias="applicationId")
    directory_id: str | None = Field(default=None, alias="directoryId")
    subscription_id: str | None = Field(default=None, alias="subscriptionId")
    client_secret: str | None = Field(default=None, alias="clientSecret")
    customer_id: str | None = Field(default=None, alias="CustomerId")
    hint: str | None = None


class IAMParams(ApiModel):
    """Parameters for creating the IAM role Cloudcraft assumes in AWS."""

    account_id: str | None = Field(default=None, alias="accountId")
    external_id: str | None = Field(default=None, alias="externalId")
    aws_console_url: str | None = Field(default=None, alias="awsConsoleUrl")


class IAMStatement(ApiModel):
    """A statement of an IAM policy. Action and Resource may be str or list."""

    action: t.Any = Field(default=None, alias="Action")
    resource: t.Any = Field(default=None, alias="Resource")
    effect: str | None = Field(default=None, alias="Effect")


class IAMPolicy(ApiModel):
    """Minimal IAM policy required by Cloudcraft."""

    version: str | None = Field(default=None, alias="Version")
    statement: list[IAMStatement] | None = Field(default=None, alias="Statement")
