"""Blueprint (diagram) models."""

import typing as t
from datetime import datetime

from pydantic import Field

from .base import ApiModel

Element = dict[str, t.Any]


class Theme(ApiModel):
    """Colour scheme of a blueprint."""

    base: str | None = None


class LiveAccount(ApiModel):
    """Cloud account a blueprint is connected to."""

    id: str | None = None
    type: str | None = None


class LiveOptions(ApiModel):
    """Options for a blueprint's live view."""

    excluded_types: list[str] | None = Field(default=None, alias="excludedTypes")
    auto_label: bool | None = Field(default=None, alias="autoLabel")
    auto_connect: bool | None = Field(default=None, alias="autoConnect")
    updates_enabled: bool | None = Field(default=None, alias="updatesEnabled")
    update_all_on_scan: bool | None = Field(default=None, alias="updateAllOnScan")
    update_groups_on_scan: bool | None = Field(
        default=None, alias="updateGroupsOnScan"
    )
    update_node_on_select: bool | None = Field(
        default=None, alias="updateNodeOnSelect"
    )


class BlueprintData(ApiModel):
    """The content of a blueprint.

    Diagram elements (nodes, edges, groups...) are kept as plain dicts: their
    shape depends on the element type and is owned by the Cloudcraft editor.
    """

    live_account: LiveAccount | None = Field(default=None, alias="liveAccount")
    theme: Theme | None = None
    live_options: LiveOptions | None = Field(default=None, alias="liveOptions")
    name: str | None = None
    projection: str | None = None
    link_key: str | None = Field(default=None, alias="linkKey")
    grid: str | None = None
    images: list[Element] | None = None
    groups: list[Element] | None = None
    nodes: list[Element] | None = None
    icons: list[Element] | None = None
    surfaces: list[Element] | None = None
    connectors: list[Element] | None = None
    edges: list[Element] | None = None
    text: list[Element] | None = None
    disabled_layers: list[str] | None = Field(default=None, alias="disabledLayers")
    version: int | None = None
    share_docs: bool | None = Field(default=None, alias="shareDocs")


class Blueprint(ApiModel):
    """A blueprint stored in Cloudcraft."""

    id: str | None = None
    name: str | None = None
    data: BlueprintData | None = None
    tags: list[str] | None = None
    read_access: list[str] | None = Field(default=None, alias="readAccess")
    write_access: list[str] | None = Field(default=None, alias="writeAccess")
    customer_id: str | None = Field(default=None, alias="CustomerId")
    creator_id: str | None = Field(default=None, alias="CreatorId")
    current_version_id: str | None = Field(default=None, alias="CurrentVersionId")
    last_user_id: str | None = Field(default=None, alias="LastUserId")
    created_at: datetime | None = Field(default=None, alias="createdAt")
    updated_at: datetime | None = Field(default=None, alias="updatedAt")
