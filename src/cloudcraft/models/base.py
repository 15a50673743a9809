"""Base model for payloads exchanged with the API."""

import typing as t

from pydantic import BaseModel, ConfigDict, ValidationError

from ..domain.exceptions import ResponseDecodeError

M = t.TypeVar("M", bound="ApiModel")


class ApiModel(BaseModel):
    """Base for API payloads.

    Fields use snake_case in Python and the API's own names as aliases.
    Unknown fields returned by the API are kept so an object read from the API
    can be sent back without losing data.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    def to_payload(self) -> bytes:
        """Serialise to JSON using API field names, omitting unset values."""
        return self.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")

    @classmethod
    def from_payload(cls: type[M], data: t.Any) -> M:
        """Validate decoded JSON into a model.

        Raises:
            ResponseDecodeError: If data does not match the model
        """
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ResponseDecodeError(cls.__name__) from exc
