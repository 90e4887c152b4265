"""Base model configuration for locally persisted domain models."""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DomainModel(BaseModel):
    """
    Base class for the records kept in the local session aggregate.

    Serialized with camelCase keys, constructed with either snake_case
    names or camelCase aliases. Bytes travel as base64 in JSON, so
    persistence must go through the JSON helpers below rather than
    ``model_dump()``.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        validate_assignment=True,
        ser_json_bytes="base64",
        val_json_bytes="base64",
    )

    def to_json(self) -> str:
        """Serialize using the persisted (camelCase) keys."""
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_json(cls, payload: str | bytes) -> Self:
        return cls.model_validate_json(payload)
