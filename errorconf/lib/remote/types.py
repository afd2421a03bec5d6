from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from errorconf.domain.categories import ErrorCategory, parse_category

# Wire models for remotely served error configuration.
# They only check payload shape; merge rules live in the domain builder.


class RemoteCodeGroup(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: int
    # Missing, null or empty means the rule applies to the whole major code.
    subcodes: list[int] = Field(default_factory=list)

    @field_validator("subcodes", mode="before")
    @classmethod
    def _null_subcodes_as_empty(cls, value: object) -> object:
        return [] if value is None else value


class RemoteConfigurationEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: ErrorCategory
    # May be empty here; the builder rejects such entries.
    items: list[RemoteCodeGroup]

    @field_validator("name", mode="before")
    @classmethod
    def _known_category(cls, value: object) -> object:
        if isinstance(value, str):
            return parse_category(value)
        return value


class RemoteConfigurationEntryList(BaseModel):
    configurations: list[RemoteConfigurationEntry]
