from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _int_or_none(value: Any) -> int | None:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


class EngineCallOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    method: str = "GET"
    headers: Mapping[str, str] = Field(default_factory=dict, validate_default=True)
    body: Any = None

    @field_validator("headers", mode="after")
    @classmethod
    def _freeze_headers(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))


# Engine envelopes are parsed leniently: a malformed field becomes None
# without discarding the rest of the envelope.
class EngineError(BaseModel):
    model_config = ConfigDict(extra="allow")

    message: str | None = None
    statusCode: int | None = None

    @field_validator("message", mode="before")
    @classmethod
    def _message(cls, value: Any) -> str | None:
        return value if isinstance(value, str) else None

    @field_validator("statusCode", mode="before")
    @classmethod
    def _status_code(cls, value: Any) -> int | None:
        return _int_or_none(value)


class EngineResponseEnvelope(BaseModel):
    model_config = ConfigDict(extra="allow")

    result: Any = None
    error: EngineError | None = None
    statusCode: int | None = None

    @field_validator("error", mode="before")
    @classmethod
    def _error(cls, value: Any) -> Any:
        return value if isinstance(value, dict) else None

    @field_validator("statusCode", mode="before")
    @classmethod
    def _status_code(cls, value: Any) -> int | None:
        return _int_or_none(value)


class WriteContractBody(BaseModel):
    functionName: str
    args: list[Any]
    txOverrides: dict[str, str] = Field(default_factory=dict)
