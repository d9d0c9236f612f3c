from __future__ import annotations

import json
from typing import Any, Type, TypeVar

from pydantic import BaseModel as _BaseModel
from pydantic import ConfigDict, ValidationError

from ..exceptions import ParserError
from ..utils.aliases import AliasGenerator

__all__ = ("BaseModel",)

T = TypeVar("T", bound="BaseModel")


class BaseModel(_BaseModel):
    model_config = ConfigDict(
        alias_generator=AliasGenerator.to_camel_case,
        populate_by_name=True,
        extra="ignore",
    )

    @classmethod
    def from_string(cls: Type[T], value: str | bytes) -> T:
        if isinstance(value, bytes):
            value = value.decode("utf-8")

        if isinstance(value, str):
            try:
                data = json.loads(value)
                return cls.model_validate(data)
            except (json.JSONDecodeError, ValidationError) as e:
                raise ParserError(f"Cannot parse JSON string to {cls.__name__}: {e}") from e

        raise ParserError(f"Input must be a valid JSON string or bytes, not {type(value).__name__}")

    @classmethod
    def from_dict(cls: Type[T], data: dict | Any) -> T:
        if isinstance(data, cls):
            return data
        if isinstance(data, dict):
            try:
                return cls.model_validate(data)
            except ValidationError as e:
                raise ParserError(f"Cannot parse dict to {cls.__name__}: {e}") from e
        raise ParserError(f"Input must be a dictionary or an instance of {cls.__name__}")

    def to_dict(self, **kwargs: Any) -> dict[str, Any]:
        kwargs.setdefault("by_alias", True)
        return self.model_dump(**kwargs)

    def to_json(self, **kwargs: Any) -> str:
        kwargs.setdefault("by_alias", True)
        return self.model_dump_json(**kwargs)
