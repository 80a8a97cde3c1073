"""Immutable JSON value tree produced by the parser."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True, slots=True)
class JsonNull:
    """The JSON ``null`` literal."""

    def to_python(self) -> None:
        return None


@dataclass(frozen=True, slots=True)
class JsonBool:
    """A JSON ``true`` or ``false`` literal."""

    value: bool

    def to_python(self) -> bool:
        return self.value


@dataclass(frozen=True, slots=True)
class JsonNumber:
    """A JSON number.

    ``fractional`` is set when the lexeme had a fraction or an exponent, in
    which case ``value`` is a float; otherwise it is an int.
    """

    value: int | float
    fractional: bool = False

    def to_python(self) -> int | float:
        return self.value


@dataclass(frozen=True, slots=True)
class JsonString:
    """A JSON string with escapes already decoded."""

    value: str

    def to_python(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class JsonList:
    """An ordered JSON array."""

    items: tuple[JsonValue, ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[JsonValue]:
        return iter(self.items)

    def to_python(self) -> list[Any]:
        return [item.to_python() for item in self.items]


@dataclass(frozen=True, slots=True)
class JsonObject:
    """An ordered JSON object with unique string keys."""

    entries: tuple[tuple[str, JsonValue], ...] = ()

    @classmethod
    def from_dict(cls, members: dict[str, JsonValue]) -> JsonObject:
        """Freeze an insertion-ordered dict built by the parser."""
        return cls(tuple(members.items()))

    def get(self, key: str, default: JsonValue | None = None) -> JsonValue | None:
        for name, value in self.entries:
            if name == key:
                return value
        return default

    def keys(self) -> list[str]:
        return [name for name, _ in self.entries]

    def __contains__(self, key: object) -> bool:
        return any(name == key for name, _ in self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def to_python(self) -> dict[str, Any]:
        return {name: value.to_python() for name, value in self.entries}


JsonValue = Union[JsonNull, JsonBool, JsonNumber, JsonString, JsonList, JsonObject]

JSON_NULL = JsonNull()
JSON_TRUE = JsonBool(True)
JSON_FALSE = JsonBool(False)
