"""JSON parsing and request encoding for the quiz backend."""

from .encoder import encode_quiz_request, escape_json_string
from .parser import MAX_DEPTH, JsonParseError, parse_json
from .values import (
    JsonBool,
    JsonList,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
)

__all__ = [
    "parse_json",
    "JsonParseError",
    "MAX_DEPTH",
    "encode_quiz_request",
    "escape_json_string",
    "JsonValue",
    "JsonNull",
    "JsonBool",
    "JsonNumber",
    "JsonString",
    "JsonList",
    "JsonObject",
]
