"""Recursive-descent parser for the subset of JSON used by quiz payloads."""

from .values import (
    JSON_FALSE,
    JSON_NULL,
    JSON_TRUE,
    JsonList,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
)

# Containers nested deeper than this are rejected instead of exhausting the stack.
MAX_DEPTH = 256

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
# Digits in INT64_MIN; longer integral lexemes cannot fit.
_INT64_MAX_DIGITS = 19

_WHITESPACE = frozenset(" \n\r\t")
_DIGITS = frozenset("0123456789")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_SIMPLE_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}


class JsonParseError(ValueError):
    """Raised when the input is not a well-formed JSON document.

    Attributes:
        message: What went wrong, without the position suffix.
        position: 0-based character offset where parsing stopped.
    """

    def __init__(self, message: str, position: int):
        super().__init__(f"{message} at position {position}")
        self.message = message
        self.position = position


def parse_json(text: str) -> JsonValue:
    """
    Parse a complete JSON document into a value tree.

    Args:
        text: The whole document; trailing content after the root value is rejected

    Returns:
        The root JsonValue

    Raises:
        JsonParseError: If the document is malformed anywhere
    """
    return _Parser(text).parse()


class _Parser:
    """Single-use cursor over one input buffer."""

    def __init__(self, text: str):
        self._text = text
        self._index = 0
        self._depth = 0

    def parse(self) -> JsonValue:
        value = self._parse_value()
        self._skip_whitespace()
        if not self._at_end():
            raise self._error("Unexpected characters after JSON content")
        return value

    def _parse_value(self) -> JsonValue:
        self._skip_whitespace()
        if self._at_end():
            raise self._error("Unexpected end of JSON input")

        char = self._text[self._index]
        if char == "{":
            return self._parse_object()
        if char == "[":
            return self._parse_array()
        if char == '"':
            return JsonString(self._parse_string())
        if char == "t":
            self._expect_literal("true")
            return JSON_TRUE
        if char == "f":
            self._expect_literal("false")
            return JSON_FALSE
        if char == "n":
            self._expect_literal("null")
            return JSON_NULL
        if char == "-" or char in _DIGITS:
            return self._parse_number()
        raise self._error(f"Unexpected character: {char}")

    def _parse_object(self) -> JsonObject:
        self._expect("{")
        self._enter()
        members: dict[str, JsonValue] = {}
        self._skip_whitespace()
        if not self._match("}"):
            while True:
                self._skip_whitespace()
                key = self._parse_string()
                self._skip_whitespace()
                self._expect(":")
                members[key] = self._parse_value()
                self._skip_whitespace()
                if not self._match(","):
                    break
            self._expect("}")
        self._depth -= 1
        return JsonObject.from_dict(members)

    def _parse_array(self) -> JsonList:
        self._expect("[")
        self._enter()
        items: list[JsonValue] = []
        self._skip_whitespace()
        if not self._match("]"):
            while True:
                items.append(self._parse_value())
                self._skip_whitespace()
                if not self._match(","):
                    break
            self._expect("]")
        self._depth -= 1
        return JsonList(tuple(items))

    def _parse_string(self) -> str:
        self._expect('"')
        chunks: list[str] = []
        text = self._text
        while not self._at_end():
            char = text[self._index]
            self._index += 1
            if char == '"':
                return "".join(chunks)
            if char != "\\":
                chunks.append(char)
                continue

            if self._at_end():
                raise self._error("Unterminated escape sequence in string")
            escaped = text[self._index]
            self._index += 1
            if escaped in _SIMPLE_ESCAPES:
                chunks.append(_SIMPLE_ESCAPES[escaped])
            elif escaped == "u":
                chunks.append(self._parse_unicode_escape())
            else:
                raise self._error(f"Invalid escape sequence: \\{escaped}")
        raise self._error("Unterminated string literal")

    def _parse_unicode_escape(self) -> str:
        # One UTF-16 code unit; surrogate halves are kept as-is.
        code_unit = 0
        for _ in range(4):
            if self._at_end():
                raise self._error("Incomplete unicode escape sequence")
            hex_char = self._text[self._index]
            self._index += 1
            if hex_char not in _HEX_DIGITS:
                raise self._error(f"Invalid hex digit in unicode escape: {hex_char}")
            code_unit = (code_unit << 4) | int(hex_char, 16)
        return chr(code_unit)

    def _parse_number(self) -> JsonNumber:
        start = self._index
        self._match("-")
        if not self._match("0"):
            self._consume_digits()

        fractional = False
        if self._match("."):
            fractional = True
            self._consume_digits()
        if self._peek() in ("e", "E"):
            fractional = True
            self._index += 1
            if self._peek() in ("+", "-"):
                self._index += 1
            self._consume_digits()

        lexeme = self._text[start : self._index]
        if fractional:
            return JsonNumber(float(lexeme), fractional=True)
        if len(lexeme.lstrip("-")) > _INT64_MAX_DIGITS:
            raise self._error(f"Invalid number: {lexeme}")
        value = int(lexeme)
        if not INT64_MIN <= value <= INT64_MAX:
            raise self._error(f"Invalid number: {lexeme}")
        return JsonNumber(value)

    def _consume_digits(self) -> None:
        if self._peek() not in _DIGITS:
            raise self._error("Expected digit")
        while self._peek() in _DIGITS:
            self._index += 1

    def _expect(self, expected: str) -> None:
        if not self._match(expected):
            raise self._error(f"Expected '{expected}'")

    def _expect_literal(self, literal: str) -> None:
        for char in literal:
            if self._peek() != char:
                raise self._error(f'Expected "{literal}"')
            self._index += 1

    def _match(self, expected: str) -> bool:
        if self._peek() != expected:
            return False
        self._index += 1
        return True

    def _peek(self) -> str:
        # Empty string at end of input never matches a token character.
        return self._text[self._index : self._index + 1]

    def _enter(self) -> None:
        self._depth += 1
        if self._depth > MAX_DEPTH:
            raise self._error("Maximum nesting depth exceeded")

    def _skip_whitespace(self) -> None:
        text = self._text
        while self._index < len(text) and text[self._index] in _WHITESPACE:
            self._index += 1

    def _at_end(self) -> bool:
        return self._index >= len(self._text)

    def _error(self, message: str) -> JsonParseError:
        return JsonParseError(message, self._index)
