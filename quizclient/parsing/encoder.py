"""Serializer for the fixed-shape quiz generation request."""

_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def escape_json_string(value: str) -> str:
    """
    Escape a string for use between JSON double quotes.

    Quotes, backslashes and the common control characters get their short
    escapes; any other character below 0x20 becomes ``\\u00xx``.

    Args:
        value: Raw string

    Returns:
        Escaped string, without surrounding quotes
    """
    escaped = []
    for char in value:
        if char in _ESCAPES:
            escaped.append(_ESCAPES[char])
        elif char < " ":
            escaped.append(f"\\u{ord(char):04x}")
        else:
            escaped.append(char)
    return "".join(escaped)


def encode_quiz_request(topic: str, question_count: int, difficulty: str) -> str:
    """
    Build the request body sent to the quiz generation endpoint.

    Args:
        topic: Quiz topic
        question_count: Number of questions to ask for
        difficulty: Difficulty label

    Returns:
        JSON text of the form {"topic":...,"questionCount":...,"difficulty":...}
    """
    return (
        f'{{"topic":"{escape_json_string(topic)}",'
        f'"questionCount":{int(question_count)},'
        f'"difficulty":"{escape_json_string(difficulty)}"}}'
    )
