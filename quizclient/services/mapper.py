"""Schema mapping from a parsed JSON tree to quiz domain objects."""

import math

from quizclient.models.quiz import QuizData, QuizQuestion
from quizclient.parsing.values import (
    JsonList,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
)


class SchemaValidationError(ValueError):
    """Raised when a well-formed JSON tree does not describe a valid quiz."""


def map_quiz_data(root: JsonValue) -> QuizData:
    """
    Map a parsed quiz payload to a validated QuizData.

    The mapping is all-or-nothing: the first invalid question aborts it.
    Optional root fields fall back to defaults instead of failing.

    Args:
        root: Root of the parsed payload

    Returns:
        QuizData with at least one question

    Raises:
        SchemaValidationError: If the payload does not match the quiz schema
    """
    if not isinstance(root, JsonObject):
        raise SchemaValidationError("root must be a JSON object")

    raw_questions = root.get("questions")
    if not isinstance(raw_questions, JsonList):
        raise SchemaValidationError("missing questions array")

    questions: list[QuizQuestion] = []
    for index, entry in enumerate(raw_questions):
        if not isinstance(entry, JsonObject):
            raise SchemaValidationError(
                f"invalid question at index {index}: question entry must be an object"
            )
        try:
            questions.append(map_question(entry))
        except SchemaValidationError as e:
            raise SchemaValidationError(f"invalid question at index {index}: {e}") from e

    if not questions:
        raise SchemaValidationError("zero questions")

    return QuizData(
        quiz_id=_optional_string(root.get("quizId")),
        topic=_optional_string(root.get("topic"), ""),
        difficulty=_optional_string(root.get("difficulty"), "medium"),
        question_count=_optional_int(root.get("questionCount"), len(questions)),
        questions=tuple(questions),
    )


def map_question(entry: JsonObject) -> QuizQuestion:
    """
    Map one question object to a QuizQuestion.

    ``prompt`` is accepted in place of ``question`` and ``correctIndex`` in
    place of ``answerIndex`` when the primary name is absent.

    Args:
        entry: Question object from the payload

    Returns:
        Validated QuizQuestion

    Raises:
        SchemaValidationError: If a field is missing, mistyped or out of range
    """
    prompt_value = entry.get("question") if "question" in entry else entry.get("prompt")
    match prompt_value:
        case JsonString(value=prompt) if prompt:
            pass
        case JsonString():
            raise SchemaValidationError("question prompt must not be empty")
        case _:
            raise SchemaValidationError("question prompt missing or not a string")

    options_value = entry.get("options")
    if not isinstance(options_value, JsonList):
        raise SchemaValidationError("options missing or not an array")
    options: list[str] = []
    for position, option in enumerate(options_value):
        match option:
            case JsonString(value=text):
                options.append(text)
            case _:
                raise SchemaValidationError(f"option at index {position} must be a string")

    answer_value = (
        entry.get("answerIndex") if "answerIndex" in entry else entry.get("correctIndex")
    )
    match answer_value:
        case JsonNumber(value=number) if math.isfinite(number):
            correct_index = int(number)
        case _:
            raise SchemaValidationError("answerIndex missing or not a number")
    if not 0 <= correct_index < len(options):
        raise SchemaValidationError(
            f"answerIndex out of bounds for {len(options)} options: {correct_index}"
        )

    return QuizQuestion(prompt=prompt, options=tuple(options), correct_index=correct_index)


def _optional_string(value: JsonValue | None, fallback: str | None = None) -> str | None:
    match value:
        case JsonString(value=text):
            return text
        case _:
            return fallback


def _optional_int(value: JsonValue | None, fallback: int) -> int:
    match value:
        case JsonNumber(value=number) if math.isfinite(number):
            return int(number)
        case _:
            return fallback
