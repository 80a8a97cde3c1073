"""Services for requesting, validating and grading quizzes."""

from .errors import (
    BackendStatusError,
    ErrorCategory,
    InvalidQuizRequestError,
    MalformedQuizError,
    QuizSchemaError,
    QuizServiceError,
    QuizTransportError,
)
from .mapper import SchemaValidationError, map_question, map_quiz_data
from .quiz_service import QuizService, parse_quiz_payload, request_quiz
from .scoring import grade_answers

__all__ = [
    "QuizService",
    "request_quiz",
    "parse_quiz_payload",
    "map_quiz_data",
    "map_question",
    "grade_answers",
    "SchemaValidationError",
    "ErrorCategory",
    "QuizServiceError",
    "InvalidQuizRequestError",
    "QuizTransportError",
    "BackendStatusError",
    "MalformedQuizError",
    "QuizSchemaError",
]
