"""Error hierarchy surfaced by the quiz service."""

from enum import Enum


class ErrorCategory(str, Enum):
    """Failure categories a quiz request can end in."""

    INPUT = "input"
    TRANSPORT = "transport"
    PROTOCOL = "protocol"
    SYNTAX = "syntax"
    SCHEMA = "schema"


class QuizServiceError(Exception):
    """Base exception for every failure of a quiz request."""

    category: ErrorCategory


class InvalidQuizRequestError(QuizServiceError):
    """Raised when request parameters are rejected before any network activity."""

    category = ErrorCategory.INPUT


class QuizTransportError(QuizServiceError):
    """Raised when the backend cannot be reached or the connection fails."""

    category = ErrorCategory.TRANSPORT


class BackendStatusError(QuizServiceError):
    """Raised when the backend answers with a non-2xx status."""

    category = ErrorCategory.PROTOCOL

    def __init__(self, status_code: int):
        super().__init__(f"Backend returned status {status_code}")
        self.status_code = status_code


class MalformedQuizError(QuizServiceError):
    """Raised when the response body is not well-formed JSON."""

    category = ErrorCategory.SYNTAX

    def __init__(self, message: str, position: int):
        super().__init__(message)
        self.position = position


class QuizSchemaError(QuizServiceError):
    """Raised when well-formed JSON does not describe a valid quiz."""

    category = ErrorCategory.SCHEMA
