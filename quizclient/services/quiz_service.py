"""Quiz Service - requests a quiz from the backend and validates the answer."""

import logging

import httpx
from pydantic import ValidationError

from quizclient.config.settings import Settings, get_settings
from quizclient.models.quiz import QuizData, QuizRequest
from quizclient.parsing.parser import JsonParseError, parse_json
from quizclient.services.errors import (
    BackendStatusError,
    InvalidQuizRequestError,
    MalformedQuizError,
    QuizSchemaError,
    QuizTransportError,
)
from quizclient.services.mapper import SchemaValidationError, map_quiz_data

logger = logging.getLogger(__name__)


class QuizService:
    """
    Client for the quiz generation endpoint.

    Each call to ``request_quiz`` performs exactly one POST with no retries.
    Only connection establishment is bounded by a timeout.
    """

    def __init__(
        self,
        base_url: str | None = None,
        client: httpx.Client | None = None,
        settings: Settings | None = None,
    ):
        self._settings = settings or get_settings()
        base = base_url or self._settings.api_base_url
        self._url = base.rstrip("/") + self._settings.generate_path
        self._owns_client = client is None
        self._client = client or httpx.Client(
            timeout=httpx.Timeout(None, connect=self._settings.connect_timeout_seconds)
        )

    @property
    def url(self) -> str:
        return self._url

    def request_quiz(
        self,
        topic: str,
        question_count: int,
        difficulty: str | None = "medium",
    ) -> QuizData:
        """
        Generate a quiz on the backend and return it validated.

        Args:
            topic: Quiz topic, must not be blank
            question_count: Requested number of questions, raised to at least 1
            difficulty: Difficulty label, lower-cased before sending

        Returns:
            QuizData parsed from the response body

        Raises:
            QuizServiceError: One of its subclasses for every failure mode
        """
        try:
            request = QuizRequest(
                topic=topic, question_count=question_count, difficulty=difficulty
            )
        except ValidationError as e:
            message = e.errors()[0]["msg"].removeprefix("Value error, ")
            raise InvalidQuizRequestError(message) from e

        logger.info(
            "Requesting %d %s question(s) on %r from %s",
            request.question_count,
            request.difficulty,
            request.topic,
            self._url,
        )

        try:
            response = self._client.post(
                self._url,
                content=request.to_json().encode("utf-8", errors="replace"),
                headers={"Content-Type": "application/json"},
            )
        except httpx.RequestError as e:
            raise QuizTransportError(
                f"Network error while contacting quiz backend: {e}"
            ) from e

        logger.debug("Quiz backend responded with status %d", response.status_code)
        if not response.is_success:
            raise BackendStatusError(response.status_code)

        return parse_quiz_payload(response.content.decode("utf-8", errors="replace"))

    def close(self) -> None:
        """Close the HTTP client if this service created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "QuizService":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def parse_quiz_payload(body: str) -> QuizData:
    """
    Parse and validate a quiz payload.

    Args:
        body: JSON text of the payload

    Returns:
        Validated QuizData

    Raises:
        MalformedQuizError: If the body is not well-formed JSON
        QuizSchemaError: If the JSON does not describe a valid quiz
    """
    try:
        root = parse_json(body)
    except JsonParseError as e:
        raise MalformedQuizError(f"Failed to parse quiz JSON: {e}", e.position) from e

    try:
        return map_quiz_data(root)
    except SchemaValidationError as e:
        raise QuizSchemaError(f"Invalid quiz payload: {e}") from e


def request_quiz(
    topic: str,
    question_count: int,
    difficulty: str | None = "medium",
) -> QuizData:
    """
    Request one quiz using the configured backend.

    Blocking and safe to call from a worker thread.

    Args:
        topic: Quiz topic
        question_count: Requested number of questions
        difficulty: Difficulty label

    Returns:
        Validated QuizData
    """
    with QuizService() as service:
        return service.request_quiz(topic, question_count, difficulty)
