"""Shared test fixtures and configuration for pytest."""

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from quizclient.config.settings import get_settings
from quizclient.models.quiz import QuizData, QuizQuestion
from quizclient.services.quiz_service import QuizService

TEST_BASE_URL = "http://quiz.test"


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_question() -> QuizQuestion:
    """Create a sample QuizQuestion for testing."""
    return QuizQuestion(
        prompt="What is the capital of France?",
        options=("London", "Paris", "Berlin", "Madrid"),
        correct_index=1,
    )


@pytest.fixture
def sample_quiz() -> QuizData:
    """Create a sample QuizData for testing."""
    return QuizData(
        quiz_id="665f1c2e9b1e8a0012345678",
        topic="General Knowledge",
        difficulty="medium",
        question_count=3,
        questions=(
            QuizQuestion(prompt="What is 2 + 2?", options=("3", "4", "5", "6"), correct_index=1),
            QuizQuestion(
                prompt="Who wrote '1984'?",
                options=("Aldous Huxley", "George Orwell", "Ray Bradbury", "Philip K. Dick"),
                correct_index=1,
            ),
            QuizQuestion(
                prompt="What is the chemical symbol for gold?",
                options=("Au", "Ag", "Gd", "Go"),
                correct_index=0,
            ),
        ),
    )


@pytest.fixture
def sample_payload() -> dict[str, Any]:
    """Create a quiz payload shaped like the backend's response."""
    return {
        "quizId": "665f1c2e9b1e8a0012345678",
        "topic": "World War II",
        "difficulty": "medium",
        "questionCount": 2,
        "questions": [
            {
                "question": "In which year did World War II end?",
                "options": ["1943", "1944", "1945", "1946"],
                "answerIndex": 2,
            },
            {
                "question": "Which operation was the D-Day landing?",
                "options": ["Overlord", "Barbarossa", "Market Garden", "Torch"],
                "answerIndex": 0,
            },
        ],
    }


@pytest.fixture
def sample_payload_text(sample_payload: dict[str, Any]) -> str:
    """Serialize the sample payload the way the backend would."""
    return json.dumps(sample_payload)


@pytest.fixture
def recorded_requests() -> list[httpx.Request]:
    """Collect requests sent through a mocked service."""
    return []


@pytest.fixture
def make_service(
    recorded_requests: list[httpx.Request],
) -> Callable[[Callable[[httpx.Request], httpx.Response]], QuizService]:
    """Build a QuizService whose HTTP traffic goes to a handler function."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> QuizService:
        def _record(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            return handler(request)

        client = httpx.Client(transport=httpx.MockTransport(_record))
        return QuizService(base_url=TEST_BASE_URL, client=client)

    return _make
