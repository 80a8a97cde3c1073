"""Pydantic models for quiz data structures."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from quizclient.parsing.encoder import encode_quiz_request


class QuestionDifficulty(str, Enum):
    """Difficulty levels accepted by the quiz backend."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class QuizQuestion(BaseModel):
    """A single multiple choice question with its correct option."""

    prompt: str = Field(..., min_length=1, description="The question text")
    options: tuple[str, ...] = Field(
        ...,
        min_length=1,
        description="Answer options in display order",
    )
    correct_index: int = Field(
        ...,
        ge=0,
        description="Index of the correct option",
    )

    @model_validator(mode="after")
    def validate_correct_index(self) -> "QuizQuestion":
        """Ensure the correct index points at one of the options."""
        if self.correct_index >= len(self.options):
            raise ValueError("correct_index out of bounds for options")
        return self

    @property
    def correct_option(self) -> str:
        """Get the text of the correct option."""
        return self.options[self.correct_index]

    def is_correct(self, selection: int | None) -> bool:
        """Check whether a selected option index is the right answer."""
        return selection == self.correct_index

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "example": {
                "prompt": "What is the capital of France?",
                "options": ["London", "Paris", "Berlin", "Madrid"],
                "correct_index": 1,
            }
        },
    }


class QuizData(BaseModel):
    """A generated quiz as returned by the backend."""

    quiz_id: str | None = Field(None, description="Backend identifier of the quiz")
    topic: str = Field(default="", description="Quiz topic")
    difficulty: str = Field(default="medium", description="Difficulty label")
    question_count: int = Field(..., description="Question count reported by the backend")
    questions: tuple[QuizQuestion, ...] = Field(
        ...,
        min_length=1,
        description="Questions in display order",
    )

    @model_validator(mode="before")
    @classmethod
    def default_question_count(cls, data: Any) -> Any:
        """Fall back to the number of questions when no count is given."""
        if isinstance(data, dict) and data.get("question_count") is None:
            questions = data.get("questions") or ()
            data = {**data, "question_count": len(questions)}
        return data

    @property
    def total_questions(self) -> int:
        """Get the number of questions actually present."""
        return len(self.questions)

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "example": {
                "quiz_id": "665f1c2e9b1e8a0012345678",
                "topic": "World War II",
                "difficulty": "medium",
                "question_count": 1,
                "questions": [
                    {
                        "prompt": "In which year did World War II end?",
                        "options": ["1943", "1944", "1945", "1946"],
                        "correct_index": 2,
                    }
                ],
            }
        },
    }


class QuizRequest(BaseModel):
    """Normalized parameters for one quiz generation request."""

    topic: str = Field(..., description="Quiz topic")
    question_count: int = Field(..., description="Number of questions to generate")
    difficulty: str = Field(default="medium", description="Difficulty label")

    @field_validator("topic", mode="before")
    @classmethod
    def validate_topic(cls, v: Any) -> Any:
        """Trim the topic and reject blank ones."""
        if v is None:
            v = ""
        if isinstance(v, str):
            v = v.strip()
            if not v:
                raise ValueError("Topic must not be empty")
        return v

    @field_validator("question_count")
    @classmethod
    def validate_question_count(cls, v: int) -> int:
        """Ask for at least one question."""
        return max(1, v)

    @field_validator("difficulty", mode="before")
    @classmethod
    def validate_difficulty(cls, v: Any) -> Any:
        """Lower-case the difficulty, defaulting to medium."""
        if v is None:
            return QuestionDifficulty.MEDIUM.value
        if isinstance(v, QuestionDifficulty):
            return v.value
        if isinstance(v, str):
            return v.lower()
        return v

    def to_json(self) -> str:
        """Serialize the request body for the generate endpoint."""
        return encode_quiz_request(self.topic, self.question_count, self.difficulty)

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "example": {
                "topic": "World War II",
                "question_count": 5,
                "difficulty": "medium",
            }
        },
    }


class QuizResult(BaseModel):
    """Outcome of answering every question of a quiz."""

    topic: str = Field(default="")
    difficulty: str = Field(default="medium")
    correct_count: int = Field(..., ge=0)
    total: int = Field(..., ge=1)
    score_percent: int = Field(..., ge=0, le=100)
    selections: tuple[int | None, ...] = Field(default_factory=tuple)

    def summary(self) -> str:
        """Render the score line shown after a quiz."""
        return f"Score: {self.score_percent}% ({self.correct_count}/{self.total} correct)"

    model_config = {"frozen": True}
