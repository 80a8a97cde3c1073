"""Data models for quiz requests and payloads."""

from .quiz import (
    QuestionDifficulty,
    QuizData,
    QuizQuestion,
    QuizRequest,
    QuizResult,
)

__all__ = [
    "QuizQuestion",
    "QuizData",
    "QuizRequest",
    "QuizResult",
    "QuestionDifficulty",
]
