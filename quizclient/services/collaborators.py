"""Interfaces of the user stores the quiz client works alongside."""

from typing import Protocol, runtime_checkable

from quizclient.models.quiz import QuizResult


@runtime_checkable
class CredentialStore(Protocol):
    """Username/password store used to sign users in."""

    def authenticate(self, username: str, password: str) -> bool:
        ...

    def register(self, username: str, password: str) -> None:
        ...


@runtime_checkable
class HistoryStore(Protocol):
    """Append-only log of quiz results per user."""

    def record_result(self, username: str, result: QuizResult) -> None:
        ...

    def list_results(self, username: str) -> list[QuizResult]:
        ...
