"""Tests for the user store interfaces."""

from quizclient.models.quiz import QuizResult
from quizclient.services.collaborators import CredentialStore, HistoryStore
from quizclient.services.scoring import grade_answers


class MemoryHistory:
    """Minimal in-memory history store."""

    def __init__(self):
        self.rows: list[tuple[str, QuizResult]] = []

    def record_result(self, username: str, result: QuizResult) -> None:
        self.rows.append((username, result))

    def list_results(self, username: str) -> list[QuizResult]:
        return [result for name, result in reversed(self.rows) if name == username]


class MemoryCredentials:
    """Minimal in-memory credential store."""

    def __init__(self):
        self.users: dict[str, str] = {}

    def authenticate(self, username: str, password: str) -> bool:
        return self.users.get(username) == password

    def register(self, username: str, password: str) -> None:
        self.users[username] = password


class TestProtocols:
    """Test that simple stores satisfy the protocols."""

    def test_history_store_protocol(self, sample_quiz):
        """Test that a history store can record graded attempts."""
        store = MemoryHistory()
        assert isinstance(store, HistoryStore)

        store.record_result("ada", grade_answers(sample_quiz, [1, 1, 0]))
        store.record_result("bob", grade_answers(sample_quiz, [0, 0, 1]))

        results = store.list_results("ada")
        assert len(results) == 1
        assert results[0].score_percent == 100

    def test_credential_store_protocol(self):
        """Test that a credential store matches the protocol."""
        store = MemoryCredentials()
        assert isinstance(store, CredentialStore)

        store.register("ada", "secret")
        assert store.authenticate("ada", "secret")
        assert not store.authenticate("ada", "wrong")

    def test_unrelated_object_is_not_a_store(self):
        """Test that the runtime check looks at the methods."""
        assert not isinstance(object(), HistoryStore)
        assert not isinstance(MemoryHistory(), CredentialStore)
