import pytest

from replypilot.services.providers import TextProvider
from replypilot.services.reply_router import ReplyRouter
from replypilot.services.usage import UsageTracker


class FakeProvider(TextProvider):
    """In-memory provider that returns canned replies or raises."""

    def __init__(self, name: str, replies=("Thank you for your order!",), error: Exception | None = None):
        super().__init__(api_key="test-key", model=f"{name}-model")
        self.name = name
        self.replies = list(replies)
        self.error = error
        self.calls: list[tuple[str, str]] = []

    def complete(self, system: str, user: str) -> str:
        self.calls.append((system, user))
        if self.error is not None:
            raise self.error
        if len(self.replies) > 1:
            return self.replies.pop(0)
        return self.replies[0]


@pytest.fixture
def groq():
    return FakeProvider("groq", replies=["Thank you for your order! We hope you enjoy it."])


@pytest.fixture
def gemini():
    return FakeProvider("gemini", replies=["Salamat po sa order niyo! Sana magustuhan niyo."])


@pytest.fixture
def usage():
    return UsageTracker()


@pytest.fixture
def reply_router(groq, gemini, usage):
    return ReplyRouter(providers={"groq": groq, "gemini": gemini}, usage=usage)
