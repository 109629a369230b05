import asyncio
from datetime import datetime, timezone

import pytest

from opinion_cards.errors import SummarizationError
from opinion_cards.models import Card, Suggestion
from opinion_cards.store import CardStore


FIXED_NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


class FakeSummarizer:
    def __init__(self, text: str = "Generated PRD text"):
        self.text = text
        self.prompts: list[str] = []

    async def summarize(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.text


class FailingSummarizer:
    def __init__(self, cause: str = "timed out after 60s"):
        self.cause = cause
        self.calls = 0

    async def summarize(self, prompt: str) -> str:
        self.calls += 1
        raise SummarizationError(self.cause)


class BlockingSummarizer:
    """Holds every call until release() so tests can overlap requests."""

    def __init__(self, text: str = "Generated PRD text"):
        self.text = text
        self.calls = 0
        self._release = asyncio.Event()

    def release(self) -> None:
        self._release.set()

    async def summarize(self, prompt: str) -> str:
        self.calls += 1
        await self._release.wait()
        return f"{self.text} #{self.calls}"


def make_suggestion(n: int, author: str = "alice") -> Suggestion:
    return Suggestion(
        id=f"s{n}",
        suggestion=f"Suggestion number {n}",
        author=author,
        date=datetime(2024, 4, n, 9, 30, tzinfo=timezone.utc),
    )


@pytest.fixture
def cats_card() -> Card:
    return Card(
        id="card-3",
        content="I think cats are better than dogs",
        category="MIS ONE",
        duration="10 days",
        approved_count=89,
        rejected_count=76,
        suggestions=(
            Suggestion(
                id="s1",
                suggestion="Both have their own charms",
                author="alice",
                date=datetime(2024, 4, 20, 8, 0, tzinfo=timezone.utc),
            ),
            Suggestion(
                id="s2",
                suggestion="Cats are easier for apartments",
                author="bob",
                date=datetime(2024, 4, 21, 8, 0, tzinfo=timezone.utc),
            ),
            Suggestion(
                id="s3",
                suggestion="Dogs get you outside more",
                author="carol",
                date=datetime(2024, 4, 22, 8, 0, tzinfo=timezone.utc),
            ),
        ),
    )


@pytest.fixture
def empty_card() -> Card:
    return Card(
        id="card-9",
        content="Standups should be async",
        category="Tech",
        duration="1 day",
    )


@pytest.fixture
def store(cats_card, empty_card) -> CardStore:
    return CardStore([cats_card, empty_card])
