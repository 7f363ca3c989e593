from __future__ import annotations

import pytest

from errors import QuoteUnavailable
from quotes import Quote


class FakeClock:
    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeSource:
    """Serves a fixed queue of quotes and records what it was asked to keep."""

    def __init__(self, *texts: str) -> None:
        self.queue = [Quote(text=t, author="Tester") for t in texts]
        self.fetched = 0
        self.remembered: list[Quote] = []

    def fetch(self) -> Quote:
        self.fetched += 1
        if not self.queue:
            raise QuoteUnavailable()
        return self.queue.pop(0)

    def remember(self, quote: Quote) -> bool:
        self.remembered.append(quote)
        return True


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def make_source():
    return FakeSource
