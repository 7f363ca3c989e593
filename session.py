from __future__ import annotations

import enum
import logging
import time
from dataclasses import dataclass
from typing import Callable

from errors import EmptyQuoteError
from metrics import compute_metrics, speed, words_per_minute
from quotes import Quote, QuoteSource

logger = logging.getLogger(__name__)


class SessionPhase(enum.Enum):
    IDLE = "idle"
    TYPING = "typing"
    ROUND_COMPLETE = "round_complete"
    ENDED = "ended"


@dataclass(frozen=True)
class RoundSummary:
    quote: Quote
    elapsed_s: float
    chars: int
    errors: int
    accuracy: float
    wpm: float
    score: int
    new_high_score: bool


class SessionState:
    """Typing state for one process lifetime, spanning many rounds.

    A round starts when a quote is assigned and ends the moment the input
    is as long as the quote. The round timer starts on the first typed
    character, not when the quote appears. Completed rounds fold into the
    cumulative totals, the finished quote is handed to the source for
    storage and the next quote is fetched immediately.
    """

    def __init__(self, source: QuoteSource, clock: Callable[[], float] = time.monotonic) -> None:
        self.source = source
        self.clock = clock
        self.phase = SessionPhase.IDLE

        self.quote: Quote | None = None
        self.user_input = ""
        self.started_typing = False
        self.round_start_time = 0.0
        self.round_elapsed_s = 0.0
        self.round_chars = 0

        self.total_time = 0.0
        self.total_chars = 0
        self.total_errors = 0
        self.rounds_completed = 0
        self.high_score = 0

        self.accuracy = 0.0
        self.errors = 0
        self.speed = 0.0
        self.wpm = 0.0
        self.score = 0

    @property
    def target_text(self) -> str:
        return self.quote.text if self.quote else ""

    @property
    def is_active(self) -> bool:
        return self.phase == SessionPhase.TYPING

    @property
    def session_wpm(self) -> float:
        return words_per_minute(speed(self.total_chars, self.total_time))

    def start(self) -> None:
        """Fetch the first quote. Raises QuoteUnavailable if there is none."""
        if self.phase == SessionPhase.ENDED:
            return
        self.begin_round(self.source.fetch())

    def begin_round(self, quote: Quote) -> None:
        if self.phase == SessionPhase.ENDED:
            return
        if not quote.text.strip():
            raise EmptyQuoteError("cannot begin a round with an empty quote")
        self.quote = Quote(text=quote.text.strip(), author=quote.author)
        self.user_input = ""
        self.started_typing = False
        self.round_start_time = 0.0
        self.round_elapsed_s = 0.0
        self.round_chars = 0
        self.accuracy = 0.0
        self.errors = 0
        self.speed = 0.0
        self.wpm = 0.0
        self.score = 0
        self.phase = SessionPhase.TYPING

    def on_character(self, ch: str) -> RoundSummary | None:
        """Append a typed character.

        Returns the summary of the round when this character completed it.
        May raise QuoteUnavailable if the following quote cannot be fetched.
        """
        if not self.is_active or not ch:
            return None
        if not self.started_typing:
            self.started_typing = True
            self.round_start_time = self.clock()

        self.round_chars += 1
        self.user_input += ch
        self._recompute()

        if len(self.user_input) >= len(self.target_text):
            return self._complete_round()
        return None

    def on_backspace(self) -> None:
        if not self.is_active or not self.user_input:
            return
        self.user_input = self.user_input[:-1]
        self._recompute()

    def on_word_delete(self) -> None:
        """Delete back to the previous space, or one character if the input ends in a space."""
        if not self.is_active or not self.user_input:
            return
        if self.user_input.endswith(" "):
            self.on_backspace()
            return
        self.user_input = self.user_input[: self.user_input.rfind(" ") + 1]
        self._recompute()

    def on_escape(self) -> None:
        self.phase = SessionPhase.ENDED

    def _recompute(self) -> None:
        if self.started_typing:
            self.round_elapsed_s = self.clock() - self.round_start_time
        metrics = compute_metrics(self.target_text, self.user_input, self.round_elapsed_s)
        self.accuracy = metrics.accuracy
        self.errors = metrics.errors
        self.speed = metrics.speed
        self.wpm = metrics.wpm
        self.score = metrics.score

    def _complete_round(self) -> RoundSummary:
        self.phase = SessionPhase.ROUND_COMPLETE
        completed = self.quote

        self.total_time += self.round_elapsed_s
        self.total_chars += self.round_chars
        self.total_errors += self.errors
        self.rounds_completed += 1
        new_high_score = self.score > self.high_score
        if new_high_score:
            self.high_score = self.score

        summary = RoundSummary(
            quote=completed,
            elapsed_s=self.round_elapsed_s,
            chars=self.round_chars,
            errors=self.errors,
            accuracy=self.accuracy,
            wpm=self.wpm,
            score=self.score,
            new_high_score=new_high_score,
        )
        logger.debug(
            "Round %d complete: %.1fs, %d chars, score %d",
            self.rounds_completed,
            summary.elapsed_s,
            summary.chars,
            summary.score,
        )

        self.source.remember(completed)
        self.begin_round(self.source.fetch())
        return summary
