from __future__ import annotations

import math
from dataclasses import dataclass

# 60 seconds / 5 characters per average word
WPM_PER_CPS = 60 / 5


@dataclass(frozen=True)
class RoundMetrics:
    accuracy: float
    errors: int
    speed: float
    wpm: float
    score: int


def compute_correct_chars(target_text: str, typed_text: str) -> int:
    correct = 0
    for i, ch in enumerate(typed_text):
        if i >= len(target_text):
            break
        if ch == target_text[i]:
            correct += 1
    return correct


def accuracy(typed_text: str, target_text: str) -> float:
    """Percentage of the whole target typed correctly so far, in [0, 100].

    The denominator is the target length, not the number of characters
    typed, so accuracy only reaches 100 once the full target is matched.
    """
    if not target_text:
        return 0.0
    return 100.0 * compute_correct_chars(target_text, typed_text) / len(target_text)


def error_count(typed_text: str, target_text: str) -> int:
    common = min(len(typed_text), len(target_text))
    return sum(1 for i in range(common) if typed_text[i] != target_text[i])


def speed(char_count: int, elapsed_s: float) -> float:
    """Characters per second; 0.0 before any time has passed."""
    if elapsed_s <= 0:
        return 0.0
    return char_count / elapsed_s


def words_per_minute(chars_per_s: float) -> float:
    return chars_per_s * WPM_PER_CPS


def score(accuracy_pct: float, chars_per_s: float) -> int:
    return int(2 * accuracy_pct * math.floor(chars_per_s))


def compute_metrics(target_text: str, typed_text: str, elapsed_s: float) -> RoundMetrics:
    cps = speed(len(typed_text), elapsed_s)
    acc = accuracy(typed_text, target_text)
    return RoundMetrics(
        accuracy=acc,
        errors=error_count(typed_text, target_text),
        speed=cps,
        wpm=words_per_minute(cps),
        score=score(acc, cps),
    )
