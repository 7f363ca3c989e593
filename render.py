from __future__ import annotations

from rich.text import Text

from session import SessionState

CORRECT_STYLE = "on #2f4f2f"
INCORRECT_STYLE = "black on red"
AUTHOR_STYLE = "magenta"


def author_text(state: SessionState) -> Text:
    if state.quote is None:
        return Text("")
    return Text(state.quote.author, style=AUTHOR_STYLE)


def quote_text(state: SessionState) -> Text:
    """Target text, each character shaded by whether it has been typed correctly."""
    target = state.target_text
    typed = state.user_input
    rendered = Text()
    for i, ch in enumerate(target):
        if i < len(typed):
            rendered.append(ch, style=CORRECT_STYLE if typed[i] == ch else INCORRECT_STYLE)
        else:
            rendered.append(ch)
    return rendered


def input_text(state: SessionState) -> Text:
    """What the user typed, mistakes highlighted."""
    target = state.target_text
    rendered = Text()
    for i, ch in enumerate(state.user_input):
        if i < len(target) and ch == target[i]:
            rendered.append(ch)
        else:
            rendered.append("_" if ch == " " else ch, style=INCORRECT_STYLE)
    return rendered


def status_pairs(state: SessionState) -> list[tuple[str, int]]:
    return [
        ("Highscore", state.high_score),
        ("Score", state.score),
        ("Accuracy", int(state.accuracy)),
        ("WPM", int(state.wpm)),
        ("Time", int(state.round_elapsed_s)),
        ("Errors", state.errors),
    ]


def status_bar(state: SessionState) -> str:
    return " | ".join(f"{label}: {value}" for label, value in status_pairs(state))


def session_line(state: SessionState) -> str:
    return (
        f"Rounds: {state.rounds_completed} | "
        f"Chars: {state.total_chars} | "
        f"Time: {state.total_time:.0f}s | "
        f"Errors: {state.total_errors} | "
        f"Session WPM: {state.session_wpm:.1f}"
    )
