from __future__ import annotations

import logging
import sys

from textual import events
from textual.app import App, ComposeResult
from textual.containers import Vertical
from textual.screen import Screen
from textual.widgets import Footer, Header, Static

import render
from config import APP_NAME, LOG_LEVEL, LOG_PATH
from errors import QuoteUnavailable
from quote_store import QuoteStore
from quotes import QuoteSource
from session import RoundSummary, SessionState

logger = logging.getLogger(__name__)

WORD_DELETE_KEYS = {"ctrl+w", "ctrl+backspace"}
BACKSPACE_KEYS = {"backspace", "delete"}


class GameScreen(Screen):
    BINDINGS = [("escape", "quit_game", "Quit")]

    def __init__(self, state: SessionState) -> None:
        super().__init__()
        self.state = state

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="game"):
            yield Static("", id="status")
            yield Static("Loading quote...", id="author")
            yield Static("", id="quote")
            yield Static("", id="typed")
            yield Static("", id="session")
        yield Footer()

    def on_mount(self) -> None:
        try:
            self.state.start()
        except QuoteUnavailable as e:
            self._abort(e)
            return
        self._redraw()

    def on_key(self, event: events.Key) -> None:
        if not self.state.is_active:
            return
        key = event.key
        if key == "escape":
            return
        try:
            if key in WORD_DELETE_KEYS:
                self.state.on_word_delete()
            elif key in BACKSPACE_KEYS:
                self.state.on_backspace()
            elif event.is_printable and event.character:
                summary = self.state.on_character(event.character)
                if summary is not None:
                    self._round_finished(summary)
            else:
                return
        except QuoteUnavailable as e:
            self._abort(e)
            return
        event.stop()
        self._redraw()

    def action_quit_game(self) -> None:
        self.state.on_escape()
        self.app.exit(return_code=0)

    def _round_finished(self, summary: RoundSummary) -> None:
        message = f"{summary.wpm:.0f} WPM, {summary.accuracy:.0f}% accuracy, score {summary.score}"
        if summary.new_high_score:
            self.notify(message, title="New high score!")
        else:
            self.notify(message, title="Round complete")

    def _abort(self, error: QuoteUnavailable) -> None:
        logger.error("Quote unavailable, stopping: %s", error)
        self.state.on_escape()
        self.app.exit(return_code=1, message=f"{error}. Check your connection and try again.")

    def _redraw(self) -> None:
        self.query_one("#status", Static).update(render.status_bar(self.state))
        self.query_one("#author", Static).update(render.author_text(self.state))
        self.query_one("#quote", Static).update(render.quote_text(self.state))
        self.query_one("#typed", Static).update(render.input_text(self.state))
        self.query_one("#session", Static).update(render.session_line(self.state))


class TypingGameApp(App):
    CSS = """
    #game {
        padding: 1 2;
        align: center middle;
    }

    #status {
        content-align: center middle;
        text-style: bold;
        margin-bottom: 1;
    }

    #author {
        content-align: center middle;
        margin-bottom: 1;
    }

    #quote {
        border: solid $primary;
        padding: 1;
        height: auto;
    }

    #typed {
        border: solid $secondary;
        padding: 1;
        height: auto;
        min-height: 3;
    }

    #session {
        color: $text-muted;
        margin-top: 1;
    }
    """

    TITLE = APP_NAME

    def __init__(self, state: SessionState) -> None:
        super().__init__()
        self.state = state

    def on_mount(self) -> None:
        self.push_screen(GameScreen(self.state))


def configure_logging() -> None:
    """Send log records to a file; the terminal belongs to the UI."""
    LOG_PATH.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=LOG_PATH,
        level=getattr(logging, LOG_LEVEL, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def main() -> int:
    configure_logging()
    state = SessionState(QuoteSource(QuoteStore()))
    app = TypingGameApp(state)
    app.run()
    logger.info(
        "Session ended after %d rounds, high score %d",
        state.rounds_completed,
        state.high_score,
    )
    return app.return_code or 0


if __name__ == "__main__":
    sys.exit(main())
