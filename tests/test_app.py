"""Tests for app – key dispatch through the Textual screen."""

from __future__ import annotations

import asyncio

import pytest

from app import TypingGameApp
from session import SessionPhase, SessionState


@pytest.fixture()
def state(clock, make_source) -> SessionState:
    return SessionState(make_source("hello world", "next"), clock=clock)


def press(state: SessionState, *keys: str) -> TypingGameApp:
    app = TypingGameApp(state)

    async def run() -> None:
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press(*keys)
            await pilot.pause()

    asyncio.run(run())
    return app


class TestKeys:
    def test_printable_keys_append(self, state):
        press(state, "h", "e", "space", "x")
        assert state.user_input == "he x"

    @pytest.mark.parametrize("key", ["backspace", "delete"])
    def test_removes_last_char(self, state, key):
        press(state, "h", "e", key)
        assert state.user_input == "h"

    def test_word_delete(self, state):
        press(state, "h", "i", "space", "y", "o", "ctrl+w")
        assert state.user_input == "hi "

    def test_escape_exits_cleanly(self, state):
        app = press(state, "h", "escape")
        assert state.phase == SessionPhase.ENDED
        assert app.return_code == 0
