from __future__ import annotations

import logging
import re
import sqlite3
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

import requests

from config import FETCH_TIMEOUT_S, QUOTE_API_URL, USER_AGENT
from errors import (
    EmptyQuoteError,
    PersistenceFailure,
    QuoteUnavailable,
    RemoteQuoteError,
)

if TYPE_CHECKING:
    from quote_store import QuoteStore

logger = logging.getLogger(__name__)

UNKNOWN_AUTHOR = "Unknown"


@dataclass(frozen=True)
class Quote:
    text: str
    author: str

    @classmethod
    def from_raw(cls, text: str | None, author: str | None) -> Quote:
        cleaned = _clean_text(text or "")
        if not cleaned:
            raise EmptyQuoteError("quote text is empty")
        return cls(text=cleaned, author=_clean_text(author or "") or UNKNOWN_AUTHOR)


def _clean_text(text: str) -> str:
    return re.sub(r"\s+", " ", text).strip()


def fetch_remote_quote(url: str = QUOTE_API_URL, timeout: float = FETCH_TIMEOUT_S) -> Quote:
    try:
        response = requests.get(
            url,
            timeout=timeout,
            headers={
                "User-Agent": USER_AGENT,
                "Accept": "application/json",
            },
        )
        response.raise_for_status()
        data = response.json()
    except (requests.RequestException, ValueError) as e:
        raise RemoteQuoteError(f"failed to fetch quote from {url}: {e}") from e

    if not isinstance(data, list) or not data or not isinstance(data[0], dict):
        raise RemoteQuoteError(f"unexpected payload from {url}: {data!r:.200}")

    first = data[0]
    text, author = first.get("q"), first.get("a")
    if not isinstance(text, str):
        raise RemoteQuoteError(f"quote text from {url} is not a string: {text!r:.200}")
    if not isinstance(author, str):
        author = None
    try:
        return Quote.from_raw(text, author)
    except EmptyQuoteError as e:
        raise RemoteQuoteError(f"empty quote from {url}") from e


class QuoteSource:
    """Remote quote first, a random stored quote when the remote fails."""

    def __init__(
        self,
        store: QuoteStore,
        fetch_remote: Callable[[], Quote] = fetch_remote_quote,
    ) -> None:
        self.store = store
        self._fetch_remote = fetch_remote

    def fetch(self) -> Quote:
        try:
            return self._fetch_remote()
        except RemoteQuoteError as e:
            remote_error = e
            logger.warning("Remote quote unavailable: %s", e)

        logger.info("Falling back to local quote store")
        try:
            quote = self.store.random_quote()
        except (sqlite3.Error, OSError) as e:
            logger.error("Local quote store failed: %s", e)
            raise QuoteUnavailable(
                "Could not fetch a quote and the local store is unreadable",
                remote_error=remote_error,
                local_error=e,
            ) from e

        if quote is None:
            logger.error("Local quote store is empty")
            raise QuoteUnavailable(
                "Could not fetch a quote and the local store is empty",
                remote_error=remote_error,
            )
        return quote

    def remember(self, quote: Quote) -> bool:
        """Add a completed quote to the local corpus; failures are only logged."""
        try:
            self.store.add(quote)
        except PersistenceFailure as e:
            logger.warning("Could not persist quote: %s", e)
            return False
        return True
