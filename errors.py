from __future__ import annotations


class TypingGameError(Exception):
    """Base class for errors raised by the typing game core."""


class EmptyQuoteError(TypingGameError, ValueError):
    """Quote text is empty or whitespace only."""


class RemoteQuoteError(TypingGameError):
    """The remote quote endpoint failed or returned something unusable."""


class PersistenceFailure(TypingGameError):
    """Writing to the local quote store failed."""


class QuoteUnavailable(TypingGameError):
    """Neither the remote endpoint nor the local store produced a quote."""

    def __init__(
        self,
        message: str = "No quote available",
        remote_error: Exception | None = None,
        local_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.remote_error = remote_error
        self.local_error = local_error
