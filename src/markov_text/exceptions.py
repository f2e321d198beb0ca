"""Exceptions raised by the markov_text package."""

from __future__ import annotations


class MarkovTextError(Exception):
    """Base class for all markov_text failures."""


class MissingContinuationError(MarkovTextError, LookupError):
    """The current state has no recorded continuation in the transition table."""

    def __init__(self, state: tuple[str, str]):
        self.state = state
        super().__init__(f"No continuation recorded for state {state!r}")


class SourceUnavailableError(MarkovTextError, OSError):
    """The input text source could not be read."""

    def __init__(self, path, reason: str = ""):
        self.path = path
        message = f"Cannot read source text: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
