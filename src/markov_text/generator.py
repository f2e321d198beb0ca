from __future__ import annotations

import logging

from .markov import SENTINEL, MarkovModel

logger = logging.getLogger(__name__)


def generate_words(model: MarkovModel, max_words: int, *, reset_first: bool = False) -> list[str]:
    """Draw up to `max_words` words, stopping early at the end-of-text sentinel.

    Pass `reset_first=True` to start an independent run from a model that
    has already been used for generation.
    """

    if max_words < 0:
        raise ValueError("max_words must be >= 0")

    if reset_first:
        model.reset()

    words: list[str] = []
    for _ in range(max_words):
        nxt = model.advance()
        if nxt == SENTINEL:
            logger.debug(f"Reached end of text after {len(words)} words")
            break
        words.append(nxt)

    return words


def generate_text(model: MarkovModel, max_words: int, *, reset_first: bool = False) -> str:
    """Space-joined output of `generate_words` with no trailing separator."""

    return " ".join(generate_words(model, max_words, reset_first=reset_first))
