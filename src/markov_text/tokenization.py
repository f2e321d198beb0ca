from __future__ import annotations

from typing import Iterable, Iterator


def whitespace_tokenize(text: str) -> list[str]:
    """Split on runs of whitespace. Consecutive delimiters never yield empty tokens."""

    return text.split()


def iter_tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from whitespace_tokenize(line)
