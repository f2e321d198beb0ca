from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Iterator

from .exceptions import SourceUnavailableError
from .tokenization import iter_tokens

logger = logging.getLogger(__name__)


def _open_source(path: Path, encoding: str) -> IO[str]:
    try:
        return open(path, "r", encoding=encoding)
    except FileNotFoundError as e:
        raise SourceUnavailableError(path, "file not found") from e
    except IsADirectoryError as e:
        raise SourceUnavailableError(path, "is a directory") from e
    except LookupError as e:
        raise SourceUnavailableError(path, f"unknown encoding {encoding!r}") from e
    except OSError as e:
        raise SourceUnavailableError(path, e.strerror or str(e)) from e


def load_text(path: str | Path, encoding: str = "utf-8") -> str:
    """Read the whole source text. Any read failure becomes SourceUnavailableError."""

    p = Path(path)
    with _open_source(p, encoding) as f:
        try:
            text = f.read()
        except UnicodeDecodeError as e:
            raise SourceUnavailableError(p, f"not valid {encoding}") from e

    logger.debug(f"Read {len(text)} characters from {p}")
    return text


def iter_file_tokens(path: str | Path, encoding: str = "utf-8") -> Iterator[str]:
    """Stream whitespace tokens from a file line by line.

    The file is opened eagerly so a missing source fails here rather than
    on the first iteration. The handle is closed once the iterator is
    exhausted; an iterator that is never consumed keeps it open until it
    is garbage collected, so prefer `load_text` for one-off reads.
    """

    p = Path(path)
    f = _open_source(p, encoding)

    def _tokens() -> Iterator[str]:
        with f:
            try:
                yield from iter_tokens(f)
            except UnicodeDecodeError as e:
                raise SourceUnavailableError(p, f"not valid {encoding}") from e

    return _tokens()
