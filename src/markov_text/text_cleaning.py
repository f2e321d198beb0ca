from __future__ import annotations

import re
from dataclasses import dataclass

import regex  # type: ignore


_WHITESPACE_RE = re.compile(r"\s+")
# Control characters other than ordinary whitespace separate words.
_CONTROL_RE = regex.compile(r"[\p{Cc}--\s]+", flags=regex.V1)
# Format characters (zero-width space, soft hyphen, BOM) sit inside words.
_FORMAT_RE = regex.compile(r"\p{Cf}+")


@dataclass(frozen=True)
class NormalizeConfig:
    lowercase: bool = False
    strip_control: bool = True
    normalize_whitespace: bool = True


def normalize_text(text: str, config: NormalizeConfig | None = None) -> str:
    """Light cleanup applied before whitespace tokenization.

    Word boundaries are still decided by the tokenizer.
    """

    cfg = config or NormalizeConfig()
    s = text

    if cfg.strip_control:
        s = _FORMAT_RE.sub("", s)
        s = _CONTROL_RE.sub(" ", s)

    if cfg.lowercase:
        s = s.lower()

    if cfg.normalize_whitespace:
        s = _WHITESPACE_RE.sub(" ", s).strip()

    return s
