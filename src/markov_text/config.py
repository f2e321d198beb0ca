"""
Configuration Module for markov_text

Settings for building a model from a source text and generating from it.
Values can come from defaults, a JSON file, or command-line flags.
"""

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Dict, Optional, Union

from .exceptions import SourceUnavailableError
from .text_cleaning import NormalizeConfig


@dataclass
class GeneratorConfig:
    """
    Configuration for a build-and-generate run.

    Attributes:
        max_words: Maximum number of words to generate
        seed: Seed for the random source (None draws fresh OS entropy)
        encoding: Text encoding of the source file
        normalize: Whether to clean the text before tokenizing
        lowercase: Lowercase the text while normalizing
    """

    max_words: int = 50
    seed: Optional[int] = None
    encoding: str = "utf-8"
    normalize: bool = False
    lowercase: bool = False

    def __post_init__(self):
        """Validate settings."""
        for name in ("max_words", "seed"):
            value = getattr(self, name)
            if value is None and name == "seed":
                continue
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
        if self.max_words < 0:
            raise ValueError("max_words must be >= 0")
        if self.seed is not None and self.seed < 0:
            raise ValueError("seed must be a non-negative integer")
        if not isinstance(self.encoding, str) or not self.encoding:
            raise ValueError(f"encoding must be a non-empty string, got {self.encoding!r}")
        for name in ("normalize", "lowercase"):
            if not isinstance(getattr(self, name), bool):
                raise ValueError(f"{name} must be true or false")

    def normalize_config(self) -> Optional[NormalizeConfig]:
        """Text cleanup settings, or None when normalization is off."""
        if not self.normalize:
            return None
        return NormalizeConfig(lowercase=self.lowercase)

    @classmethod
    def from_dict(cls, config_dict: Dict) -> 'GeneratorConfig':
        """Create GeneratorConfig from a dictionary, ignoring unknown keys."""
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in config_dict.items() if k in names})

    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> 'GeneratorConfig':
        """Load GeneratorConfig from a JSON file."""
        p = Path(path)
        try:
            with open(p, 'r', encoding='utf-8') as f:
                config_dict = json.load(f)
        except FileNotFoundError as e:
            raise SourceUnavailableError(p, "config file not found") from e
        except IsADirectoryError as e:
            raise SourceUnavailableError(p, "config path is a directory") from e
        except OSError as e:
            raise SourceUnavailableError(p, e.strerror or str(e)) from e
        except ValueError as e:
            # JSONDecodeError and UnicodeDecodeError
            raise ValueError(f"Invalid JSON in config file {p}: {e}") from e
        if not isinstance(config_dict, dict):
            raise ValueError(f"Config file {p} must contain a JSON object")
        return cls.from_dict(config_dict)

    def to_dict(self) -> Dict:
        """Convert GeneratorConfig to dictionary."""
        return asdict(self)
