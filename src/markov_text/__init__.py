"""Trigram Markov chain text generation.

Build a model from the words of a text and walk it to produce new text:

    model = build_model_from_file("doctorwho.txt", seed=42)
    print(generate_text(model, 50))
"""

from .builder import build_model, build_model_from_file, build_model_from_text
from .config import GeneratorConfig
from .exceptions import MarkovTextError, MissingContinuationError, SourceUnavailableError
from .generator import generate_text, generate_words
from .markov import EMPTY, INITIAL_STATE, SENTINEL, MarkovModel
from .tokenization import whitespace_tokenize

__version__ = "0.1.0"

__all__ = [
    "EMPTY",
    "INITIAL_STATE",
    "SENTINEL",
    "GeneratorConfig",
    "MarkovModel",
    "MarkovTextError",
    "MissingContinuationError",
    "SourceUnavailableError",
    "build_model",
    "build_model_from_file",
    "build_model_from_text",
    "generate_text",
    "generate_words",
    "whitespace_tokenize",
]
