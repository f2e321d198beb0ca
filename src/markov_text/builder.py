"""
Model Builder Module

Trains a MarkovModel from a token sequence. After the last token a
sentinel is recorded so that generation meets end of text as an ordinary
transition, and the state is reset so generation starts fresh.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

import numpy as np

from .corpus import iter_file_tokens, load_text
from .markov import SENTINEL, MarkovModel
from .text_cleaning import NormalizeConfig, normalize_text
from .tokenization import whitespace_tokenize

logger = logging.getLogger(__name__)


def build_model(
    tokens: Iterable[str],
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None
) -> MarkovModel:
    """
    Create a model from the words of a text.

    The empty string is reserved as the end-of-text sentinel, so it may
    not appear among the tokens.

    Args:
        tokens: Words in reading order (may be empty)
        rng: Random generator handed to the model
        seed: Seed for a fresh generator when `rng` is not given

    Returns:
        A trained model positioned at the initial state

    Raises:
        ValueError: If a token is the empty string
    """
    model = MarkovModel(rng=rng, seed=seed)

    count = 0
    for token in tokens:
        if token == SENTINEL:
            raise ValueError(f"Empty token at position {count}; the empty string marks end of text")
        model.observe(token)
        count += 1

    model.observe(SENTINEL)
    model.reset()

    if count == 0:
        logger.warning("Built model from an empty corpus; generation will produce no words")
    else:
        logger.info(f"Built model with {len(model)} states from {count} tokens")
    return model


def build_model_from_text(
    text: str,
    normalize: Optional[NormalizeConfig] = None,
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None
) -> MarkovModel:
    """Tokenize `text` (normalizing it first when asked) and build a model."""
    if normalize is not None:
        text = normalize_text(text, normalize)
    return build_model(whitespace_tokenize(text), rng=rng, seed=seed)


def build_model_from_file(
    path: Union[str, Path],
    encoding: str = "utf-8",
    normalize: Optional[NormalizeConfig] = None,
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None
) -> MarkovModel:
    """
    Create a model from the words in the file at `path`.

    Args:
        path: Source text file
        encoding: Text encoding of the file
        normalize: Cleanup to apply before tokenizing; the file is
            streamed line by line when this is None
        rng: Random generator handed to the model
        seed: Seed for a fresh generator when `rng` is not given

    Returns:
        A trained model positioned at the initial state

    Raises:
        SourceUnavailableError: If the file cannot be read
    """
    logger.info(f"Building model from {path}")
    if normalize is not None:
        text = load_text(path, encoding=encoding)
        return build_model_from_text(text, normalize=normalize, rng=rng, seed=seed)

    # Materialized so a decode error surfaces before any model exists.
    tokens = list(iter_file_tokens(path, encoding=encoding))
    return build_model(tokens, rng=rng, seed=seed)
