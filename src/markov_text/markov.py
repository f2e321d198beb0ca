"""
Trigram Markov Model

A simple trigram Markov model over words. The current state is the pair
of the two words seen most recently. Initially the state is ("", ""),
since no words have been seen. Scanning the sentence "The man ate the
pasta" moves the model through the states:

    ("", ""), ("", "The"), ("The", "man"), ("man", "ate"),
    ("ate", "the"), ("the", "pasta")

The transition table maps each state to the list of words observed to
follow it. Duplicates are kept, so the relative frequency of a word in
the list is its probability of being chosen next.

Usage:
    model = MarkovModel(seed=42)
    for word in "the man ate the pasta".split():
        model.observe(word)
    model.observe(SENTINEL)
    model.reset()
    word = model.advance()
"""

from typing import Dict, List, Optional, Tuple

import numpy as np

from .exceptions import MissingContinuationError


State = Tuple[str, str]

# The empty string doubles as the "no word yet" marker and the end-of-text
# sentinel.
EMPTY = ""
SENTINEL = EMPTY
INITIAL_STATE: State = (EMPTY, EMPTY)


class MarkovModel:
    """
    Word-level Markov chain with a two-word context.

    The model owns exactly one current state and one transition table.
    Training (`observe`) and generation (`advance`) both move the state;
    only `observe` grows the table. `reset` returns the state to the
    initial pair and never touches what has been learned.

    Attributes:
        rng: Random source used by `advance`
    """

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None
    ):
        """
        Create an empty model positioned at the initial state.

        Args:
            rng: Random generator to sample continuations with
            seed: Seed for a fresh generator when `rng` is not given
        """
        if rng is not None and seed is not None:
            raise ValueError("Pass either rng or seed, not both")
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self._state: State = INITIAL_STATE
        self._table: Dict[State, List[str]] = {}

    @property
    def state(self) -> State:
        """The two most recently seen words."""
        return self._state

    @property
    def num_observations(self) -> int:
        """Total number of words recorded in the table."""
        return sum(len(words) for words in self._table.values())

    def __len__(self) -> int:
        return len(self._table)

    def __contains__(self, state: object) -> bool:
        return state in self._table

    def continuations(self, state: State) -> List[str]:
        """Return a copy of the words recorded after `state`."""
        return list(self._table.get(state, ()))

    def observe(self, word: str) -> None:
        """
        Record `word` as a possible follower of the current state.

        The state then moves on to include `word`. If the state was
        ("the", "man") and `word` is "ate", "ate" becomes a word that can
        follow "... the man" and the state is now ("man", "ate").

        Args:
            word: Token to record, the sentinel included
        """
        self._table.setdefault(self._state, []).append(word)
        self._transition(word)

    def advance(self) -> str:
        """
        Pick the next word at random and move the state past it.

        Every position of the continuation list is equally likely, so a
        word listed twice is twice as likely to be chosen.

        Returns:
            The chosen word (the sentinel when end of text was drawn)

        Raises:
            MissingContinuationError: If the current state has nothing
                recorded after it
        """
        words = self._table.get(self._state)
        if not words:
            raise MissingContinuationError(self._state)

        choice = words[int(self.rng.integers(len(words)))]
        self._transition(choice)
        return choice

    def reset(self) -> None:
        """Return to the initial state. Learned transitions are kept."""
        self._state = INITIAL_STATE

    def _transition(self, word: str) -> None:
        self._state = (self._state[1], word)

    def __repr__(self) -> str:
        return (
            f"MarkovModel(states={len(self._table)}, "
            f"observations={self.num_observations}, state={self._state!r})"
        )
