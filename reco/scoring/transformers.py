# reco/scoring/transformers.py
"""
Score Transformers
------------------
A score transformer maps the raw score an upstream signal produced for an
item onto the scale the recommendation engine combines scores on.

Every strategy exposes the same call:

    transform(item, score) -> int

so the engine can hold any of them and swap one for another. The item is
passed through for strategies that inspect it; the ones in this package do
not.
"""

from abc import ABC, abstractmethod
from typing import TypeVar

ItemT = TypeVar("ItemT")


class ScoreTransformer(ABC):
    """Common interface for all score transformation strategies."""

    @abstractmethod
    def transform(self, item: ItemT, score: int) -> int:
        """
        Args:
            item: The recommended item the score belongs to (opaque).
            score: Raw score produced upstream.

        Returns:
            Transformed score.
        """


class NoTransformation(ScoreTransformer):
    """Identity strategy: the raw score is returned untouched."""

    def transform(self, item: ItemT, score: int) -> int:
        return score

    def __repr__(self) -> str:
        return "NoTransformation()"


NO_TRANSFORMATION = NoTransformation()
