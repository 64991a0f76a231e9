"""
scoring/ — Score transformers

Modules:
    utils.py           - Decimal rounding helpers
    transformers.py    - ScoreTransformer base class + NoTransformation
    pareto.py          - Pareto (exponential saturation) transformer
"""

from reco.scoring.pareto import ParetoScoreTransformer
from reco.scoring.transformers import (
    NO_TRANSFORMATION,
    NoTransformation,
    ScoreTransformer,
)

__all__ = [
    "NO_TRANSFORMATION",
    "NoTransformation",
    "ParetoScoreTransformer",
    "ScoreTransformer",
]
