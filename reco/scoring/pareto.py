# reco/scoring/pareto.py
"""
Pareto Score Transformer
------------------------
Bounds a raw score with an exponential saturation curve so that each extra
unit of raw score is worth less than the one before.

Formula:
    f(x)  = max_score × (1 − e^(−α·x))
    α     = ln(5) / h

where h is the eighty-percent level: the raw score that should earn 80% of
max_score. At x = h, e^(−ln 5) = 1/5, so f(h) = 0.8 × max_score.

Example — common friends, max 100, 80 points at 10 friends:
    α = ln(5) / 10
     0 friends →   0
     5 friends →  55
    10 friends →  80
    30 friends →  99

Raw scores below minimum_threshold score 0 without evaluating the curve.
Negative raw scores (with a negative threshold) go through the curve and
come out negative. When e^(−α·x) or the product leaves the float range the
curve is evaluated in Decimal instead, so the result is still an int.

An eighty-percent level of 0 is not rejected here: transform() raises
ZeroDivisionError for any score at or above the threshold. Settings-driven
construction (reco.config.build_pareto_transformer) validates it instead.
"""
import math
from decimal import MAX_EMAX, MIN_EMIN, Decimal, localcontext

import structlog

from reco.scoring.transformers import ItemT, ScoreTransformer
from reco.scoring.utils import round_half_up

logger = structlog.get_logger(__name__)

_LN_5 = math.log(5)


class ParetoScoreTransformer(ScoreTransformer):
    """Transform a raw score with the Pareto (1 − e^(−αx)) curve."""

    def __init__(
        self,
        max_score: int,
        eighty_percent_level: int,
        minimum_threshold: int = 0,
    ) -> None:
        """
        Args:
            max_score: Maximum score this transformer will produce.
            eighty_percent_level: Raw score at which 80% of max_score is produced.
            minimum_threshold: Minimum raw score needed to get anything above 0.
        """
        self._max_score = max_score
        self._eighty_percent_level = eighty_percent_level
        self._minimum_threshold = minimum_threshold

    @property
    def max_score(self) -> int:
        return self._max_score

    @property
    def eighty_percent_level(self) -> int:
        return self._eighty_percent_level

    @property
    def minimum_threshold(self) -> int:
        return self._minimum_threshold

    def transform(self, item: ItemT, score: int) -> int:
        """
        Args:
            item: Ignored.
            score: Raw score. Negative values are accepted and run through
                   the formula as-is.

        Returns:
            Rounded score, in [0, max_score] for non-negative raw scores.
        """
        if score < self._minimum_threshold:
            return 0

        alpha = _LN_5 / self._eighty_percent_level
        try:
            exp = math.exp(-alpha * score)
            result = round_half_up(self._max_score * (1 - exp))
        except OverflowError:
            result = self._transform_decimal(alpha, score)

        logger.debug("pareto_transformed", score=score, result=result)
        return result

    def _transform_decimal(self, alpha: float, score: int) -> int:
        """Same curve in Decimal, for values past the float range."""
        with localcontext() as ctx:
            ctx.Emax = MAX_EMAX
            ctx.Emin = MIN_EMIN
            exp = (Decimal(-alpha) * score).exp()
            return round_half_up(Decimal(self._max_score) * (1 - exp))

    def _key(self) -> tuple:
        return (self._max_score, self._eighty_percent_level, self._minimum_threshold)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParetoScoreTransformer):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"ParetoScoreTransformer(max_score={self._max_score}, "
            f"eighty_percent_level={self._eighty_percent_level}, "
            f"minimum_threshold={self._minimum_threshold})"
        )
