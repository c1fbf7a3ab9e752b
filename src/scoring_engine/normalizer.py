"""Factor normalization - maps raw HR metrics onto a common 0-100 scale.

Each factor has its own monotonic transform; higher output is always
"better". Every result is clamped to [0, 100] so out-of-domain input
saturates instead of failing.
"""

import logging
from typing import Dict

from src.scoring_engine.config import (
    FACTOR_ORDER,
    NEUTRAL_FACTOR_SCORE,
    OPTIMAL_WORK_HOURS,
    OVERTIME_PENALTY,
    SICK_DAY_PENALTY,
    TRAINING_SATURATION_HOURS,
    WORK_HOURS_PENALTY,
)
from src.scoring_engine.models import FactorValues

logger = logging.getLogger(__name__)


def _clamp_score(score: float) -> float:
    return max(0.0, min(100.0, score))


class FactorNormalizer:
    """Convert raw factor values into 0-100 goodness scores.

    The normalizer is stateless; one instance can be shared freely.
    """

    def normalize(self, factor: str, value: float) -> float:
        """Score a single raw value.

        Args:
            factor: One of ``satisfaction``, ``training``, ``workHours``,
                ``overtime``, ``sickDays``.
            value: Raw metric value in the factor's native unit.

        Returns:
            Score in [0, 100]. Unrecognized factors score
            ``NEUTRAL_FACTOR_SCORE``.
        """
        if factor == "satisfaction":
            # 1-5 rating -> 0-100
            score = ((value - 1) / 4) * 100
        elif factor == "training":
            # Saturates at TRAINING_SATURATION_HOURS
            score = (value / TRAINING_SATURATION_HOURS) * 100
        elif factor == "workHours":
            # Symmetric penalty around the optimal week
            score = 100 - abs(value - OPTIMAL_WORK_HOURS) * WORK_HOURS_PENALTY
        elif factor == "overtime":
            score = 100 - value * OVERTIME_PENALTY
        elif factor == "sickDays":
            score = 100 - value * SICK_DAY_PENALTY
        else:
            logger.debug("Unknown factor %r, using neutral score", factor)
            return NEUTRAL_FACTOR_SCORE

        return _clamp_score(score)

    def normalize_all(self, values: FactorValues) -> Dict[str, float]:
        """Score all five factors of *values*, keyed by factor name in
        ``FACTOR_ORDER``."""
        return {
            factor: self.normalize(factor, values.raw_value(factor))
            for factor in FACTOR_ORDER
        }


_default_normalizer = FactorNormalizer()


def normalize(factor: str, value: float) -> float:
    """Module-level shortcut for :meth:`FactorNormalizer.normalize`."""
    return _default_normalizer.normalize(factor, value)
