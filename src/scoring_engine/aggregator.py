"""Score aggregation - weighted overall score and baseline/adjusted comparison."""

import logging
import math
from typing import Dict, Mapping, Optional

from src.scoring_engine.config import (
    DIRECTION_DEAD_ZONE,
    FACTOR_LABELS,
    FACTOR_ORDER,
    FACTOR_WEIGHTS,
    HIGH_SCORE_THRESHOLD,
    MEDIUM_SCORE_THRESHOLD,
)
from src.scoring_engine.models import FactorValues, ImpactEntry, ScenarioResult
from src.scoring_engine.normalizer import FactorNormalizer

logger = logging.getLogger(__name__)


def round_half_up(x: float) -> int:
    return math.floor(x + 0.5)


def round1(x: float) -> float:
    """Round to one decimal place, halves toward +infinity."""
    return round_half_up(x * 10) / 10


def score_category(score: float) -> str:
    """Classify an overall score into ``Low``, ``Medium`` or ``High``."""
    if score >= HIGH_SCORE_THRESHOLD:
        return "High"
    if score >= MEDIUM_SCORE_THRESHOLD:
        return "Medium"
    return "Low"


def impact_direction(baseline_score: float, adjusted_score: float) -> str:
    """Direction of change for one unweighted factor score."""
    if adjusted_score > baseline_score + DIRECTION_DEAD_ZONE:
        return "positive"
    if adjusted_score < baseline_score - DIRECTION_DEAD_ZONE:
        return "negative"
    return "neutral"


class ScoreAggregator:
    """Combine normalized factor scores into an overall score.

    Stateless apart from its configuration; ``overall_score`` and
    ``compare`` are pure functions of their arguments.
    """

    def __init__(
        self,
        normalizer: Optional[FactorNormalizer] = None,
        weights: Mapping[str, float] = FACTOR_WEIGHTS,
    ):
        self.normalizer = normalizer or FactorNormalizer()
        self.weights = weights

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def overall_score(self, values: FactorValues) -> float:
        """Weighted sum of the five factor scores, in [0, 100]."""
        return self._weighted_sum(self.normalizer.normalize_all(values))

    def compare(
        self,
        baseline: FactorValues,
        adjusted: FactorValues,
    ) -> ScenarioResult:
        """Compare an adjusted state against its baseline.

        Scores are rounded to one decimal *before* the delta is taken, and
        the percent change is derived from the rounded delta. A zero
        baseline score yields a percent change of 0.

        Returns:
            :class:`ScenarioResult` with the impact breakdown in
            ``FACTOR_ORDER``.
        """
        baseline_scores = self.normalizer.normalize_all(baseline)
        adjusted_scores = self.normalizer.normalize_all(adjusted)

        baseline_score = round1(self._weighted_sum(baseline_scores))
        new_score = round1(self._weighted_sum(adjusted_scores))
        delta = round1(new_score - baseline_score)

        if baseline_score > 0:
            percent_change = round_half_up(delta / baseline_score * 1000) / 10
        else:
            percent_change = 0.0

        result = ScenarioResult(
            baseline_score=baseline_score,
            new_score=new_score,
            delta=delta,
            percent_change=percent_change,
            category=score_category(new_score),
            impact_breakdown=self._impact_breakdown(baseline_scores, adjusted_scores),
        )

        logger.debug(
            "Compared scenario: %.1f -> %.1f (delta %.1f, %s)",
            baseline_score, new_score, delta, result.category,
        )
        return result

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _weighted_sum(self, scores: Dict[str, float]) -> float:
        return sum(self.weights[factor] * scores[factor] for factor in FACTOR_ORDER)

    def _impact_breakdown(
        self,
        baseline_scores: Dict[str, float],
        adjusted_scores: Dict[str, float],
    ) -> tuple:
        entries = []
        for factor in FACTOR_ORDER:
            base = baseline_scores[factor]
            adj = adjusted_scores[factor]
            entries.append(
                ImpactEntry(
                    factor=factor,
                    impact=round1((adj - base) * self.weights[factor]),
                    direction=impact_direction(base, adj),
                    label=FACTOR_LABELS[factor],
                )
            )
        return tuple(entries)


_default_aggregator = ScoreAggregator()


def overall_score(values: FactorValues) -> float:
    """Overall 0-100 score for one set of factor values."""
    return _default_aggregator.overall_score(values)


def compare(baseline: FactorValues, adjusted: FactorValues) -> ScenarioResult:
    """Compare *adjusted* against *baseline*; see :meth:`ScoreAggregator.compare`."""
    return _default_aggregator.compare(baseline, adjusted)
