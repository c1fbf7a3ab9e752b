"""Tabular reports over scenario comparisons.

Builds pandas DataFrames for per-factor baseline/adjusted comparison and
for evaluating every preset against one baseline.
"""

import logging
from typing import List, Optional

import pandas as pd

from src.scenario_manager.scenarios import Scenario, apply_adjustments, list_presets
from src.scoring_engine.aggregator import ScoreAggregator, round_half_up
from src.scoring_engine.config import FACTOR_LABELS, FACTOR_ORDER
from src.scoring_engine.models import FactorValues

logger = logging.getLogger(__name__)

FACTOR_COMPARISON_COLUMNS = [
    "factor", "label", "weight_pct", "baseline", "adjusted", "impact",
]

PRESET_SWEEP_COLUMNS = [
    "scenario", "description", "baseline_score", "new_score",
    "delta", "percent_change", "category",
]


def factor_comparison(
    baseline: FactorValues,
    adjusted: FactorValues,
    aggregator: Optional[ScoreAggregator] = None,
) -> pd.DataFrame:
    """Per-factor score comparison, one row per factor in ``FACTOR_ORDER``.

    ``baseline`` and ``adjusted`` hold whole-number factor scores (0-100);
    ``impact`` is the weighted change from the comparison result.
    """
    aggregator = aggregator or ScoreAggregator()
    base_scores = aggregator.normalizer.normalize_all(baseline)
    adj_scores = aggregator.normalizer.normalize_all(adjusted)
    result = aggregator.compare(baseline, adjusted)
    impacts = {entry.factor: entry.impact for entry in result.impact_breakdown}

    rows = [
        {
            "factor": factor,
            "label": FACTOR_LABELS[factor],
            "weight_pct": round(aggregator.weights[factor] * 100),
            "baseline": round_half_up(base_scores[factor]),
            "adjusted": round_half_up(adj_scores[factor]),
            "impact": impacts[factor],
        }
        for factor in FACTOR_ORDER
    ]
    return pd.DataFrame(rows, columns=FACTOR_COMPARISON_COLUMNS)


def preset_sweep(
    baseline: FactorValues,
    scenarios: Optional[List[Scenario]] = None,
    aggregator: Optional[ScoreAggregator] = None,
) -> pd.DataFrame:
    """Evaluate every scenario against *baseline*.

    Args:
        baseline: Current-state factor values.
        scenarios: Scenarios to evaluate. Defaults to all presets.
        aggregator: Aggregator to use. Defaults to the standard weights.

    Returns:
        DataFrame with one row per scenario, in input order.
    """
    aggregator = aggregator or ScoreAggregator()
    if scenarios is None:
        scenarios = list_presets()

    rows = []
    for scenario in scenarios:
        adjusted = apply_adjustments(baseline, scenario.adjustments)
        result = aggregator.compare(baseline, adjusted)
        rows.append(
            {
                "scenario": scenario.name,
                "description": scenario.description,
                "baseline_score": result.baseline_score,
                "new_score": result.new_score,
                "delta": result.delta,
                "percent_change": result.percent_change,
                "category": result.category,
            }
        )

    logger.info("Evaluated %d scenarios against baseline", len(rows))
    return pd.DataFrame(rows, columns=PRESET_SWEEP_COLUMNS)
