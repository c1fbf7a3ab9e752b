from src.scoring_engine.aggregator import ScoreAggregator, compare, overall_score
from src.scoring_engine.models import FactorValues, ImpactEntry, ScenarioResult
from src.scoring_engine.normalizer import FactorNormalizer, normalize

__all__ = [
    "FactorNormalizer",
    "FactorValues",
    "ImpactEntry",
    "ScenarioResult",
    "ScoreAggregator",
    "compare",
    "normalize",
    "overall_score",
]
