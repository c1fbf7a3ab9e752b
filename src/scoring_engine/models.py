"""Data models for the scoring engine."""

from dataclasses import dataclass
from typing import Dict, Tuple

# Factor name -> FactorValues attribute
FACTOR_FIELDS = {
    "satisfaction": "satisfaction",
    "training": "training_hours",
    "workHours": "work_hours",
    "overtime": "overtime",
    "sickDays": "sick_days",
}

# Attribute -> camelCase key used in dict/JSON form
_CAMEL_KEYS = {
    "satisfaction": "satisfaction",
    "training_hours": "trainingHours",
    "work_hours": "workHours",
    "overtime": "overtime",
    "sick_days": "sickDays",
}


@dataclass(frozen=True)
class FactorValues:
    """Raw values of the five HR factors for one state (baseline or adjusted)."""

    satisfaction: float   # 1-5 rating
    training_hours: float  # 0-100 hours
    work_hours: float     # 20-60 hours per week
    overtime: float       # 0-40 hours
    sick_days: float      # 0-20 days

    def raw_value(self, factor: str) -> float:
        """Raw value for a factor name (``"training"``, ``"workHours"``, ...)."""
        return getattr(self, FACTOR_FIELDS[factor])

    def replace(self, **changes) -> "FactorValues":
        """Return a copy with the given attributes changed."""
        data = self.to_dict(camel_case=False)
        data.update(changes)
        return FactorValues(**data)

    def to_dict(self, camel_case: bool = True) -> Dict[str, float]:
        """Convert to a plain dict, camelCase keys by default."""
        if camel_case:
            return {camel: getattr(self, attr) for attr, camel in _CAMEL_KEYS.items()}
        return {attr: getattr(self, attr) for attr in _CAMEL_KEYS}

    @classmethod
    def from_dict(cls, data: Dict) -> "FactorValues":
        """Build from a dict using either camelCase or snake_case keys.

        Raises:
            ValueError: If any of the five fields is missing.
        """
        values = {}
        for attr, camel in _CAMEL_KEYS.items():
            if camel in data:
                values[attr] = float(data[camel])
            elif attr in data:
                values[attr] = float(data[attr])
            else:
                raise ValueError(f"Missing factor field: {camel!r}")
        return cls(**values)


@dataclass(frozen=True)
class ImpactEntry:
    """Weighted contribution of one factor to a baseline/adjusted change."""

    factor: str
    impact: float
    direction: str  # "positive", "negative" or "neutral"
    label: str  # display name, e.g. "Work Hours"


@dataclass(frozen=True)
class ScenarioResult:
    """Outcome of comparing a baseline against an adjusted state."""

    baseline_score: float
    new_score: float
    delta: float
    percent_change: float
    category: str  # "Low", "Medium" or "High"
    impact_breakdown: Tuple[ImpactEntry, ...] = ()

    def to_dict(self) -> Dict:
        """Convert to the JSON-serializable result shape."""
        return {
            "baselineScore": self.baseline_score,
            "newScore": self.new_score,
            "delta": self.delta,
            "percentChange": self.percent_change,
            "category": self.category,
            "impactBreakdown": [
                {
                    "factor": entry.label,
                    "impact": entry.impact,
                    "direction": entry.direction,
                }
                for entry in self.impact_breakdown
            ],
        }
