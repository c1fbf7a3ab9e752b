"""Scenario presets and adjustment application."""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Mapping

from src.scenario_manager.config import (
    ADJUSTMENT_FIELDS,
    FIELD_DOMAINS,
    PRESET_SCENARIOS,
    RELATIVE_ADJUSTMENTS,
)
from src.scoring_engine.models import FactorValues

logger = logging.getLogger(__name__)


class ScenarioNotFoundError(Exception):
    """Raised when a preset name is not in the scenario table."""

    pass


@dataclass(frozen=True)
class Scenario:
    """A named, partial set of adjustments."""

    name: str
    description: str
    adjustments: Dict[str, float] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict) -> "Scenario":
        return cls(
            name=data["name"],
            description=data.get("description", ""),
            adjustments=dict(data.get("adjustments", {})),
        )


def clamp_field(field_name: str, value: float) -> float:
    """Clamp *value* into the valid domain of a FactorValues field."""
    low, high = FIELD_DOMAINS[field_name]
    return max(low, min(high, value))


def apply_adjustments(
    baseline: FactorValues,
    adjustments: Mapping[str, float],
) -> FactorValues:
    """Apply a partial set of deltas to *baseline*.

    Overtime deltas are a percent change of the baseline overtime; every
    other delta is added to the raw value. Results saturate at the field's
    domain bounds. Keys not present in *adjustments* are left unchanged
    apart from clamping.

    Raises:
        ValueError: If *adjustments* contains an unknown key.
    """
    unknown = set(adjustments) - set(ADJUSTMENT_FIELDS)
    if unknown:
        logger.warning("Rejected unknown adjustment keys: %s", sorted(unknown))
        raise ValueError(
            f"Unknown adjustment keys: {sorted(unknown)}. "
            f"Must be one of {list(ADJUSTMENT_FIELDS)}."
        )

    changes = {}
    for key, field_name in ADJUSTMENT_FIELDS.items():
        base = getattr(baseline, field_name)
        delta = adjustments.get(key, 0)
        if key in RELATIVE_ADJUSTMENTS:
            value = base + base * (delta / 100)
        else:
            value = base + delta
        changes[field_name] = clamp_field(field_name, value)

    return FactorValues(**changes)


def list_presets() -> List[Scenario]:
    """All preset scenarios in display order."""
    return [Scenario.from_dict(data) for data in PRESET_SCENARIOS]


def resolve_preset(name: str) -> Scenario:
    """Look up a preset scenario by name.

    Raises:
        ScenarioNotFoundError: If no preset has this name.
    """
    for data in PRESET_SCENARIOS:
        if data["name"] == name:
            return Scenario.from_dict(data)

    logger.warning("Unknown preset scenario: %r", name)
    raise ScenarioNotFoundError(f"Preset scenario {name!r} not found")


def apply_preset(baseline: FactorValues, name: str) -> FactorValues:
    """Resolve preset *name* and apply its adjustments to *baseline*."""
    return apply_adjustments(baseline, resolve_preset(name).adjustments)
