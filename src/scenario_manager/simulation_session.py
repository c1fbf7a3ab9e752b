"""Simulation session - holds what-if inputs and runs comparisons."""

import logging
from typing import Dict, Optional, Tuple

from src.scenario_manager.config import ADJUSTMENT_FIELDS, DEFAULT_BASELINE
from src.scenario_manager.scenarios import apply_adjustments, resolve_preset
from src.scoring_engine.aggregator import ScoreAggregator
from src.scoring_engine.models import FactorValues, ScenarioResult

logger = logging.getLogger(__name__)


class SimulationSession:
    """Mutable what-if workspace around the pure scoring engine.

    Tracks a baseline, one delta per adjustment key and the active preset.
    The engine itself stays stateless; the session only decides *which*
    inputs to hand it and which result is current.
    """

    def __init__(
        self,
        baseline: Optional[FactorValues] = None,
        aggregator: Optional[ScoreAggregator] = None,
    ):
        self.baseline = baseline or FactorValues.from_dict(DEFAULT_BASELINE)
        self.aggregator = aggregator or ScoreAggregator()
        self.deltas: Dict[str, float] = {key: 0.0 for key in ADJUSTMENT_FIELDS}
        self.active_scenario: Optional[str] = None
        self.last_result: Optional[ScenarioResult] = None
        self._latest_token = 0
        self._cache: Dict[Tuple[FactorValues, FactorValues], ScenarioResult] = {}

    # ------------------------------------------------------------------
    # Inputs
    # ------------------------------------------------------------------

    def set_baseline(self, **fields) -> FactorValues:
        """Update one or more baseline fields (snake_case names)."""
        self.baseline = self.baseline.replace(**fields)
        return self.baseline

    def set_delta(self, key: str, value: float):
        """Set a single adjustment slider.

        Raises:
            ValueError: If *key* is not an adjustment key.
        """
        if key not in self.deltas:
            raise ValueError(
                f"Invalid adjustment key: {key!r}. "
                f"Must be one of {list(self.deltas)}."
            )
        self.deltas[key] = value

    def apply_preset(self, name: str):
        """Replace all deltas with those of preset *name*.

        Raises:
            ScenarioNotFoundError: If the preset does not exist.
        """
        scenario = resolve_preset(name)
        self._clear_deltas()
        for key, value in scenario.adjustments.items():
            self.set_delta(key, value)
        self.active_scenario = scenario.name
        logger.info("Applied preset %r: %s", scenario.name, scenario.description)

    def reset(self):
        """Clear all deltas, the active preset and the last result."""
        self._clear_deltas()
        self.active_scenario = None
        self.last_result = None
        logger.info("Simulation session reset")

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def adjusted_values(self) -> FactorValues:
        return apply_adjustments(self.baseline, self.deltas)

    @property
    def baseline_score(self) -> float:
        """Live, unrounded overall score of the current baseline."""
        return self.aggregator.overall_score(self.baseline)

    # ------------------------------------------------------------------
    # Running
    # ------------------------------------------------------------------

    def run(self) -> ScenarioResult:
        """Compare the current baseline against the current adjusted values.

        The result for the most recent ``(baseline, adjusted)`` pair is
        memoized; any other inputs replace it.
        """
        key = (self.baseline, self.adjusted_values)
        result = self._cache.get(key)
        if result is None:
            result = self.aggregator.compare(*key)
            self._cache = {key: result}

        self.last_result = result
        logger.info(
            "Simulation%s: %.1f -> %.1f (%+.1f, %s)",
            f" [{self.active_scenario}]" if self.active_scenario else "",
            result.baseline_score,
            result.new_score,
            result.delta,
            result.category,
        )
        return result

    def request_run(self) -> int:
        """Register a new pending run and return its token.

        Any earlier token is superseded.
        """
        self._latest_token += 1
        return self._latest_token

    def complete_run(self, token: int) -> Optional[ScenarioResult]:
        """Finish a pending run.

        Returns:
            The result for the current inputs if *token* is still the
            latest request, otherwise None (the run was superseded).
        """
        if token != self._latest_token:
            logger.debug(
                "Discarding superseded run %d (latest %d)", token, self._latest_token
            )
            return None
        return self.run()

    def _clear_deltas(self):
        for key in self.deltas:
            self.deltas[key] = 0.0
