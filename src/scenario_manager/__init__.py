from src.scenario_manager.report import factor_comparison, preset_sweep
from src.scenario_manager.scenarios import (
    Scenario,
    ScenarioNotFoundError,
    apply_adjustments,
    apply_preset,
    list_presets,
    resolve_preset,
)
from src.scenario_manager.simulation_session import SimulationSession

__all__ = [
    "Scenario",
    "ScenarioNotFoundError",
    "SimulationSession",
    "apply_adjustments",
    "apply_preset",
    "factor_comparison",
    "list_presets",
    "preset_sweep",
    "resolve_preset",
]
