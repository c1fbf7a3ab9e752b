from pathlib import Path

from src.scoring_engine.models import FACTOR_FIELDS

# Base project directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Output directory for preset runs
RESULTS_DIR = PROJECT_ROOT / "data" / "scenarios"

# Valid raw range per FactorValues field: (min, max)
FIELD_DOMAINS = {
    "satisfaction": (1.0, 5.0),
    "training_hours": (0.0, 100.0),
    "work_hours": (20.0, 60.0),
    "overtime": (0.0, 40.0),
    "sick_days": (0.0, 20.0),
}

# Adjustment key -> FactorValues field it modifies
ADJUSTMENT_FIELDS = FACTOR_FIELDS

# Adjustments expressed as a percent of the current value instead of
# an absolute delta
RELATIVE_ADJUSTMENTS = {"overtime"}

# Default "current state" baseline
DEFAULT_BASELINE = {
    "satisfaction": 3.8,
    "trainingHours": 35,
    "workHours": 43,
    "overtime": 10,
    "sickDays": 5,
}

# Named preset scenarios (partial adjustment sets)
PRESET_SCENARIOS = [
    {
        "name": "Training Boost",
        "description": "+20 training hours",
        "adjustments": {"training": 20},
    },
    {
        "name": "Work-Life Balance",
        "description": "-50% overtime",
        "adjustments": {"overtime": -50},
    },
    {
        "name": "Engagement Drive",
        "description": "+0.5 satisfaction",
        "adjustments": {"satisfaction": 0.5},
    },
    {
        "name": "Wellness Program",
        "description": "-2 sick days",
        "adjustments": {"sickDays": -2},
    },
    {
        "name": "Full Optimization",
        "description": "All factors improved",
        "adjustments": {"training": 10, "overtime": -25, "satisfaction": 0.3},
    },
]
