from types import MappingProxyType

# Factor weights (must sum to 1.0)
FACTOR_WEIGHTS = MappingProxyType({
    "satisfaction": 0.30,
    "training": 0.25,
    "workHours": 0.18,
    "overtime": 0.15,
    "sickDays": 0.12,
})

# Fixed evaluation / reporting order
FACTOR_ORDER = ("satisfaction", "training", "workHours", "overtime", "sickDays")

# Display names used by reports
FACTOR_LABELS = {
    "satisfaction": "Satisfaction",
    "training": "Training",
    "workHours": "Work Hours",
    "overtime": "Overtime",
    "sickDays": "Sick Days",
}

# Score returned for an unrecognized factor name
NEUTRAL_FACTOR_SCORE = 50.0

# Normalizer parameters
TRAINING_SATURATION_HOURS = 80
OPTIMAL_WORK_HOURS = 40
WORK_HOURS_PENALTY = 2.5   # points per hour away from optimal
OVERTIME_PENALTY = 2.5     # points per overtime hour
SICK_DAY_PENALTY = 5.0     # points per sick day

# Category bands (lower bound inclusive)
HIGH_SCORE_THRESHOLD = 75.0
MEDIUM_SCORE_THRESHOLD = 50.0

# Unweighted factor-score change needed before a direction is reported
DIRECTION_DEAD_ZONE = 0.5
