"""Evaluate every preset scenario against a baseline and write the results.

Usage:
    python -m src.scenario_manager.run_presets [baseline_json] [output_dir]

Examples:
    python -m src.scenario_manager.run_presets
    python -m src.scenario_manager.run_presets baseline.json /tmp/scenarios
"""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path

from src.logging_config import setup_logging
from src.scenario_manager.config import DEFAULT_BASELINE, RESULTS_DIR
from src.scenario_manager.scenarios import apply_adjustments, list_presets
from src.scoring_engine.aggregator import ScoreAggregator
from src.scoring_engine.models import FactorValues

logger = logging.getLogger(__name__)


def load_baseline(path: Path | None = None) -> FactorValues:
    """Load baseline factor values from a JSON object file.

    Falls back to ``DEFAULT_BASELINE`` when *path* is None.

    Raises:
        FileNotFoundError: If *path* does not exist.
        ValueError: If a factor field is missing.
    """
    if path is None:
        return FactorValues.from_dict(DEFAULT_BASELINE)

    if not path.is_file():
        raise FileNotFoundError(f"Baseline file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    return FactorValues.from_dict(data)


def run_presets(
    baseline_file: Path | None = None,
    output_dir: Path | None = None,
) -> Path:
    """Run all preset scenarios and write a JSON report.

    Args:
        baseline_file: JSON file with the five factor values.
            Defaults to the built-in baseline.
        output_dir: Directory for JSON output.
            Defaults to ``data/scenarios/``.

    Returns:
        Path to the generated JSON file.
    """
    if output_dir is None:
        output_dir = RESULTS_DIR

    logger.info("Step 1/3: Loading baseline (%s)...", baseline_file or "default")
    baseline = load_baseline(baseline_file)

    logger.info("Step 2/3: Evaluating preset scenarios...")
    aggregator = ScoreAggregator()
    presets = list_presets()
    results = []
    for scenario in presets:
        adjusted = apply_adjustments(baseline, scenario.adjustments)
        result = aggregator.compare(baseline, adjusted)
        results.append(
            {
                "name": scenario.name,
                "description": scenario.description,
                "adjustments": scenario.adjustments,
                "adjusted_values": adjusted.to_dict(),
                "result": result.to_dict(),
            }
        )

    logger.info("Step 3/3: Writing JSON output...")
    generated_at = datetime.now(timezone.utc)
    output_data = {
        "metadata": {
            "version": "1.0",
            "generated_at": generated_at.isoformat(),
            "baseline": baseline.to_dict(),
            "baseline_score": round(aggregator.overall_score(baseline), 4),
            "total_scenarios": len(results),
        },
        "results": results,
    }

    output_dir.mkdir(parents=True, exist_ok=True)
    output_file = output_dir / f"scenarios_{generated_at:%Y%m%dT%H%M%S%f}.json"

    with open(output_file, "w", encoding="utf-8") as f:
        json.dump(output_data, f, indent=2)

    # Update latest symlink
    latest_link = output_dir / "scenarios_latest.json"
    if latest_link.exists() or latest_link.is_symlink():
        latest_link.unlink()
    latest_link.symlink_to(output_file.name)

    logger.info("Preset run complete! Output: %s", output_file)
    for entry in results:
        summary = entry["result"]
        logger.info(
            "  %-18s %5.1f -> %5.1f (%+.1f, %+.1f%%) %s",
            entry["name"], summary["baselineScore"], summary["newScore"],
            summary["delta"], summary["percentChange"], summary["category"],
        )

    return output_file


if __name__ == "__main__":
    setup_logging()

    baseline_file = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    output_dir = Path(sys.argv[2]) if len(sys.argv) > 2 else None

    try:
        output = run_presets(baseline_file, output_dir)
        print(f"Preset run complete: {output}")
    except Exception:
        logger.exception("Preset run failed")
        sys.exit(1)
