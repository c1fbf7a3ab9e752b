"""Tests for src.scenario_manager.run_presets (preset runner integration)."""

import json

import pytest

from src.scenario_manager.run_presets import load_baseline, run_presets
from src.scoring_engine.aggregator import ScoreAggregator
from src.scoring_engine.models import FactorValues

_REQUIRED_RESULT_KEYS = {
    "baselineScore", "newScore", "delta",
    "percentChange", "category", "impactBreakdown",
}


class TestLoadBaseline:
    def test_default_baseline(self):
        assert load_baseline() == FactorValues(3.8, 35, 43, 10, 5)

    def test_load_from_file(self, tmp_path):
        path = tmp_path / "baseline.json"
        path.write_text(json.dumps(
            {"satisfaction": 4.5, "trainingHours": 60, "workHours": 40,
             "overtime": 0, "sickDays": 2}
        ))
        assert load_baseline(path) == FactorValues(4.5, 60, 40, 0, 2)

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_baseline(tmp_path / "missing.json")

    def test_incomplete_file_raises(self, tmp_path):
        path = tmp_path / "baseline.json"
        path.write_text(json.dumps({"satisfaction": 4.5}))
        with pytest.raises(ValueError, match="Missing factor field"):
            load_baseline(path)


class TestRunPresets:
    @pytest.fixture(scope="class")
    def run_output(self, tmp_path_factory):
        """Run all presets once, writing output to a temp directory."""
        tmp_dir = tmp_path_factory.mktemp("scenarios")
        output_path = run_presets(output_dir=tmp_dir)

        with open(output_path) as f:
            data = json.load(f)

        return data, output_path, tmp_dir

    def test_produces_file(self, run_output):
        _, output_path, _ = run_output
        assert output_path.exists()
        assert output_path.name.startswith("scenarios_")

    def test_latest_symlink_created(self, run_output):
        _, output_path, tmp_dir = run_output
        latest = tmp_dir / "scenarios_latest.json"
        assert latest.is_symlink()
        assert latest.resolve() == output_path.resolve()

    def test_metadata(self, run_output):
        data, _, _ = run_output
        meta = data["metadata"]
        assert meta["total_scenarios"] == 5
        assert meta["baseline"]["trainingHours"] == 35
        assert meta["baseline_score"] == pytest.approx(68.8375)

    def test_results_structure(self, run_output):
        data, _, _ = run_output
        assert len(data["results"]) == 5
        for entry in data["results"]:
            assert set(entry["result"]) == _REQUIRED_RESULT_KEYS
            assert len(entry["result"]["impactBreakdown"]) == 5

    def test_training_boost_entry(self, run_output):
        data, _, _ = run_output
        entry = next(r for r in data["results"] if r["name"] == "Training Boost")
        assert entry["adjustments"] == {"training": 20}
        assert entry["adjusted_values"]["trainingHours"] == 55
        assert entry["result"]["category"] == "High"

    def test_rerun_replaces_symlink(self, tmp_path):
        first = run_presets(output_dir=tmp_path)
        second = run_presets(output_dir=tmp_path)
        latest = tmp_path / "scenarios_latest.json"
        assert latest.resolve() == second.resolve()
        assert first.exists()

    def test_each_preset_compared_once(self, tmp_path, monkeypatch):
        calls = []
        original_compare = ScoreAggregator.compare

        def counting_compare(self, baseline, adjusted):
            calls.append(adjusted)
            return original_compare(self, baseline, adjusted)

        monkeypatch.setattr(ScoreAggregator, "compare", counting_compare)
        run_presets(output_dir=tmp_path)
        assert len(calls) == 5
