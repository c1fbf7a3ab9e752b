"""Tests for the factor normalizer."""

import pytest

from src.scoring_engine.config import NEUTRAL_FACTOR_SCORE
from src.scoring_engine.normalizer import FactorNormalizer, normalize


# ── Per-factor transforms ────────────────────────────────────────────


class TestFactorTransforms:
    @pytest.mark.parametrize(
        "factor, value, expected",
        [
            ("satisfaction", 1, 0.0),
            ("satisfaction", 3, 50.0),
            ("satisfaction", 3.8, 70.0),
            ("satisfaction", 5, 100.0),
            ("training", 0, 0.0),
            ("training", 35, 43.75),
            ("training", 55, 68.75),
            ("training", 80, 100.0),
            ("workHours", 40, 100.0),
            ("workHours", 43, 92.5),
            ("workHours", 37, 92.5),
            ("workHours", 20, 50.0),
            ("workHours", 60, 50.0),
            ("overtime", 0, 100.0),
            ("overtime", 10, 75.0),
            ("overtime", 40, 0.0),
            ("sickDays", 0, 100.0),
            ("sickDays", 5, 75.0),
            ("sickDays", 20, 0.0),
        ],
    )
    def test_known_values(self, normalizer, factor, value, expected):
        assert normalizer.normalize(factor, value) == pytest.approx(expected)

    def test_module_level_shortcut(self):
        assert normalize("overtime", 10) == pytest.approx(75.0)


# ── Clamping ─────────────────────────────────────────────────────────


class TestClamping:
    @pytest.mark.parametrize(
        "factor, value, expected",
        [
            ("satisfaction", -10, 0.0),
            ("satisfaction", 50, 100.0),
            ("training", 100, 100.0),
            ("training", -5, 0.0),
            ("workHours", 0, 0.0),
            ("workHours", 200, 0.0),
            ("overtime", 1000, 0.0),
            ("overtime", -10, 100.0),
            ("sickDays", 365, 0.0),
            ("sickDays", -3, 100.0),
        ],
    )
    def test_out_of_domain_saturates(self, normalizer, factor, value, expected):
        assert normalizer.normalize(factor, value) == expected

    def test_training_saturates_above_80_hours(self, normalizer):
        assert normalizer.normalize("training", 81) == 100.0
        assert normalizer.normalize("training", 99) == 100.0


# ── Unknown factors ──────────────────────────────────────────────────


class TestUnknownFactor:
    def test_unknown_factor_is_neutral(self, normalizer):
        assert normalizer.normalize("commute", 12) == NEUTRAL_FACTOR_SCORE

    def test_unknown_factor_does_not_raise_for_any_value(self, normalizer):
        for value in (-1e9, 0, 1e9):
            assert normalizer.normalize("", value) == 50.0

    def test_field_name_is_not_a_factor_name(self, normalizer):
        # Factor names, not FactorValues attribute names, are recognized.
        assert normalizer.normalize("training_hours", 80) == 50.0


# ── Monotonicity ─────────────────────────────────────────────────────


class TestMonotonicity:
    def setup_method(self):
        self.normalizer = FactorNormalizer()

    def _scores(self, factor, values):
        return [self.normalizer.normalize(factor, v) for v in values]

    def test_satisfaction_non_decreasing(self):
        scores = self._scores("satisfaction", [1 + i * 0.1 for i in range(41)])
        assert scores == sorted(scores)

    def test_training_non_decreasing(self):
        scores = self._scores("training", range(0, 101))
        assert scores == sorted(scores)

    def test_overtime_non_increasing(self):
        scores = self._scores("overtime", range(0, 41))
        assert scores == sorted(scores, reverse=True)

    def test_sick_days_non_increasing(self):
        scores = self._scores("sickDays", range(0, 21))
        assert scores == sorted(scores, reverse=True)

    def test_work_hours_peak_at_40(self):
        scores = {h: self.normalizer.normalize("workHours", h) for h in range(20, 61)}
        assert max(scores, key=scores.get) == 40
        assert scores[39] < scores[40] > scores[41]


# ── normalize_all ────────────────────────────────────────────────────


class TestNormalizeAll:
    def test_default_baseline_scores(self, normalizer, baseline):
        scores = normalizer.normalize_all(baseline)
        assert list(scores) == [
            "satisfaction", "training", "workHours", "overtime", "sickDays",
        ]
        assert scores == pytest.approx(
            {
                "satisfaction": 70.0,
                "training": 43.75,
                "workHours": 92.5,
                "overtime": 75.0,
                "sickDays": 75.0,
            }
        )
