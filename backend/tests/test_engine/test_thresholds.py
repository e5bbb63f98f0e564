"""Tests for ThresholdSet and the validator."""

import pytest

from zoomtier.engine.thresholds import DEFAULT_THRESHOLDS, ThresholdSet, validate_thresholds


def test_defaults():
    assert DEFAULT_THRESHOLDS.as_tuple() == (0.6, 0.8, 1.0, 1.5, 2.0)
    assert DEFAULT_THRESHOLDS.is_ordered


def test_default_set_is_valid():
    result = validate_thresholds(DEFAULT_THRESHOLDS)
    assert result.valid is True
    assert result.violations == []


def test_compact_not_above_minimal_is_invalid():
    result = validate_thresholds(ThresholdSet(minimal=0.6, compact=0.6))
    assert result.valid is False
    assert len(result.violations) >= 1
    assert "MINIMAL" in result.violations[0]
    assert "COMPACT" in result.violations[0]


def test_reports_every_violation_in_order():
    bad = ThresholdSet(minimal=0.05, compact=0.04, normal=1.0, detailed=0.9, expanded=6.0)
    result = validate_thresholds(bad)
    assert result.valid is False
    assert len(result.violations) == 4
    assert result.violations[0].startswith("MINIMAL threshold must be less than COMPACT")
    assert result.violations[1].startswith("NORMAL threshold must be less than DETAILED")
    assert "between 0.1 and 1" in result.violations[2]
    assert "should not exceed 5" in result.violations[3]


def test_range_bounds_are_inclusive():
    edge = ThresholdSet(minimal=0.1, compact=0.2, normal=0.3, detailed=0.4, expanded=5.0)
    assert validate_thresholds(edge).valid


def test_validate_does_not_mutate():
    bad = ThresholdSet(compact=0.1)
    before = bad.as_dict()
    validate_thresholds(bad)
    validate_thresholds(bad)
    assert bad.as_dict() == before


def test_merge_replaces_only_given_fields():
    merged = DEFAULT_THRESHOLDS.merge(minimal=0.4, detailed=None)
    assert merged.minimal == 0.4
    assert merged.detailed == 1.5
    assert DEFAULT_THRESHOLDS.minimal == 0.6


def test_merge_rejects_unknown_field():
    with pytest.raises(ValueError, match="bogus"):
        DEFAULT_THRESHOLDS.merge(bogus=1.0)


def test_merge_rejects_non_finite():
    with pytest.raises(ValueError, match="finite"):
        DEFAULT_THRESHOLDS.merge(expanded=float("inf"))
