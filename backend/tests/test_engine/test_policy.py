"""Tests for render policies and progressive styles."""

import pytest

from zoomtier.engine.levels import ContentLevel
from zoomtier.engine.policy import PaddingUnit, progressive_styles, project


def test_every_level_has_a_policy():
    for level in ContentLevel:
        assert project(level).level == level


def test_features_grow_with_level():
    sizes = [len(project(level).features) for level in ContentLevel]
    assert sizes == [1, 2, 3, 4, 5]
    for lower, higher in zip(ContentLevel, list(ContentLevel)[1:]):
        assert project(lower).feature_set < project(higher).feature_set


def test_only_minimal_is_inert():
    assert [project(level).interactive for level in ContentLevel] == [False, True, True, True, True]


@pytest.mark.parametrize(
    "level,padding,performance",
    [
        (ContentLevel.MINIMAL, PaddingUnit.XS, "highest"),
        (ContentLevel.COMPACT, PaddingUnit.SM, "high"),
        (ContentLevel.NORMAL, PaddingUnit.MD, "medium"),
        (ContentLevel.DETAILED, PaddingUnit.LG, "low"),
        (ContentLevel.EXPANDED, PaddingUnit.XL, "lowest"),
    ],
)
def test_padding_and_cost(level, padding, performance):
    policy = project(level)
    assert policy.padding == padding
    assert policy.performance == performance


def test_project_is_referentially_stable():
    assert project(ContentLevel.NORMAL) is project(ContentLevel.NORMAL)
    assert project(2) is project(ContentLevel.NORMAL)


def test_minimal_styles_disable_pointer_events():
    styles = progressive_styles(ContentLevel.MINIMAL, is_active=False)
    assert styles.padding == "0.5rem"
    assert styles.pointer_events == "none"
    assert styles.will_change == "auto"


def test_active_state_hints_compositor():
    inactive = progressive_styles(ContentLevel.NORMAL, is_active=False)
    active = progressive_styles(ContentLevel.NORMAL, is_active=True)
    assert inactive.will_change == "auto"
    assert active.will_change == "transform, opacity"
    assert active.transition == inactive.transition == "all 160ms cubic-bezier(0.4, 0, 0.6, 1)"


def test_styles_as_css():
    css = progressive_styles(ContentLevel.EXPANDED, is_active=True).as_css()
    assert css == {
        "transition": "all 160ms cubic-bezier(0.4, 0, 0.6, 1)",
        "will-change": "transform, opacity",
        "padding": "2rem",
        "pointer-events": "auto",
    }


def test_level_labels_round_trip():
    assert ContentLevel.from_label("Detailed") == ContentLevel.DETAILED
    with pytest.raises(ValueError):
        ContentLevel.from_label("huge")
