"""Tests for the canonical grouping utility."""

from adtrack.domain.grouping import group_by


def test_group_by_keeps_first_occurrence_order():
    groups = group_by(["b1", "a1", "b2", "c1", "a2"], key=lambda s: s[0])
    assert list(groups) == ["b", "a", "c"]
    assert groups["b"] == ["b1", "b2"]
    assert groups["a"] == ["a1", "a2"]


def test_group_by_empty():
    assert group_by([], key=lambda x: x) == {}
