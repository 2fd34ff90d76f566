"""Tests for the code resolver."""

import itertools

import pytest

from sgrfmt.codes.colors import BasicColor, IndexedColor, RgbColor
from sgrfmt.codes.registry import Plane, RevertGroup, StyleKind, revert_group
from sgrfmt.codes.resolver import Resolution, resolve, resolve_all
from sgrfmt.modes import RevertMode

FG, BG = Plane.FOREGROUND, Plane.BACKGROUND

ALL_KINDS = list(StyleKind) + [
    BasicColor(1),
    BasicColor(1, True),
    BasicColor(3, False, BG),
    BasicColor(3, True, BG),
    IndexedColor(196),
    IndexedColor(16, BG),
    RgbColor(255, 0, 0),
    RgbColor(0, 0, 0, BG),
]


@pytest.mark.parametrize(
    "kind, params",
    [
        (BasicColor(1), (31,)),
        (BasicColor(1, True), (91,)),
        (BasicColor(0, False, BG), (40,)),
        (BasicColor(7, True, BG), (107,)),
        (IndexedColor(196), (38, 5, 196)),
        (IndexedColor(16, BG), (48, 5, 16)),
        (RgbColor(255, 0, 0), (38, 2, 255, 0, 0)),
        (RgbColor(1, 2, 3, BG), (48, 2, 1, 2, 3)),
        (StyleKind.BOLD, (1,)),
        (StyleKind.SUPERSCRIPT, (73,)),
    ],
)
def test_set_params(kind, params):
    assert resolve(kind).set_params == params


def test_color_reset_ignores_sub_kind():
    assert resolve(BasicColor(2, True)).reset_params == (39,)
    assert resolve(IndexedColor(2)).reset_params == (39,)
    assert resolve(RgbColor(2, 2, 2)).reset_params == (39,)
    assert resolve(BasicColor(2, True, BG)).reset_params == (49,)


def test_same_group_same_reset():
    for first, second in itertools.combinations(ALL_KINDS, 2):
        if revert_group(first) is revert_group(second):
            assert resolve(first).reset_params == resolve(second).reset_params


@pytest.mark.parametrize("kind", ALL_KINDS)
def test_total_revert(kind):
    assert resolve(kind, RevertMode.TOTAL).reset_params == (0,)


@pytest.mark.parametrize("kind", ALL_KINDS)
def test_no_revert(kind):
    resolution = resolve(kind, RevertMode.NONE)
    assert resolution.reset_params == ()
    assert not resolution.reverts


def test_resolution_records_group():
    assert resolve(StyleKind.FAINT).groups == (RevertGroup.INTENSITY,)


def test_resolve_all_merges_groups():
    resolution = resolve_all([StyleKind.BOLD, StyleKind.ITALIC, StyleKind.FAINT])
    assert resolution == Resolution((1, 3, 2), (22, 23), (RevertGroup.INTENSITY, RevertGroup.ITALIC))


def test_resolve_all_color_pair():
    resolution = resolve_all([BasicColor(1), BasicColor(4, False, BG)])
    assert resolution.set_params == (31, 44)
    assert resolution.reset_params == (39, 49)


def test_resolve_all_total():
    assert resolve_all([StyleKind.BOLD, IndexedColor(1)], RevertMode.TOTAL).reset_params == (0,)


def test_resolve_all_needs_a_kind():
    with pytest.raises(ValueError):
        resolve_all([])


def test_resolve_rejects_unknown_kind():
    with pytest.raises(TypeError):
        resolve(42)
