"""Tests for the SGR code tables."""

import pytest

from sgrfmt.codes import registry
from sgrfmt.codes.registry import Plane, RevertGroup, StyleKind, reset_code, revert_group, style_code
from sgrfmt.codes.colors import BasicColor, IndexedColor, RgbColor


def test_every_style_has_a_code_and_group():
    for kind in StyleKind:
        assert isinstance(style_code(kind), int)
        assert isinstance(revert_group(kind), RevertGroup)


def test_every_group_has_a_reset_code():
    assert set(registry.RESET_CODES) == set(RevertGroup)


@pytest.mark.parametrize(
    "group, code",
    [
        (RevertGroup.INTENSITY, 22),
        (RevertGroup.ITALIC, 23),
        (RevertGroup.UNDERLINE, 24),
        (RevertGroup.BLINK, 25),
        (RevertGroup.INVERT, 27),
        (RevertGroup.CONCEAL, 28),
        (RevertGroup.STRIKETHROUGH, 29),
        (RevertGroup.SCRIPT, 75),
        (RevertGroup.FG_COLOR, 39),
        (RevertGroup.BG_COLOR, 49),
    ],
)
def test_reset_codes(group, code):
    assert reset_code(group) == code


def test_style_codes():
    assert [style_code(kind) for kind in StyleKind] == [1, 2, 3, 4, 5, 6, 7, 8, 9, 73, 74]


def test_shared_groups():
    assert revert_group(StyleKind.BOLD) is revert_group(StyleKind.FAINT) is RevertGroup.INTENSITY
    assert revert_group(StyleKind.BLINK) is revert_group(StyleKind.BLINK2) is RevertGroup.BLINK
    assert revert_group(StyleKind.SUPERSCRIPT) is revert_group(StyleKind.SUBSCRIPT) is RevertGroup.SCRIPT


def test_singleton_groups():
    singles = [StyleKind.ITALIC, StyleKind.UNDERLINE, StyleKind.INVERT, StyleKind.CONCEAL, StyleKind.STRIKETHROUGH]
    groups = [revert_group(kind) for kind in singles]
    assert len(set(groups)) == len(singles)
    for group in groups:
        members = [kind for kind in StyleKind if revert_group(kind) is group]
        assert len(members) == 1


def test_color_groups_follow_plane():
    for plane, group in [(Plane.FOREGROUND, RevertGroup.FG_COLOR), (Plane.BACKGROUND, RevertGroup.BG_COLOR)]:
        assert revert_group(BasicColor(1, False, plane)) is group
        assert revert_group(BasicColor(1, True, plane)) is group
        assert revert_group(IndexedColor(200, plane)) is group
        assert revert_group(RgbColor(1, 2, 3, plane)) is group


def test_revert_group_rejects_other_values():
    with pytest.raises(TypeError):
        revert_group("bold")


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        registry.STYLE_CODES[StyleKind.BOLD] = 99
    with pytest.raises(TypeError):
        registry.RESET_CODES[RevertGroup.FG_COLOR] = 0
