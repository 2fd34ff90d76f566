"""
Static SGR code tables.

Maps every style kind and color plane to the SGR parameter that sets it and
to the revert group whose code undoes it. The tables are built once, at
import time, and only read-only views are exported.
"""

import logging
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple

logger = logging.getLogger(__name__)

RESET_ALL = 0

# Selector and sub-mode parameters of the extended color sequences.
INDEXED_MODE = 5
RGB_MODE = 2


class StyleKind(Enum):
    """Text styles with a single fixed SGR code."""

    BOLD = "bold"
    FAINT = "faint"
    ITALIC = "italic"
    UNDERLINE = "underline"
    BLINK = "blink"
    BLINK2 = "blink2"
    INVERT = "invert"
    CONCEAL = "conceal"
    STRIKETHROUGH = "strikethrough"
    SUPERSCRIPT = "superscript"
    SUBSCRIPT = "subscript"


class Plane(Enum):
    """Which part of a character cell a color applies to."""

    FOREGROUND = "fg"
    BACKGROUND = "bg"


class RevertGroup(Enum):
    """Kinds that are undone by the same SGR code."""

    INTENSITY = "intensity"
    ITALIC = "italic"
    UNDERLINE = "underline"
    BLINK = "blink"
    INVERT = "invert"
    CONCEAL = "conceal"
    STRIKETHROUGH = "strikethrough"
    SCRIPT = "script"
    FG_COLOR = "fg-color"
    BG_COLOR = "bg-color"


# Names of the eight basic colors, in code order.
BASE_COLOR_NAMES: Tuple[str, ...] = (
    "black",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "white",
)

# fmt: off
_STYLE_CODES = {
    StyleKind.BOLD:          (1, RevertGroup.INTENSITY),
    StyleKind.FAINT:         (2, RevertGroup.INTENSITY),
    StyleKind.ITALIC:        (3, RevertGroup.ITALIC),
    StyleKind.UNDERLINE:     (4, RevertGroup.UNDERLINE),
    StyleKind.BLINK:         (5, RevertGroup.BLINK),
    StyleKind.BLINK2:        (6, RevertGroup.BLINK),
    StyleKind.INVERT:        (7, RevertGroup.INVERT),
    StyleKind.CONCEAL:       (8, RevertGroup.CONCEAL),
    StyleKind.STRIKETHROUGH: (9, RevertGroup.STRIKETHROUGH),
    # Provisional: 73-75 are a terminal extension (mintty, some xterm builds).
    StyleKind.SUPERSCRIPT:   (73, RevertGroup.SCRIPT),
    StyleKind.SUBSCRIPT:     (74, RevertGroup.SCRIPT),
}

_RESET_CODES = {
    RevertGroup.INTENSITY:     22,
    RevertGroup.ITALIC:        23,
    RevertGroup.UNDERLINE:     24,
    RevertGroup.BLINK:         25,
    RevertGroup.INVERT:        27,
    RevertGroup.CONCEAL:       28,
    RevertGroup.STRIKETHROUGH: 29,
    RevertGroup.SCRIPT:        75,
    RevertGroup.FG_COLOR:      39,
    RevertGroup.BG_COLOR:      49,
}

# (plane, bright) -> offset added to the base color number
_BASIC_OFFSETS = {
    (Plane.FOREGROUND, False): 30,
    (Plane.FOREGROUND, True):  90,
    (Plane.BACKGROUND, False): 40,
    (Plane.BACKGROUND, True):  100,
}

_PLANE_SELECTORS = {
    Plane.FOREGROUND: 38,
    Plane.BACKGROUND: 48,
}

_PLANE_GROUPS = {
    Plane.FOREGROUND: RevertGroup.FG_COLOR,
    Plane.BACKGROUND: RevertGroup.BG_COLOR,
}
# fmt: on

STYLE_CODES: Mapping[StyleKind, int] = MappingProxyType({k: code for k, (code, _) in _STYLE_CODES.items()})
STYLE_GROUPS: Mapping[StyleKind, RevertGroup] = MappingProxyType({k: grp for k, (_, grp) in _STYLE_CODES.items()})
RESET_CODES: Mapping[RevertGroup, int] = MappingProxyType(_RESET_CODES)
BASIC_OFFSETS: Mapping[Tuple[Plane, bool], int] = MappingProxyType(_BASIC_OFFSETS)
PLANE_SELECTORS: Mapping[Plane, int] = MappingProxyType(_PLANE_SELECTORS)
PLANE_GROUPS: Mapping[Plane, RevertGroup] = MappingProxyType(_PLANE_GROUPS)

logger.debug(f"SGR registry initialized: {len(STYLE_CODES)} styles, {len(RESET_CODES)} revert groups")


def style_code(kind: StyleKind) -> int:
    """Return the SGR parameter that turns a style on."""
    return STYLE_CODES[kind]


def revert_group(kind) -> RevertGroup:
    """Return the revert group of a style kind or a color descriptor.

    Args:
        kind: A StyleKind, or any color descriptor with a ``plane`` attribute

    Returns:
        The group whose reset code undoes ``kind``
    """
    if isinstance(kind, StyleKind):
        return STYLE_GROUPS[kind]
    plane = getattr(kind, "plane", None)
    if plane is None:
        raise TypeError(f"Not a style or color kind: {kind!r}")
    return PLANE_GROUPS[plane]


def reset_code(group: RevertGroup) -> int:
    """Return the SGR parameter that reverts every member of ``group``."""
    return RESET_CODES[group]


def basic_offset(plane: Plane, bright: bool) -> int:
    """Return the code of base color 0 (black) for a plane and brightness."""
    return BASIC_OFFSETS[(plane, bright)]


def plane_selector(plane: Plane) -> int:
    """Return the extended-color selector (38 or 48) of a plane."""
    return PLANE_SELECTORS[plane]
