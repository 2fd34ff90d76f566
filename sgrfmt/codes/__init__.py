"""SGR code tables, color descriptors and the code resolver."""

from sgrfmt.codes.colors import BasicColor, ColorKind, IndexedColor, RgbColor, parse_color, parse_color_pair
from sgrfmt.codes.registry import Plane, RevertGroup, StyleKind, revert_group, reset_code
from sgrfmt.codes.resolver import Resolution, resolve, resolve_all

__all__ = [
    "BasicColor",
    "ColorKind",
    "IndexedColor",
    "RgbColor",
    "parse_color",
    "parse_color_pair",
    "Plane",
    "RevertGroup",
    "StyleKind",
    "revert_group",
    "reset_code",
    "Resolution",
    "resolve",
    "resolve_all",
]
