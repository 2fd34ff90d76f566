"""
Color descriptors.

Three kinds of color exist: the eight basic colors (optionally bright), the
256-entry indexed palette, and 24-bit RGB. Every descriptor carries the plane
(foreground or background) it applies to. Ranges are checked when a
descriptor is built, so an out-of-range value is reported as soon as it is
known.
"""

import logging
import re
from dataclasses import dataclass, replace
from typing import Optional, Sequence, Tuple, Union

from sgrfmt.codes.registry import BASE_COLOR_NAMES, Plane
from sgrfmt.errors import ColorRangeError, SgrSyntaxError

logger = logging.getLogger(__name__)

_HEX_PATTERN = re.compile(r"^(?:#|0x)([0-9a-f]+)$", re.IGNORECASE)
_MAX_RGB = 0xFFFFFF


def _check_byte(value, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} must be an integer, got {type(value).__name__}")
    if not 0 <= value <= 255:
        raise ColorRangeError(f"{what} must be within 0-255, got {value}", value)
    return value


@dataclass(frozen=True)
class BasicColor:
    """One of the eight basic colors, normal or bright."""

    base: int
    bright: bool = False
    plane: Plane = Plane.FOREGROUND

    def __post_init__(self):
        if isinstance(self.base, bool) or not isinstance(self.base, int):
            raise TypeError(f"Basic color must be an integer, got {type(self.base).__name__}")
        if not 0 <= self.base <= 7:
            raise ColorRangeError(f"Basic color must be within 0-7, got {self.base}", self.base)


@dataclass(frozen=True)
class IndexedColor:
    """An entry of the 256-color palette."""

    index: int
    plane: Plane = Plane.FOREGROUND

    def __post_init__(self):
        _check_byte(self.index, "Color index")


@dataclass(frozen=True)
class RgbColor:
    """A 24-bit color."""

    r: int
    g: int
    b: int
    plane: Plane = Plane.FOREGROUND

    def __post_init__(self):
        _check_byte(self.r, "Red component")
        _check_byte(self.g, "Green component")
        _check_byte(self.b, "Blue component")

    @classmethod
    def from_int(cls, value: int, plane: Plane = Plane.FOREGROUND) -> "RgbColor":
        """Build a color from a packed 0xRRGGBB integer."""
        if not 0 <= value <= _MAX_RGB:
            raise ColorRangeError(f"RGB color value exceeds 24 bits: {value:#x}", value)
        return cls((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF, plane)

    @classmethod
    def from_hex(cls, text: str, plane: Plane = Plane.FOREGROUND) -> "RgbColor":
        """Build a color from "#rgb", "#rrggbb" or "0xRRGGBB" text."""
        match = _HEX_PATTERN.match(text.strip())
        if not match:
            raise SgrSyntaxError(f"Invalid hex color: {text!r}", text)
        digits = match.group(1)
        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)
        return cls.from_int(int(digits, 16), plane)

    @property
    def hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


ColorKind = Union[BasicColor, IndexedColor, RgbColor]
ColorSpec = Union[ColorKind, str, int, Sequence[Union[int, float]]]


def _channel(value, what: str) -> int:
    # Floats are fractions of full intensity.
    if isinstance(value, float):
        if value < 0.0:
            raise ColorRangeError(f"{what} cannot be negative, got {value}", value)
        if value > 1.0:
            raise ColorRangeError(f"{what} cannot exceed 1.0, got {value}", value)
        return int(value * 255)
    return _check_byte(value, what)


def _parse_name(text: str, plane: Plane) -> BasicColor:
    words = text.lower().split()
    bright = False
    if len(words) == 2 and words[0] == "bright":
        bright = True
        words = words[1:]
    if len(words) != 1 or words[0] not in BASE_COLOR_NAMES:
        raise SgrSyntaxError(f"Invalid color: {text!r}", text)
    return BasicColor(BASE_COLOR_NAMES.index(words[0]), bright, plane)


def parse_color(spec: ColorSpec, plane: Plane = Plane.FOREGROUND) -> ColorKind:
    """Build a color descriptor from any of the accepted spellings.

    Accepted forms:
        - an existing descriptor (moved to ``plane``)
        - a basic color name, optionally prefixed with "bright"
        - "#rgb", "#rrggbb" or "0xRRGGBB"
        - a decimal string or integer; 0-255 selects the indexed palette,
          larger values up to 0xFFFFFF are packed RGB
        - an (r, g, b) sequence of integers 0-255 or floats 0.0-1.0

    Args:
        spec: The color to parse
        plane: Foreground or background

    Returns:
        BasicColor, IndexedColor or RgbColor

    Raises:
        ColorRangeError: If a value is out of range
        SgrSyntaxError: If text does not name a color
        TypeError: If ``spec`` has an unsupported type
    """
    if isinstance(spec, (BasicColor, IndexedColor, RgbColor)):
        return spec if spec.plane is plane else replace(spec, plane=plane)

    if isinstance(spec, str):
        text = spec.strip()
        if _HEX_PATTERN.match(text):
            return RgbColor.from_hex(text, plane)
        if text.isdigit():
            return parse_color(int(text), plane)
        return _parse_name(text, plane)

    if isinstance(spec, bool):
        raise TypeError("A boolean is not a color")

    if isinstance(spec, int):
        if spec < 0:
            raise ColorRangeError(f"Color value cannot be negative, got {spec}", spec)
        if spec <= 255:
            return IndexedColor(spec, plane)
        return RgbColor.from_int(spec, plane)

    if isinstance(spec, (tuple, list)):
        if len(spec) != 3:
            raise SgrSyntaxError(f"RGB color needs 3 components, got {len(spec)}", spec)
        r, g, b = spec
        return RgbColor(_channel(r, "Red component"), _channel(g, "Green component"), _channel(b, "Blue component"), plane)

    raise TypeError(f"Unsupported color specification: {spec!r}")


def parse_color_pair(text: str) -> Tuple[Optional[ColorKind], Optional[ColorKind]]:
    """Parse "<fg>", "<fg> in <bg>" or "in <bg>" into (foreground, background).

    Raises:
        SgrSyntaxError: If neither color is given or a name is invalid
    """
    words = text.split()
    if "in" in words:
        at = words.index("in")
        fg_text, bg_text = " ".join(words[:at]), " ".join(words[at + 1 :])
    else:
        fg_text, bg_text = " ".join(words), ""

    fg = parse_color(fg_text, Plane.FOREGROUND) if fg_text else None
    bg = parse_color(bg_text, Plane.BACKGROUND) if bg_text else None
    if fg is None and bg is None:
        raise SgrSyntaxError(f"Empty color: {text!r}", text)
    logger.debug(f"Parsed color pair {text!r} as fg={fg} bg={bg}")
    return fg, bg
