"""
Styling macros.

Each style and basic color is a StyleMacro; the indexed and RGB colors are
ColorFamily objects that produce a StyleMacro once their parameters are
bound. A macro can be used three ways:

    bold("hi")                          # literal, single revert
    bold["@*"]("{} items", count)       # modes picked by a sigil prefix
    bold(Sigil.STRING, "{} items", n)   # sigils as leading tokens
    bold.string("{} items", n, revert=RevertMode.TOTAL)

Color families are bound with indexing:

    fg_256[196]("x")
    fg_rgb[255, 0, 0]["@"]("{}", value)
    bg_rgb["#202020"]("x")
"""

import logging
from typing import Any, Dict, Optional, Sequence, Tuple, Union

from sgrfmt.codes.colors import BasicColor, IndexedColor, RgbColor, parse_color, parse_color_pair
from sgrfmt.codes.registry import BASE_COLOR_NAMES, Plane, RevertGroup, StyleKind, revert_group
from sgrfmt.codes.resolver import Resolution, resolve_all
from sgrfmt.config import get_settings
from sgrfmt.errors import SgrSyntaxError, UnsupportedModeError
from sgrfmt.modes import OutputMode, RevertMode
from sgrfmt.output.assembler import LiteralContent, StyleRequest, TemplateContent, render_request
from sgrfmt.output.sequences import RESET_SEQUENCE
from sgrfmt.sigils import Sigil, parse_prefix, parse_sigils

logger = logging.getLogger(__name__)


def _template_content(tokens: Sequence[Any], kwargs: Dict[str, Any]) -> TemplateContent:
    if tokens and isinstance(tokens[0], str):
        return TemplateContent(tokens[0], tuple(tokens[1:]), kwargs)
    if not tokens:
        raise SgrSyntaxError("Expected a template or an argument after the sigils")
    # No template: every argument is rendered in turn.
    return TemplateContent("{}" * len(tokens), tuple(tokens), kwargs)


class StyleMacro:
    """Wraps content in the SGR sequences of one or more kinds."""

    def __init__(
        self,
        name: str,
        kinds: Sequence[Any],
        output: OutputMode = OutputMode.LITERAL,
        revert: RevertMode = RevertMode.SINGLE,
    ):
        self.name = name
        self.kinds = tuple(kinds)
        self.output = output
        self.revert = revert

    def __repr__(self):
        return f"StyleMacro({self.name!r}, output={self.output.value}, revert={self.revert.value})"

    @property
    def groups(self) -> Tuple[RevertGroup, ...]:
        return self.codes().groups

    def with_modes(self, output: Optional[OutputMode] = None, revert: Optional[RevertMode] = None) -> "StyleMacro":
        """Return a copy of this macro with other default modes."""
        return StyleMacro(
            self.name,
            self.kinds,
            output if output is not None else self.output,
            revert if revert is not None else self.revert,
        )

    def __getitem__(self, sigils: str) -> "StyleMacro":
        if not isinstance(sigils, str):
            raise TypeError(f"Sigil prefix must be a str, got {type(sigils).__name__}")
        output, revert = parse_prefix(sigils)
        return self.with_modes(output, revert)

    def __call__(self, *tokens, **kwargs):
        """Style content, honouring leading Sigil tokens.

        Leading sigils replace this macro's modes entirely; without them the
        macro's own modes apply.
        """
        output, revert, rest = parse_sigils(tokens)
        if len(rest) == len(tokens):
            output, revert = self.output, self.revert
        return self._render(output, revert, rest, kwargs)

    def _render(self, output: OutputMode, revert: RevertMode, tokens: Sequence[Any], kwargs: Dict[str, Any]):
        if output is OutputMode.CONST_FORMAT and not get_settings().const_format:
            raise UnsupportedModeError("Constant-format output requires the const_format feature to be enabled")
        if output.needs_template:
            content = _template_content(tokens, kwargs)
        else:
            if kwargs:
                raise SgrSyntaxError("Keyword arguments need a format, string or constant-format mode")
            content = LiteralContent(tuple(tokens))
        return render_request(StyleRequest(self.kinds, output, revert, content))

    def literal(self, *parts, revert: Optional[RevertMode] = None) -> str:
        """Concatenate fixed text parts inside the style."""
        return self._render(OutputMode.LITERAL, revert or self.revert, parts, {})

    def fmt(self, template: str, *args, revert: Optional[RevertMode] = None, **kwargs):
        """Return a deferred SgrFormat for ``template``."""
        return self._render(OutputMode.FORMAT, revert or self.revert, (template,) + args, kwargs)

    def string(self, template: str, *args, revert: Optional[RevertMode] = None, **kwargs) -> str:
        """Render ``template`` immediately into a new str."""
        return self._render(OutputMode.STRING, revert or self.revert, (template,) + args, kwargs)

    def const(self, template: str, *args, revert: Optional[RevertMode] = None, **kwargs):
        """Render ``template`` with constant arguments into a ConstText."""
        return self._render(OutputMode.CONST_FORMAT, revert or self.revert, (template,) + args, kwargs)

    def codes(self, revert: Optional[RevertMode] = None) -> Resolution:
        """Resolve this macro's kinds without rendering anything."""
        return resolve_all(self.kinds, revert or self.revert)


class ColorFamily:
    """Indexed or RGB colors of one plane, awaiting their parameters."""

    def __init__(self, name: str, plane: Plane, rgb: bool):
        self.name = name
        self.plane = plane
        self.rgb = rgb

    def __repr__(self):
        return f"ColorFamily({self.name!r})"

    @property
    def group(self) -> RevertGroup:
        return revert_group(IndexedColor(0, self.plane))

    def color(self, *params):
        """Build the color descriptor for ``params``.

        Raises:
            ColorRangeError: If a value is out of range
        """
        if not self.rgb:
            if len(params) != 1:
                raise SgrSyntaxError(f"{self.name} takes one color index, got {len(params)} parameters")
            return IndexedColor(params[0], self.plane)
        if len(params) == 3:
            return parse_color(tuple(params), self.plane)
        if len(params) == 1:
            value = params[0]
            if isinstance(value, int) and not isinstance(value, bool):
                return RgbColor.from_int(value, self.plane)
            if isinstance(value, str):
                return RgbColor.from_hex(value, self.plane)
            return parse_color(value, self.plane)
        raise SgrSyntaxError(f"{self.name} takes r, g, b or a single packed color, got {len(params)} parameters")

    def bind(self, *params) -> StyleMacro:
        """Return the macro for a concrete color."""
        color = self.color(*params)
        label = ", ".join(str(p) for p in params)
        return StyleMacro(f"{self.name}[{label}]", (color,))

    def __getitem__(self, params) -> StyleMacro:
        if isinstance(params, tuple):
            return self.bind(*params)
        return self.bind(params)

    def __call__(self, *tokens, **kwargs):
        """Style content from a token stream: sigils, color params, ``;``, content."""
        output, revert, rest = parse_sigils(tokens)
        if self.rgb and rest and isinstance(rest[0], (int, float)) and not isinstance(rest[0], bool):
            count = 3
        else:
            count = 1
        if len(rest) < count:
            raise SgrSyntaxError(f"{self.name} expects color parameters before the content")
        params, rest = rest[:count], rest[count:]
        if rest and rest[0] is Sigil.PARAMS_END:
            rest = rest[1:]
        return self.bind(*params)._render(output, revert, rest, kwargs)


def _basic(base: int, bright: bool, plane: Plane) -> StyleMacro:
    color = BasicColor(base, bright, plane)
    prefix = "bg_" if plane is Plane.BACKGROUND else ""
    suffix = "_bright" if bright else ""
    return StyleMacro(f"{prefix}{BASE_COLOR_NAMES[base]}{suffix}", (color,))


def paint(fg: Any = None, bg: Any = None) -> StyleMacro:
    """Return a macro setting a foreground and/or background color.

    ``fg`` may also be a "<fg> in <bg>" description such as "red in blue".

    Raises:
        SgrSyntaxError: If no color is given or a name is invalid
    """
    if isinstance(fg, str) and bg is None and "in" in fg.split():
        fg_kind, bg_kind = parse_color_pair(fg)
    else:
        fg_kind = parse_color(fg, Plane.FOREGROUND) if fg is not None else None
        bg_kind = parse_color(bg, Plane.BACKGROUND) if bg is not None else None
    kinds = tuple(kind for kind in (fg_kind, bg_kind) if kind is not None)
    if not kinds:
        raise SgrSyntaxError("paint() needs a foreground or a background color")
    return StyleMacro("paint", kinds)


def reset() -> str:
    """Return the sequence that resets every attribute."""
    return RESET_SEQUENCE


# Styles
bold = StyleMacro("bold", (StyleKind.BOLD,))
faint = StyleMacro("faint", (StyleKind.FAINT,))
italic = StyleMacro("italic", (StyleKind.ITALIC,))
underline = StyleMacro("underline", (StyleKind.UNDERLINE,))
blink = StyleMacro("blink", (StyleKind.BLINK,))
blink2 = StyleMacro("blink2", (StyleKind.BLINK2,))
invert = StyleMacro("invert", (StyleKind.INVERT,))
conceal = StyleMacro("conceal", (StyleKind.CONCEAL,))
strikethrough = StyleMacro("strikethrough", (StyleKind.STRIKETHROUGH,))
superscript = StyleMacro("superscript", (StyleKind.SUPERSCRIPT,))
subscript = StyleMacro("subscript", (StyleKind.SUBSCRIPT,))

# Foreground colors
FG, BG = Plane.FOREGROUND, Plane.BACKGROUND
black, black_bright = _basic(0, False, FG), _basic(0, True, FG)
red, red_bright = _basic(1, False, FG), _basic(1, True, FG)
green, green_bright = _basic(2, False, FG), _basic(2, True, FG)
yellow, yellow_bright = _basic(3, False, FG), _basic(3, True, FG)
blue, blue_bright = _basic(4, False, FG), _basic(4, True, FG)
magenta, magenta_bright = _basic(5, False, FG), _basic(5, True, FG)
cyan, cyan_bright = _basic(6, False, FG), _basic(6, True, FG)
white, white_bright = _basic(7, False, FG), _basic(7, True, FG)

# Background colors
bg_black, bg_black_bright = _basic(0, False, BG), _basic(0, True, BG)
bg_red, bg_red_bright = _basic(1, False, BG), _basic(1, True, BG)
bg_green, bg_green_bright = _basic(2, False, BG), _basic(2, True, BG)
bg_yellow, bg_yellow_bright = _basic(3, False, BG), _basic(3, True, BG)
bg_blue, bg_blue_bright = _basic(4, False, BG), _basic(4, True, BG)
bg_magenta, bg_magenta_bright = _basic(5, False, BG), _basic(5, True, BG)
bg_cyan, bg_cyan_bright = _basic(6, False, BG), _basic(6, True, BG)
bg_white, bg_white_bright = _basic(7, False, BG), _basic(7, True, BG)

# Extended colors
fg_256 = ColorFamily("fg_256", FG, rgb=False)
bg_256 = ColorFamily("bg_256", BG, rgb=False)
fg_rgb = ColorFamily("fg_rgb", FG, rgb=True)
bg_rgb = ColorFamily("bg_rgb", BG, rgb=True)

MACROS: Dict[str, Union[StyleMacro, ColorFamily]] = {
    m.name: m
    for m in (
        bold, faint, italic, underline, blink, blink2, invert, conceal, strikethrough, superscript, subscript,
        black, red, green, yellow, blue, magenta, cyan, white,
        black_bright, red_bright, green_bright, yellow_bright,
        blue_bright, magenta_bright, cyan_bright, white_bright,
        bg_black, bg_red, bg_green, bg_yellow, bg_blue, bg_magenta, bg_cyan, bg_white,
        bg_black_bright, bg_red_bright, bg_green_bright, bg_yellow_bright,
        bg_blue_bright, bg_magenta_bright, bg_cyan_bright, bg_white_bright,
        fg_256, bg_256, fg_rgb, bg_rgb,
    )
}  # fmt: skip

__all__ = list(MACROS) + ["paint", "reset"]
