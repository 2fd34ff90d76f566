"""sgrfmt - wrap text in SGR terminal control sequences.

Every style and color is exposed as a macro object. Calling a macro wraps its
content in the style's "set" sequence and, by default, the sequence that
reverts it:

    >>> from sgrfmt import bold, green
    >>> bold("hi")
    '\\x1b[1mhi\\x1b[22m'

Leading sigils select the output and revert modes:

    >>> green["@!"]("{} items", 3)
    '\\x1b[32m3 items'
"""

import logging

from sgrfmt.codes.colors import BasicColor, IndexedColor, RgbColor, parse_color, parse_color_pair
from sgrfmt.codes.registry import Plane, RevertGroup, StyleKind
from sgrfmt.codes.resolver import Resolution, resolve, resolve_all
from sgrfmt.errors import ColorRangeError, ContentTypeError, SgrError, SgrSyntaxError, UnsupportedModeError
from sgrfmt.invocation import invoke
from sgrfmt.macros import *  # noqa: F401,F403
from sgrfmt.macros import MACROS, ColorFamily, StyleMacro, __all__ as _macro_names
from sgrfmt.modes import OutputMode, RevertMode
from sgrfmt.output.assembler import ConstText, SgrFormat
from sgrfmt.sigils import Sigil, parse_prefix, parse_sigils, tokenize_sigils
from sgrfmt.version import __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "BasicColor",
    "IndexedColor",
    "RgbColor",
    "parse_color",
    "parse_color_pair",
    "Plane",
    "RevertGroup",
    "StyleKind",
    "Resolution",
    "resolve",
    "resolve_all",
    "SgrError",
    "SgrSyntaxError",
    "UnsupportedModeError",
    "ColorRangeError",
    "ContentTypeError",
    "invoke",
    "MACROS",
    "ColorFamily",
    "StyleMacro",
    "OutputMode",
    "RevertMode",
    "ConstText",
    "SgrFormat",
    "Sigil",
    "parse_prefix",
    "parse_sigils",
    "tokenize_sigils",
] + list(_macro_names)
