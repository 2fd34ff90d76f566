"""Call macros by name with a token stream."""

import logging
from typing import Union

from sgrfmt.macros import MACROS, ColorFamily, StyleMacro

logger = logging.getLogger(__name__)


def lookup(name: str) -> Union[StyleMacro, ColorFamily]:
    """Return the macro or color family called ``name``.

    Raises:
        KeyError: If no macro has that name
    """
    key = name.strip().lower().replace("-", "_")
    try:
        return MACROS[key]
    except KeyError:
        raise KeyError(f"Unknown style or color: {name}") from None


def invoke(name: str, *tokens, **kwargs):
    """Invoke a macro by name.

    ``invoke("bold", Sigil.STRING, "{} x", 3)`` is the same as
    ``bold(Sigil.STRING, "{} x", 3)``.
    """
    macro = lookup(name)
    logger.debug(f"Invoking {macro!r} with {len(tokens)} tokens")
    return macro(*tokens, **kwargs)
