"""Escape syntax for SGR parameter lists."""

import re
from functools import lru_cache
from typing import Tuple

from sgrfmt.codes.registry import RESET_ALL
from sgrfmt.codes.resolver import Resolution

ESC = "\x1b"
CSI = ESC + "["

_SGR_PATTERN = re.compile(r"\x1b\[[0-9;]*m")


@lru_cache(maxsize=1024)
def sgr(params: Tuple[int, ...]) -> str:
    """Wrap SGR parameters in escape syntax; no parameters give no sequence."""
    if not params:
        return ""
    return f"{CSI}{';'.join(str(p) for p in params)}m"


RESET_SEQUENCE = sgr((RESET_ALL,))


def wrap(resolution: Resolution) -> Tuple[str, str]:
    """Return the (opening, closing) sequences of a resolution."""
    return sgr(resolution.set_params), sgr(resolution.reset_params)


def strip_sgr(text: str) -> str:
    """Remove every SGR sequence from ``text``."""
    return _SGR_PATTERN.sub("", text)
