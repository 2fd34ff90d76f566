"""Assembly of SGR sequences around content."""

from sgrfmt.output.assembler import (
    ConstText,
    LiteralContent,
    SgrFormat,
    StyleRequest,
    TemplateContent,
    assemble,
    render_request,
)
from sgrfmt.output.sequences import CSI, ESC, RESET_SEQUENCE, sgr, strip_sgr

__all__ = [
    "ConstText",
    "LiteralContent",
    "SgrFormat",
    "StyleRequest",
    "TemplateContent",
    "assemble",
    "render_request",
    "CSI",
    "ESC",
    "RESET_SEQUENCE",
    "sgr",
    "strip_sgr",
]
