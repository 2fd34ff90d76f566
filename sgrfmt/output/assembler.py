"""
Sequence assembler.

Combines a resolution with the caller's content in the requested output
mode. Whatever the mode, the fully rendered text is

    ESC[<set>m <content> ESC[<reset>m

where the closing sequence is left out entirely when there is nothing to
reset.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Tuple, Union

from sgrfmt.codes.resolver import Resolution, resolve_all
from sgrfmt.errors import ContentTypeError
from sgrfmt.modes import OutputMode, RevertMode
from sgrfmt.output.constfmt import ConstText, format_template, formatcp
from sgrfmt.output.sequences import wrap

logger = logging.getLogger(__name__)

_LITERAL_TYPES = (str, int, float)


@dataclass(frozen=True)
class LiteralContent:
    """Fixed text, given as one or more parts joined in order."""

    parts: Tuple[Any, ...] = ()


@dataclass(frozen=True)
class TemplateContent:
    """A str.format template with its substitution arguments."""

    template: str = "{}"
    args: Tuple[Any, ...] = ()
    kwargs: Mapping[str, Any] = field(default_factory=dict)


Content = Union[LiteralContent, TemplateContent]


@dataclass(frozen=True)
class StyleRequest:
    """One styling call: what to apply, how to output it and what to wrap."""

    kinds: Tuple[Any, ...]
    output: OutputMode
    revert: RevertMode
    content: Content


class SgrFormat:
    """A styled template whose rendering is deferred.

    The full template (escape sequences included) is built once; render()
    formats it on every call. Arguments are held by reference, so rendering
    reflects their state at render time and must not outlive objects that
    become invalid.
    """

    __slots__ = ("template", "args", "kwargs")

    def __init__(self, template: str, args: Tuple[Any, ...] = (), kwargs: Mapping[str, Any] = None):
        self.template = template
        self.args = tuple(args)
        self.kwargs = dict(kwargs or {})

    def render(self) -> str:
        """Format the template with the stored arguments.

        Raises:
            SgrSyntaxError: If the placeholders do not match the arguments
        """
        return format_template(self.template, self.args, self.kwargs)

    def __str__(self):
        return self.render()

    def __format__(self, format_spec):
        return format(self.render(), format_spec)

    def __repr__(self):
        return f"SgrFormat({self.template!r}, args={self.args!r}, kwargs={self.kwargs!r})"


def _literal_text(content: Content) -> str:
    if not isinstance(content, LiteralContent):
        raise ContentTypeError("Literal output takes fixed text, not a template", content)
    for part in content.parts:
        if not isinstance(part, _LITERAL_TYPES):
            raise ContentTypeError(
                f"Literal output takes fixed text, got {type(part).__name__}; "
                "use a format or string mode for runtime values",
                part,
            )
    return "".join(str(part) for part in content.parts)


def assemble(resolution: Resolution, content: Content, output: OutputMode):
    """Wrap ``content`` in the sequences of ``resolution``.

    Args:
        resolution: Set and reset parameters
        content: LiteralContent for OutputMode.LITERAL, TemplateContent otherwise
        output: The output mode

    Returns:
        str for LITERAL and STRING, SgrFormat for FORMAT, ConstText for
        CONST_FORMAT

    Raises:
        ContentTypeError: If the content does not fit the mode
        SgrSyntaxError: If the template does not match its arguments (STRING
            and CONST_FORMAT; FORMAT reports it on render)
    """
    opening, closing = wrap(resolution)

    if output is OutputMode.LITERAL:
        return opening + _literal_text(content) + closing

    if not isinstance(content, TemplateContent):
        raise ContentTypeError(f"{output.value} output takes a template and arguments", content)
    if not isinstance(content.template, str):
        raise ContentTypeError(
            f"Template must be a str, got {type(content.template).__name__}", content.template
        )

    template = opening + content.template + closing

    if output is OutputMode.FORMAT:
        return SgrFormat(template, content.args, content.kwargs)
    if output is OutputMode.STRING:
        return format_template(template, content.args, content.kwargs)
    if output is OutputMode.CONST_FORMAT:
        return formatcp(template, *content.args, **content.kwargs)
    raise ValueError(f"Unknown output mode: {output!r}")


def render_request(request: StyleRequest):
    """Resolve and assemble a request."""
    resolution = resolve_all(request.kinds, request.revert)
    return assemble(resolution, request.content, request.output)
