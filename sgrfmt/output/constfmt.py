"""
Constant template formatting.

formatcp() renders a template whose arguments are all constant values and
returns the result as a ConstText. It backs the constant-format output mode.
"""

from typing import Any

from sgrfmt.errors import ContentTypeError, SgrSyntaxError

_CONSTANT_TYPES = (type(None), bool, int, float, complex, str, bytes)


class ConstText:
    """Text produced from a constant template.

    ConstText is deliberately not a str: it renders to text through str() or
    format(), but cannot be joined to plain strings with ``+``.
    """

    __slots__ = ("_text",)

    def __init__(self, text: str):
        object.__setattr__(self, "_text", text)

    def __setattr__(self, name, value):
        raise AttributeError("ConstText is immutable")

    @property
    def text(self) -> str:
        return self._text

    def __str__(self):
        return self._text

    def __format__(self, format_spec):
        return format(self._text, format_spec)

    def __len__(self):
        return len(self._text)

    def __eq__(self, other):
        if isinstance(other, ConstText):
            return self._text == other._text
        return NotImplemented

    def __hash__(self):
        return hash((ConstText, self._text))

    def __repr__(self):
        return f"ConstText({self._text!r})"


def format_template(template: str, args=(), kwargs=None) -> str:
    """Apply str.format, reporting placeholder mismatches as SgrSyntaxError."""
    try:
        return template.format(*args, **(kwargs or {}))
    except SgrSyntaxError:
        # a nested SgrFormat argument failed; keep its own message
        raise
    except (KeyError, IndexError, ValueError) as e:
        detail = f"missing argument {e}" if isinstance(e, KeyError) else str(e)
        raise SgrSyntaxError(f"Template {template!r} does not match its arguments: {detail}", template) from e


def is_constant(value: Any) -> bool:
    """Whether ``value`` is a constant that formatcp accepts as an argument."""
    if isinstance(value, (ConstText,) + _CONSTANT_TYPES):
        return True
    if isinstance(value, (tuple, frozenset)):
        return all(is_constant(item) for item in value)
    return False


def formatcp(template: str, *args, **kwargs) -> ConstText:
    """Format a template with constant arguments.

    Raises:
        ContentTypeError: If the template is not a str or an argument is not
            a constant value
        SgrSyntaxError: If the placeholders do not match the arguments
    """
    if not isinstance(template, str):
        raise ContentTypeError(f"Template must be a str, got {type(template).__name__}", template)
    for value in list(args) + list(kwargs.values()):
        if not is_constant(value):
            raise ContentTypeError(
                f"Constant formatting needs constant arguments, got {type(value).__name__}", value
            )
    return ConstText(format_template(template, args, kwargs))
