"""Output and revert modes of a styling call."""

from enum import Enum


class OutputMode(Enum):
    """How the styled result is represented.

    LITERAL and CONST_FORMAT are evaluated when the call is made and need
    constant content; FORMAT defers rendering until the value is formatted;
    STRING renders immediately into a new str.
    """

    LITERAL = "literal"
    FORMAT = "format"
    STRING = "string"
    CONST_FORMAT = "const_format"

    @property
    def needs_template(self) -> bool:
        """Whether content is a template plus substitution arguments."""
        return self is not OutputMode.LITERAL


class RevertMode(Enum):
    """What is emitted after the content."""

    SINGLE = "single"  # revert only the kind's own group
    TOTAL = "total"  # reset all attributes
    NONE = "none"  # leave the formatting on
