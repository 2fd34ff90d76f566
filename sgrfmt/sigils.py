"""
Leading-sigil grammar.

A call may start with up to two sigils, in a fixed order: an output sigil
(``%`` format, ``@`` string, ``#`` constant format) followed by a revert
sigil (``!`` none, ``*`` total). A single ``,`` may follow them. Whatever is
left is handed back untouched.

    call      := [output] [revert] [","] remainder
    output    := "%" | "@" | "#"
    revert    := "!" | "*"
"""

import logging
from enum import Enum
from typing import Any, List, Optional, Sequence, Tuple

from sgrfmt.config import get_settings
from sgrfmt.errors import SgrSyntaxError, UnsupportedModeError
from sgrfmt.modes import OutputMode, RevertMode

logger = logging.getLogger(__name__)


class Sigil(str, Enum):
    """Symbolic tokens of the invocation grammar."""

    FORMAT = "%"
    STRING = "@"
    CONST_FORMAT = "#"
    REVERT_NONE = "!"
    REVERT_TOTAL = "*"
    SEPARATOR = ","
    PARAMS_END = ";"

    def __str__(self):
        return self.value


_OUTPUT_SIGILS = {
    Sigil.FORMAT: OutputMode.FORMAT,
    Sigil.STRING: OutputMode.STRING,
    Sigil.CONST_FORMAT: OutputMode.CONST_FORMAT,
}

_REVERT_SIGILS = {
    Sigil.REVERT_NONE: RevertMode.NONE,
    Sigil.REVERT_TOTAL: RevertMode.TOTAL,
}

_LEADING_SIGILS = set(_OUTPUT_SIGILS) | set(_REVERT_SIGILS) | {Sigil.SEPARATOR}


def _is_sigil(token: Any, table) -> bool:
    # Sigil is a str enum, so a plain "@" compares equal to Sigil.STRING.
    return isinstance(token, Sigil) and token in table


def tokenize_sigils(text: str) -> List[Sigil]:
    """Split a textual sigil prefix such as ``"@*,"`` into tokens.

    Raises:
        SgrSyntaxError: If ``text`` contains anything but sigils and whitespace
    """
    tokens = []
    for char in text:
        if char.isspace():
            continue
        try:
            tokens.append(Sigil(char))
        except ValueError:
            raise SgrSyntaxError(f"Unknown sigil {char!r} in {text!r}", char)
    return tokens


class _SigilParser:
    """Recursive-descent parser over the first tokens of a call."""

    def __init__(self, tokens: Sequence[Any], const_format: bool):
        self.tokens = tuple(tokens)
        self.pos = 0
        self.const_format = const_format
        self.saw_sigil = False
        self.saw_revert = False

    def _peek(self) -> Any:
        return self.tokens[self.pos] if self.pos < len(self.tokens) else None

    def parse(self) -> Tuple[OutputMode, RevertMode, Tuple[Any, ...]]:
        output = self._output()
        revert = self._revert()
        self._separator()
        remainder = self.tokens[self.pos :]
        self._check_remainder(remainder)
        return output, revert, remainder

    def _output(self) -> OutputMode:
        token = self._peek()
        if not _is_sigil(token, _OUTPUT_SIGILS):
            return OutputMode.LITERAL
        if token is Sigil.CONST_FORMAT and not self.const_format:
            raise UnsupportedModeError(
                "The '#' constant-format sigil requires the const_format feature to be enabled"
            )
        self.pos += 1
        self.saw_sigil = True
        return _OUTPUT_SIGILS[token]

    def _revert(self) -> RevertMode:
        token = self._peek()
        if not _is_sigil(token, _REVERT_SIGILS):
            return RevertMode.SINGLE
        self.pos += 1
        self.saw_sigil = True
        self.saw_revert = True
        return _REVERT_SIGILS[token]

    def _separator(self) -> None:
        if self.saw_sigil and self._peek() is Sigil.SEPARATOR:
            self.pos += 1

    def _check_remainder(self, remainder: Tuple[Any, ...]) -> None:
        for index, token in enumerate(remainder):
            if not _is_sigil(token, _LEADING_SIGILS):
                continue
            if index == 0 and self.saw_revert and token in _OUTPUT_SIGILS:
                raise SgrSyntaxError(
                    f"Output sigil '{token}' must come before the revert sigil", token
                )
            raise SgrSyntaxError(f"Unexpected sigil '{token}'", token)


def parse_sigils(
    tokens: Sequence[Any], const_format: Optional[bool] = None
) -> Tuple[OutputMode, RevertMode, Tuple[Any, ...]]:
    """Parse the leading sigils of a call.

    Args:
        tokens: The call's tokens; only Sigil members count as sigils
        const_format: Whether ``#`` is allowed; None reads the active settings

    Returns:
        (output mode, revert mode, remaining tokens)

    Raises:
        SgrSyntaxError: If sigils are misordered, repeated or stray
        UnsupportedModeError: If ``#`` is used while the feature is disabled
    """
    if const_format is None:
        const_format = get_settings().const_format
    return _SigilParser(tokens, const_format).parse()


def parse_prefix(text: str, const_format: Optional[bool] = None) -> Tuple[OutputMode, RevertMode]:
    """Parse a prefix made of sigils only, e.g. ``"%!"``.

    Raises:
        SgrSyntaxError: If the prefix is malformed
        UnsupportedModeError: If ``#`` is used while the feature is disabled
    """
    output, revert, rest = parse_sigils(tokenize_sigils(text), const_format)
    if rest:
        raise SgrSyntaxError(f"Unexpected sigil '{rest[0]}' in {text!r}", rest[0])
    logger.debug(f"Sigil prefix {text!r} -> {output.value}, {revert.value}")
    return output, revert
