"""Exceptions raised while parsing, resolving and assembling SGR sequences.

All of them derive from SgrError, so callers can catch the whole family.
They are ordinary recoverable exceptions: every failure is a deterministic
function of the input, and the fix is to call again with corrected input.
"""


class SgrError(Exception):
    """Base class for every sgrfmt error."""


class SgrSyntaxError(SgrError, ValueError):
    """Malformed or misordered sigils, or content that does not fit the mode."""

    def __init__(self, message, token=None):
        super().__init__(message)
        self.token = token


class UnsupportedModeError(SgrError):
    """Raised when the constant-format mode is requested while it is disabled."""


class ColorRangeError(SgrError, ValueError):
    """A color index or component lies outside its allowed range."""

    def __init__(self, message, value=None):
        super().__init__(message)
        self.value = value


class ContentTypeError(SgrError, TypeError):
    """Content that cannot be embedded in the requested output mode."""

    def __init__(self, message, value=None):
        super().__init__(message)
        self.value = value
