"""Tests for the sigil parser."""

import pytest

from sgrfmt.config import use_settings
from sgrfmt.config.types import FeatureConfig, Settings
from sgrfmt.errors import SgrSyntaxError, UnsupportedModeError
from sgrfmt.modes import OutputMode, RevertMode
from sgrfmt.sigils import Sigil, parse_prefix, parse_sigils, tokenize_sigils


def test_no_sigils():
    assert parse_sigils(["hi"]) == (OutputMode.LITERAL, RevertMode.SINGLE, ("hi",))
    assert parse_sigils([]) == (OutputMode.LITERAL, RevertMode.SINGLE, ())


@pytest.mark.parametrize(
    "tokens, output, revert",
    [
        ([Sigil.FORMAT], OutputMode.FORMAT, RevertMode.SINGLE),
        ([Sigil.STRING], OutputMode.STRING, RevertMode.SINGLE),
        ([Sigil.REVERT_NONE], OutputMode.LITERAL, RevertMode.NONE),
        ([Sigil.REVERT_TOTAL], OutputMode.LITERAL, RevertMode.TOTAL),
        ([Sigil.FORMAT, Sigil.REVERT_NONE], OutputMode.FORMAT, RevertMode.NONE),
        ([Sigil.STRING, Sigil.REVERT_TOTAL, Sigil.SEPARATOR], OutputMode.STRING, RevertMode.TOTAL),
    ],
)
def test_sigil_combinations(tokens, output, revert):
    assert parse_sigils(tokens + ["x", 1]) == (output, revert, ("x", 1))


def test_separator_is_optional():
    with_sep = parse_sigils([Sigil.STRING, Sigil.SEPARATOR, "x"])
    without = parse_sigils([Sigil.STRING, "x"])
    assert with_sep == without


def test_plain_strings_are_content():
    assert parse_sigils(["@", "!", "x"]) == (OutputMode.LITERAL, RevertMode.SINGLE, ("@", "!", "x"))


def test_remainder_passes_params_through():
    _, _, rest = parse_sigils([Sigil.STRING, 196, Sigil.PARAMS_END, "x"])
    assert rest == (196, Sigil.PARAMS_END, "x")


def test_revert_before_output_is_rejected():
    with pytest.raises(SgrSyntaxError, match="before"):
        parse_sigils([Sigil.REVERT_TOTAL, Sigil.STRING, "x"])
    with pytest.raises(SgrSyntaxError, match="before"):
        parse_sigils([Sigil.REVERT_NONE, Sigil.SEPARATOR, Sigil.FORMAT, "x"])


@pytest.mark.parametrize(
    "tokens",
    [
        [Sigil.STRING, Sigil.FORMAT, "x"],
        [Sigil.REVERT_NONE, Sigil.REVERT_TOTAL, "x"],
        [Sigil.SEPARATOR, "x"],
        [Sigil.STRING, Sigil.SEPARATOR, Sigil.SEPARATOR, "x"],
        ["x", Sigil.REVERT_NONE],
    ],
)
def test_stray_sigils_are_rejected(tokens):
    with pytest.raises(SgrSyntaxError):
        parse_sigils(tokens)


def test_const_format_disabled():
    with pytest.raises(UnsupportedModeError):
        parse_sigils([Sigil.CONST_FORMAT, "x"], const_format=False)


def test_const_format_enabled_explicitly():
    output, revert, _ = parse_sigils([Sigil.CONST_FORMAT, Sigil.REVERT_NONE, "x"], const_format=True)
    assert (output, revert) == (OutputMode.CONST_FORMAT, RevertMode.NONE)


def test_const_format_follows_settings():
    with pytest.raises(UnsupportedModeError):
        parse_prefix("#")
    use_settings(Settings(features=FeatureConfig(const_format=True)))
    assert parse_prefix("#") == (OutputMode.CONST_FORMAT, RevertMode.SINGLE)


def test_tokenize():
    assert tokenize_sigils("@*,") == [Sigil.STRING, Sigil.REVERT_TOTAL, Sigil.SEPARATOR]
    assert tokenize_sigils(" % ! ") == [Sigil.FORMAT, Sigil.REVERT_NONE]
    assert tokenize_sigils("") == []


def test_tokenize_unknown_character():
    with pytest.raises(SgrSyntaxError) as exc_info:
        tokenize_sigils("@x")
    assert exc_info.value.token == "x"


@pytest.mark.parametrize("prefix", ["*@", "!%", "@@", "!!", "@;", ","])
def test_parse_prefix_rejects(prefix):
    with pytest.raises(SgrSyntaxError):
        parse_prefix(prefix)


@pytest.mark.parametrize(
    "prefix, expected",
    [
        ("", (OutputMode.LITERAL, RevertMode.SINGLE)),
        ("%", (OutputMode.FORMAT, RevertMode.SINGLE)),
        ("@*", (OutputMode.STRING, RevertMode.TOTAL)),
        ("%!,", (OutputMode.FORMAT, RevertMode.NONE)),
        ("*", (OutputMode.LITERAL, RevertMode.TOTAL)),
    ],
)
def test_parse_prefix(prefix, expected):
    assert parse_prefix(prefix) == expected
