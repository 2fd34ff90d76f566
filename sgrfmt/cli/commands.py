"""Command line interface for sgrfmt.

This module defines the CLI commands using Click.
"""

import logging
import sys
from typing import Optional

import click
import jsonschema

from sgrfmt.cli import formatting
from sgrfmt.config import find_config_file, load_resolved_config, load_settings, settings_from_env, use_settings, validate_config
from sgrfmt.config.types import COLOR_CHOICES, Settings
from sgrfmt.errors import SgrError
from sgrfmt.invocation import lookup
from sgrfmt.macros import MACROS, ColorFamily
from sgrfmt.sigils import parse_prefix, tokenize_sigils
from sgrfmt.utils.logging import LogLevel, configure_logging
from sgrfmt.version import __version__

logger = logging.getLogger(__name__)

LOG_LEVEL_CHOICES = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL", "NONE"]


def _fail(message: str) -> None:
    click.echo(formatting.format_error(message), err=True)
    sys.exit(1)


def _load_settings(file: Optional[str], log_level: Optional[str]) -> Settings:
    """Load settings from a config file (or the environment) and set up logging."""
    if file and find_config_file(file) is None:
        raise FileNotFoundError(f"Configuration file not found: {file}")

    config_file = find_config_file(file)
    settings = load_settings(config_file) if config_file else settings_from_env()
    use_settings(settings)

    level = getattr(LogLevel, log_level.upper()) if log_level else settings.log_level
    configure_logging(level=level)
    logger.debug(f"Using settings {settings} (config file: {config_file})")
    return settings


def _parse_param(text: str):
    """Convert a --param value to int, float or leave it as text (hex colors)."""
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return text


def _error_text(error: Exception) -> str:
    # KeyError wraps its message in quotes when converted with str().
    if isinstance(error, KeyError) and error.args:
        return str(error.args[0])
    if isinstance(error, jsonschema.exceptions.ValidationError):
        return f"Invalid configuration: {error.message}"
    return str(error)


@click.group()
@click.version_option(__version__, prog_name="sgrfmt")
def cli():
    """sgrfmt - wrap text in SGR terminal sequences."""
    configure_logging(level=LogLevel.NONE)


# ------------------------------------------------------------------------------
# RENDER COMMAND
# ------------------------------------------------------------------------------


@cli.command(help="Render text in a style or color")
@click.argument("style")
@click.argument("content", nargs=-1)
@click.option("--sigils", "-s", default="", help="Mode sigils, e.g. '@*' or '%!'")
@click.option(
    "--param",
    "-p",
    "params",
    multiple=True,
    help="Color parameter for fg_256, bg_256, fg_rgb and bg_rgb (repeatable)",
)
@click.option(
    "--color",
    type=click.Choice(COLOR_CHOICES, case_sensitive=False),
    help="Keep escape sequences in the output. Overrides the configuration file.",
)
@click.option("--no-newline", "-n", is_flag=True, help="Do not print a trailing newline")
@click.option("--file", "-f", help="Path to configuration file")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVEL_CHOICES, case_sensitive=False),
    help="Set the logging level. Overrides the configuration file.",
)
def render(style, content, sigils, params, color, no_newline, file, log_level):
    """Render CONTENT with STYLE.

    In literal mode the CONTENT parts are joined; in the other modes the first
    part is a template and the rest are its arguments.
    """
    try:
        settings = _load_settings(file, log_level)
        macro = lookup(style)

        if isinstance(macro, ColorFamily):
            if not params:
                _fail(f"{macro.name} needs color parameters (--param)")
            macro = macro.bind(*(_parse_param(p) for p in params))
        elif params:
            _fail(f"{style} takes no color parameters")

        result = macro(*tokenize_sigils(sigils), *content)
        text = str(result)
    except (SgrError, KeyError, TypeError, ValueError, FileNotFoundError, jsonschema.exceptions.ValidationError) as e:
        logger.debug(f"Render failed: {e!r}")
        _fail(_error_text(e))
        return

    use_color = formatting.resolve_color_flag((color or settings.color).lower())
    click.echo(text, nl=not no_newline, color=use_color)


# ------------------------------------------------------------------------------
# CODES COMMAND
# ------------------------------------------------------------------------------


@cli.command(help="Show the SGR parameters of a style or color")
@click.argument("style")
@click.option("--param", "-p", "params", multiple=True, help="Color parameter (repeatable)")
@click.option("--sigils", "-s", default="", help="Revert sigil, e.g. '*' or '!'")
def codes(style, params, sigils):
    """Print set parameters, reset parameters and revert groups."""
    try:
        macro = lookup(style)
        if isinstance(macro, ColorFamily):
            if not params:
                _fail(f"{macro.name} needs color parameters (--param)")
            macro = macro.bind(*(_parse_param(p) for p in params))
        _, revert = parse_prefix(sigils)
        resolution = macro.codes(revert)
    except (SgrError, KeyError, TypeError, ValueError) as e:
        _fail(_error_text(e))
        return

    click.echo(f"set:    {';'.join(str(p) for p in resolution.set_params)}")
    click.echo(f"reset:  {';'.join(str(p) for p in resolution.reset_params) or '-'}")
    click.echo(f"groups: {', '.join(g.value for g in resolution.groups)}")


# ------------------------------------------------------------------------------
# LIST COMMAND
# ------------------------------------------------------------------------------


@cli.command(name="list", help="List every style and color")
@click.option("--preview", is_flag=True, help="Show each style applied to its own name")
def list_styles(preview):
    """List macro names with their revert group."""
    for name, macro in MACROS.items():
        if isinstance(macro, ColorFamily):
            label = f"{name}[...]"
            group = macro.group.value
        else:
            label = name
            group = ", ".join(g.value for g in macro.groups)
        padding = " " * max(1, 22 - len(label))
        if preview and not isinstance(macro, ColorFamily):
            label = macro(label)
        click.echo(f"{label}{padding}{group}", color=preview or None)


# ------------------------------------------------------------------------------
# VALIDATE COMMAND
# ------------------------------------------------------------------------------


@cli.command(help="Validate a configuration file")
@click.option("--file", "-f", help="Path to configuration file")
@click.option("--strict", is_flag=True, help="Exit with error code on validation failures")
def validate(file, strict):
    """Validate the configuration file against the schema."""
    config_file = find_config_file(file)
    if not config_file:
        _fail("No configuration file found")

    click.echo(f"Validating configuration: {config_file}")

    try:
        cfg = load_resolved_config(config_file)
    except (FileNotFoundError, ValueError) as e:
        _fail(f"Failed to load configuration: {e}")
        return

    is_valid, errors = validate_config(cfg)
    if is_valid:
        click.echo(formatting.format_success("Success! The configuration is valid."))
        return

    click.echo(formatting.format_error(f"Configuration validation failed ({len(errors)} errors):"))
    for error in errors:
        click.echo(formatting.format_validation_hint(f"{error['path']}: {error['message']}"))

    if strict:
        sys.exit(1)
    click.echo(formatting.format_warning("Use --strict to exit with an error code on validation failures"))


if __name__ == "__main__":
    cli()
