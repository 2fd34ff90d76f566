"""Configuration loading and validation.

Settings can come from a YAML file (``sgrfmt.yaml``), validated against the
bundled JSON schema, or from environment variables. String values in the file
may reference the environment with ``${{ env.NAME }}``; they are resolved
before validation, after loading a ``.env`` file if present.
"""

import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import jsonschema
import yaml
from dotenv import load_dotenv
from jsonschema import validators

from sgrfmt.config.types import COLOR_CHOICES, FeatureConfig, Settings
from sgrfmt.utils.logging import LogLevel

logger = logging.getLogger(__name__)

# Environment variable pattern: ${{ env.VARIABLE_NAME }}
ENV_VAR_PATTERN = re.compile(r"\$\{\{\s*env\.([A-Za-z0-9_]+)\s*\}\}")

SCHEMA_PATH = Path(__file__).parent / "schema.json"

ENV_CONST_FORMAT = "SGRFMT_CONST_FORMAT"
ENV_COLOR = "SGRFMT_COLOR"
ENV_LOG_LEVEL = "SGRFMT_LOG_LEVEL"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"", "0", "false", "no", "off"}


def find_config_file(file_path: Optional[str] = None) -> Optional[Path]:
    """Find the configuration file.

    Checks for:
    1. Explicit file path if provided
    2. sgrfmt.yaml in current directory
    3. sgrfmt.yml in current directory

    Args:
        file_path: Optional explicit path to configuration file

    Returns:
        Path to configuration file if found, None otherwise
    """
    if file_path and Path(file_path).exists():
        logger.debug(f"Using specified config file: {file_path}")
        return Path(file_path)

    for ext in ["yaml", "yml"]:
        default_path = Path.cwd() / f"sgrfmt.{ext}"
        if default_path.exists():
            logger.debug(f"Found config file: {default_path}")
            return default_path

    logger.debug("No config file found")
    return None


def load_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """Load a configuration file without validating it.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the YAML is invalid or not a mapping
    """
    config_path = Path(config_path)
    if not config_path.exists():
        logger.error(f"Configuration file not found: {config_path}")
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in configuration file: {e}")

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ValueError(f"Configuration must be a mapping, got {type(config).__name__}")
    return config


def validate_config(config: Dict[str, Any], schema_path: Path = SCHEMA_PATH) -> Tuple[bool, List[Dict[str, str]]]:
    """Validate configuration with the JSON schema and return all errors found.

    Args:
        config: Configuration to validate
        schema_path: Path to the schema file

    Returns:
        Tuple of (is_valid, errors), each error a dict with "path" and "message"
    """
    with open(schema_path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    validator_cls = validators.validator_for(schema)
    validator = validator_cls(schema)

    errors = []
    for error in validator.iter_errors(config):
        error_path = ".".join(str(p) for p in error.path) if error.path else "root"
        errors.append({"path": error_path, "message": error.message})

    return not errors, errors


def resolve_environment_variables(config: Any) -> Any:
    """Recursively resolve ``${{ env.NAME }}`` references in string values."""
    if isinstance(config, dict):
        return {k: resolve_environment_variables(v) for k, v in config.items()}
    if isinstance(config, list):
        return [resolve_environment_variables(item) for item in config]
    if isinstance(config, str):
        return resolve_env_vars_in_string(config)
    return config


def resolve_env_vars_in_string(text: str) -> str:
    """Resolve environment variables in a string; unknown ones are kept as is."""

    def replace_env_var(match):
        var_name = match.group(1)
        var_value = os.environ.get(var_name)
        if var_value is None:
            logger.warning(f"Environment variable not found: {var_name}")
            return match.group(0)
        return var_value

    return ENV_VAR_PATTERN.sub(replace_env_var, text)


def _as_bool(value: Any, name: str) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean for {name}: {value!r}")


def _as_color(value: Any) -> str:
    text = str(value).strip().lower()
    if text not in COLOR_CHOICES:
        raise ValueError(f"Invalid color setting: {value!r} (expected one of {', '.join(COLOR_CHOICES)})")
    return text


def create_settings(config: Dict[str, Any]) -> Settings:
    """Convert a validated configuration mapping to Settings."""
    features = config.get("features") or {}
    output = config.get("output") or {}
    return Settings(
        features=FeatureConfig(const_format=_as_bool(features.get("const_format", False), "features.const_format")),
        color=_as_color(output.get("color", "auto")),
        log_level=LogLevel.from_string(config.get("log_level", "none")),
    )


def load_resolved_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """Load a configuration file and resolve its environment placeholders.

    A .env file is loaded first, so its variables can be referenced too.
    """
    config = load_config(config_path)
    load_dotenv()
    return resolve_environment_variables(config)


def load_settings(file_path: Union[str, Path]) -> Settings:
    """Load, validate and convert a configuration file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        jsonschema.exceptions.ValidationError: If the configuration is invalid
        ValueError: If the YAML or a resolved value is invalid
    """
    file_path = Path(file_path)
    logger.info(f"Loading configuration from {file_path}")

    config = load_resolved_config(file_path)

    with open(SCHEMA_PATH, "r", encoding="utf-8") as f:
        schema = json.load(f)
    try:
        jsonschema.validate(config, schema)
    except jsonschema.exceptions.ValidationError as e:
        logger.error(f"Configuration validation error: {e.message}")
        raise

    settings = create_settings(config)
    logger.debug(f"Loaded settings: {settings}")
    return settings


def settings_from_env() -> Settings:
    """Build settings from SGRFMT_* environment variables."""
    return Settings(
        features=FeatureConfig(const_format=_as_bool(os.environ.get(ENV_CONST_FORMAT, ""), ENV_CONST_FORMAT)),
        color=_as_color(os.environ.get(ENV_COLOR, "auto")),
        log_level=LogLevel.from_string(os.environ.get(ENV_LOG_LEVEL, "none")),
    )
