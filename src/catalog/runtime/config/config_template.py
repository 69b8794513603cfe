"""Configuration template substitution utilities."""

import os
import re
from pathlib import Path

import yaml
from loguru import logger
from pydantic_core import ValidationError

from src.catalog.runtime.config.config_data import ConfigData

_PLACEHOLDER = re.compile(r"\$\{([^}]+)\}")


def substitute_env_vars(text: str) -> str:
    """
    Substitute environment variable placeholders in text.

    Supports formats:
    - ${VAR_NAME} - required variable (raises error if missing)
    - ${VAR_NAME:-default} - optional with default value
    - ${VAR_NAME:?error_message} - required with custom error message
    """

    def replacer(match: re.Match) -> str:
        var_expr = match.group(1)

        if ":-" in var_expr:
            var_name, default = var_expr.split(":-", 1)
            return os.getenv(var_name, default)

        if ":?" in var_expr:
            var_name, error_msg = var_expr.split(":?", 1)
            value = os.getenv(var_name)
            if value is None:
                raise ValueError(f"Required environment variable {var_name}: {error_msg}")
            return value

        value = os.getenv(var_expr)
        if value is None:
            raise ValueError(f"Required environment variable {var_expr} not set")
        return value

    return _PLACEHOLDER.sub(replacer, text)


def apply_environment_overrides(env_mode: str) -> None:
    """Copy ``<ENV>_NAME`` variables onto ``NAME`` for the active environment.

    ``PRODUCTION_DATABASE_URL`` becomes ``DATABASE_URL`` when running in
    production, so a single config.yaml can serve every environment.
    """
    prefix = f"{env_mode.upper()}_"
    overrides = [
        (var, value) for var, value in os.environ.items() if var.startswith(prefix)
    ]
    if overrides:
        logger.info(
            "Applying environment-specific overrides: {}",
            [name for name, _ in overrides],
        )

    for var_name, var_value in overrides:
        new_var_name = var_name[len(prefix):]
        os.environ[new_var_name] = var_value
        logger.debug("Set environment variable {} from {}", new_var_name, var_name)


def parse_config(content: str) -> ConfigData:
    """Substitute placeholders in a YAML document and validate it as ConfigData."""
    substituted_content = substitute_env_vars(content)

    try:
        loaded = yaml.safe_load(substituted_content)
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML: {e}") from e

    if not loaded:
        raise ValueError("Failed to parse YAML")
    if not isinstance(loaded, dict):
        raise ValueError("Configuration root must be a mapping")

    try:
        # Extract the 'config' section from the YAML structure
        return ConfigData(**(loaded.get("config") or {}))
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e


def load_templated_yaml(file_path: Path, env_mode: str | None = None) -> ConfigData:
    """
    Load a YAML file with environment variable substitution.

    Args:
        file_path: Path to the YAML file
        env_mode: Environment whose prefixed variables override plain ones;
            read from APP_ENVIRONMENT when omitted

    Returns:
        Parsed and validated configuration

    Raises:
        ValueError: If required environment variables are missing or the
            content is not a valid configuration
        FileNotFoundError: If the YAML file doesn't exist
    """
    with open(file_path) as f:
        content = f.read()

    env_mode = env_mode or os.getenv("APP_ENVIRONMENT", "development")
    logger.info("Loading configuration for environment: {}", env_mode)
    apply_environment_overrides(env_mode)

    return parse_config(content)
