"""Configuration template substitution utilities."""

import os
import re
from pathlib import Path

import yaml
from loguru import logger
from pydantic_core import ValidationError

from src.storefront.runtime.config.config_data import ConfigData
from src.storefront.runtime.config.settings import EnvironmentVariables


def substitute_env_vars(text: str) -> str:
    """
    Substitute environment variable placeholders in text.

    Supports formats:
    - ${VAR_NAME} - required variable (raises error if missing)
    - ${VAR_NAME:-default} - optional with default value
    - ${VAR_NAME:?error_message} - required with custom error message
    """
    def replacer(match):
        var_expr = match.group(1)

        # Handle default values: ${VAR:-default}
        if ":-" in var_expr:
            var_name, default = var_expr.split(":-", 1)
            return os.getenv(var_name, default)

        # Handle error messages: ${VAR:?message}
        elif ":?" in var_expr:
            var_name, error_msg = var_expr.split(":?", 1)
            value = os.getenv(var_name)
            if value is None:
                raise ValueError(f"Required environment variable {var_name}: {error_msg}")
            return value

        # Handle required variables: ${VAR}
        else:
            var_name = var_expr
            value = os.getenv(var_name)
            if value is None:
                raise ValueError(f"Required environment variable {var_name} not set")
            return value

    # One level of nested braces is allowed so defaults can carry {data_dir}
    pattern = r'\$\{((?:[^{}]|\{[^{}]*\})+)\}'
    return re.sub(pattern, replacer, text)


def apply_environment_overrides(env_mode: str) -> None:
    """Promote ``<ENV>_NAME`` variables to ``NAME`` for the active environment."""
    prefix = f"{env_mode.upper()}_"
    env_variables = [(var, value) for var, value in os.environ.items() if var.startswith(prefix)]
    if env_variables:
        logger.info(
            "Applying environment-specific overrides: {}",
            [name for name, _ in env_variables],
        )

    for var_name, var_value in env_variables:
        new_var_name = var_name[len(prefix):]
        os.environ[new_var_name] = var_value
        logger.debug("Set environment variable {} from {}", new_var_name, var_name)


def expand_data_dir(config_data: dict) -> None:
    """Expand {data_dir} in the database URL so the SQLite file follows the data volume."""
    database = config_data.get("database") or {}
    url = database.get("url")
    if isinstance(url, str) and "{data_dir}" in url:
        storage = config_data.get("storage") or {}
        data_dir = str(storage.get("data_dir") or "./data").rstrip("/") or "/"
        database["url"] = url.replace("{data_dir}", data_dir)
        config_data["database"] = database


def load_templated_yaml(file_path: Path, env: EnvironmentVariables | None = None) -> ConfigData:
    """
    Load a YAML file with environment variable substitution.

    Args:
        file_path: Path to the YAML file
        env: Deployment variables; read from the environment when omitted

    Returns:
        Parsed and validated configuration

    Raises:
        ValueError: If required environment variables are missing or the YAML is invalid
        FileNotFoundError: If the YAML file doesn't exist
    """
    env = env or EnvironmentVariables()

    with open(file_path, encoding="utf-8") as f:
        content = f.read()

    logger.info("Loading configuration for environment: {}", env.app_environment)
    apply_environment_overrides(env.app_environment)

    substituted_content = substitute_env_vars(content)

    try:
        loaded = yaml.safe_load(substituted_content)
        if not loaded:
            raise ValueError("Failed to parse YAML")
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML: {e}") from e

    # Extract the 'config' section from the YAML structure
    config_data = loaded.get("config") or {}

    # A mounted volume wins over whatever data_dir the file names
    if env.resolved_data_dir:
        storage = config_data.get("storage") or {}
        storage["data_dir"] = env.resolved_data_dir
        config_data["storage"] = storage

    expand_data_dir(config_data)

    try:
        config = ConfigData(**config_data)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e

    if config.app.environment == "production" and not config.jwt.secret:
        logger.warning("JWT secret is not configured; the API will refuse to start")

    return config
