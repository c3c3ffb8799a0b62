"""Configuration template substitution utilities."""

import os
import re
from typing import Any


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

        else:
            var_name = var_expr
            value = os.getenv(var_name)
            if value is None:
                raise ValueError(f"Required environment variable {var_name} not set")
            return value

    pattern = r'\$\{([^}]+)\}'
    return re.sub(pattern, replacer, text)


def substitute_env_vars_in_data(data: Any) -> Any:
    """
    Substitute environment variable placeholders in parsed YAML data.

    Only string scalars are substituted, so values containing YAML syntax
    (a whole kubeconfig document, for instance) are taken verbatim.
    """
    if isinstance(data, str):
        return substitute_env_vars(data)
    if isinstance(data, dict):
        return {key: substitute_env_vars_in_data(value) for key, value in data.items()}
    if isinstance(data, list):
        return [substitute_env_vars_in_data(item) for item in data]
    return data
