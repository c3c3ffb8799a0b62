"""Provider configuration loading."""

from pathlib import Path
from typing import Any, Literal, overload

import yaml
from loguru import logger
from pydantic import ValidationError

from kubemanifest.config.config_data import ProviderConfig
from kubemanifest.config.config_utils import substitute_env_vars_in_data

CONFIG_PATH = Path("kubemanifest.yaml")


@overload
def load_config(
    file_path: Path = ..., *, processed: Literal[False]
) -> dict[str, Any]: ...


@overload
def load_config(
    file_path: Path = ..., processed: Literal[True] = ...
) -> ProviderConfig: ...


def load_config(
    file_path: Path = CONFIG_PATH, processed: bool = True
) -> ProviderConfig | dict[str, Any]:
    """
    Load provider configuration from a YAML file.

    Args:
        file_path: Path to the YAML file (default: kubemanifest.yaml)
        processed: Whether to substitute environment variables and validate.
                  - True (default): substitute env vars in string values and
                    validate as ProviderConfig
                  - False: return the raw 'config' mapping without substitution

    Returns:
        ProviderConfig if processed is True, raw dict otherwise

    Raises:
        ValueError: If required environment variables are missing, validation fails,
                   or YAML structure is invalid (missing 'config' key)
        FileNotFoundError: If the YAML file doesn't exist

    YAML Structure Requirements:
        The YAML file must have a top-level 'config:' key, e.g.

            config:
              kubeconfig: ${HOME}/.kube/config
              kubeconfig_context: staging
    """
    with open(file_path) as f:
        content = f.read()

    try:
        loaded = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML: {e}") from e

    if not isinstance(loaded, dict) or "config" not in loaded:
        raise ValueError("Invalid YAML structure: missing 'config' key")

    config_data = loaded["config"] or {}
    if not isinstance(config_data, dict):
        raise ValueError("Invalid YAML structure: 'config' must be a mapping")
    if not processed:
        return config_data

    logger.debug(f"Loading provider configuration from {file_path}")
    config_data = substitute_env_vars_in_data(config_data)

    try:
        config = ProviderConfig.model_validate(config_data)
    except ValidationError as e:
        # Input values are left out, they may hold substituted secrets
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in e.errors(include_input=False)
        )
        raise ValueError(f"Invalid provider configuration: {problems}") from e

    logger.debug(
        f"Provider configuration loaded (keys: {sorted(config_data)})"
    )  # Log keys only
    return config
