"""Provider configuration model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class ProviderConfig(BaseModel):
    """Immutable provider configuration threaded into every lifecycle call.

    ``kubeconfig`` and ``kubeconfig_content`` are mutually exclusive. The
    conflict is reported when an operation resolves credentials rather than
    at load time, so a misconfigured provider still loads and fails each
    operation with a descriptive error.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    kubeconfig: str = Field(default="", description="Path to a kubeconfig file")
    kubeconfig_content: SecretStr = Field(
        default=SecretStr(""),
        description="Inline kubeconfig document, materialized per operation",
    )
    kubeconfig_context: str = Field(
        default="", description="Context to select from the kubeconfig"
    )
    kubectl_binary: str = Field(
        default="kubectl", min_length=1, description="kubectl executable"
    )
    log_level: str = Field(default="INFO", description="Loguru log level")

    @field_validator("kubeconfig", "kubeconfig_context", mode="before")
    @classmethod
    def _none_to_empty(cls, value: object) -> object:
        return "" if value is None else value

    @field_validator("kubeconfig_content", mode="before")
    @classmethod
    def _none_content_to_empty(cls, value: object) -> object:
        return "" if value is None else value

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @property
    def inline_kubeconfig(self) -> str:
        """Plain-text inline kubeconfig content (empty when unset)."""
        return self.kubeconfig_content.get_secret_value()
