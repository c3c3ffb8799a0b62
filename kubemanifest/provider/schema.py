"""Host-facing provider schema.

Describes the configuration fields and resource types the provider exposes to
the orchestration host, and binds host-supplied values to the lifecycle
adapter.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import Any

from loguru import logger
from pydantic import ValidationError

from kubemanifest.config import ProviderConfig
from kubemanifest.errors import UnknownResourceTypeError

from .manifest import (
    RESOURCE_TYPE,
    ControllerFactory,
    ManifestResource,
    ResourceData,
    kubectl_controller_factory,
)


@dataclass(frozen=True)
class SchemaField:
    """A single string attribute in the provider or resource schema."""

    name: str
    required: bool = False
    sensitive: bool = False
    description: str = ""
    type: str = "string"


PROVIDER_SCHEMA: tuple[SchemaField, ...] = (
    SchemaField("kubeconfig", description="Path to a kubeconfig file"),
    SchemaField(
        "kubeconfig_content",
        sensitive=True,
        description="Inline kubeconfig document",
    ),
    SchemaField("kubeconfig_context", description="kubeconfig context to use"),
)

RESOURCE_SCHEMAS: dict[str, tuple[SchemaField, ...]] = {
    RESOURCE_TYPE: (
        SchemaField(
            "content",
            required=True,
            sensitive=True,
            description="YAML or JSON manifest applied with kubectl",
        ),
    ),
}


class ManifestProvider:
    """Entry point the orchestration host talks to.

    Example:
        provider = ManifestProvider()
        provider.configure({"kubeconfig_context": "staging"})
        resource = provider.resource("k8s_manifest")
        data = provider.resource_data("k8s_manifest", {"content": manifest})
        resource.create(data)
    """

    def __init__(
        self,
        controller_factory: ControllerFactory = kubectl_controller_factory,
        *,
        config: ProviderConfig | None = None,
    ) -> None:
        self._controller_factory = controller_factory
        self.config = config or ProviderConfig()

    @staticmethod
    def schema() -> dict[str, Any]:
        """Return the provider and resource schemas as plain data."""
        return {
            "provider": [asdict(f) for f in PROVIDER_SCHEMA],
            "resources": {
                name: [asdict(f) for f in fields]
                for name, fields in RESOURCE_SCHEMAS.items()
            },
        }

    def configure(self, raw: Mapping[str, Any]) -> ProviderConfig:
        """Validate host-supplied provider settings.

        Raises:
            ValueError: If the settings do not match the provider schema
        """
        try:
            self.config = ProviderConfig.model_validate(dict(raw))
        except ValidationError as e:
            raise ValueError(f"Invalid provider configuration: {e}") from e
        logger.debug(
            f"Provider configured (context: {self.config.kubeconfig_context or 'default'})"
        )
        return self.config

    def resource(self, name: str) -> ManifestResource:
        """Return the lifecycle adapter for a resource type."""
        if name not in RESOURCE_SCHEMAS:
            raise UnknownResourceTypeError(name)
        return ManifestResource(self.config, self._controller_factory)

    @staticmethod
    def resource_data(
        name: str, values: Mapping[str, Any], resource_id: str = ""
    ) -> ResourceData:
        """Build the state record for a resource from host-supplied values.

        Raises:
            UnknownResourceTypeError: If the resource type is not served
            ValueError: If a required field is missing or not a string
        """
        if name not in RESOURCE_SCHEMAS:
            raise UnknownResourceTypeError(name)
        for field in RESOURCE_SCHEMAS[name]:
            value = values.get(field.name)
            if field.required and not value:
                raise ValueError(f"{name}: '{field.name}' is required")
            if value is not None and not isinstance(value, str):
                raise ValueError(f"{name}: '{field.name}' must be a string")
        return ResourceData(content=values["content"], id=resource_id)
