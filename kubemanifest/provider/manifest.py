"""Lifecycle adapter for the ``k8s_manifest`` resource.

Create applies the manifest and records the self-links of every resulting
object as the resource identity. Read, update, and delete address those
objects again through the identity. Every operation resolves its own
credentials and releases them before returning.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from loguru import logger
from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)

from kubemanifest.config import ProviderConfig
from kubemanifest.errors import (
    DecodeError,
    InvalidIdentifierError,
    ManifestProviderError,
    MissingSelflinkError,
    MultiError,
    NoResourcesCreatedError,
)
from kubemanifest.infra.k8s import (
    KubectlController,
    ManifestController,
    kubeconfig_path,
)

from .selflink import decode_all, encode_composite_id

RESOURCE_TYPE = "k8s_manifest"

ControllerFactory = Callable[[str, ProviderConfig], ManifestController]


def kubectl_controller_factory(
    kubeconfig: str, config: ProviderConfig
) -> ManifestController:
    """Build the kubectl backend for a resolved kubeconfig path."""
    return KubectlController(
        kubeconfig,
        config.kubeconfig_context,
        binary=config.kubectl_binary,
    )


# =============================================================================
# Data Types
# =============================================================================


@dataclass
class ResourceData:
    """Host-owned state of one ``k8s_manifest`` instance.

    Attributes:
        content: Manifest text (sensitive, excluded from repr)
        id: Composite identifier, empty while the resource is absent
    """

    content: str = field(repr=False)
    id: str = ""

    @property
    def exists(self) -> bool:
        return bool(self.id)


class _ObjectMetadata(BaseModel):
    model_config = ConfigDict(extra="ignore")

    selflink: str = Field(
        default="", validation_alias=AliasChoices("selfLink", "selflink")
    )

    @field_validator("selflink", mode="before")
    @classmethod
    def _null_selflink(cls, value: object) -> object:
        return "" if value is None else value


class _ListItem(BaseModel):
    model_config = ConfigDict(extra="ignore")

    metadata: _ObjectMetadata = Field(default_factory=_ObjectMetadata)

    @field_validator("metadata", mode="before")
    @classmethod
    def _null_metadata(cls, value: object) -> object:
        return {} if value is None else value


class _ObjectList(BaseModel):
    """Subset of kubectl's ``-o json`` list document."""

    model_config = ConfigDict(extra="ignore")

    items: list[_ListItem] = Field(default_factory=list)

    @field_validator("items", mode="before")
    @classmethod
    def _null_items(cls, value: object) -> object:
        return [] if value is None else value


def discover_selflinks(response: str) -> list[str]:
    """Extract the self-links of created objects from kubectl JSON output.

    Args:
        response: Output of ``kubectl get -f - -o json``

    Returns:
        Self-links in the order kubectl reported them

    Raises:
        DecodeError: If the output is not a JSON list document
        NoResourcesCreatedError: If the list is empty
        MissingSelflinkError: If any object lacks a self-link
    """
    try:
        data = _ObjectList.model_validate_json(response)
    except ValidationError as e:
        raise DecodeError(f"decoding response: {e}") from e

    if not data.items:
        raise NoResourcesCreatedError()

    selflinks = []
    for item in data.items:
        if not item.metadata.selflink:
            raise MissingSelflinkError(response)
        selflinks.append(item.metadata.selflink)
    return selflinks


# =============================================================================
# Lifecycle Adapter
# =============================================================================


class ManifestResource:
    """Create, read, update, and delete a manifest through a cluster backend.

    Create and update fail fast. Read and delete visit every object of the
    composite resource and raise a MultiError with all failures afterwards.

    Example:
        resource = ManifestResource(ProviderConfig(kubeconfig="~/.kube/config"))
        data = ResourceData(content=manifest_text)
        resource.create(data)
        print(data.id)
    """

    name = RESOURCE_TYPE

    def __init__(
        self,
        config: ProviderConfig,
        controller_factory: ControllerFactory = kubectl_controller_factory,
    ) -> None:
        self.config = config
        self._controller_factory = controller_factory

    @contextmanager
    def _controller(self) -> Iterator[ManifestController]:
        with kubeconfig_path(self.config) as path:
            yield self._controller_factory(path, self.config)

    def create(self, data: ResourceData) -> None:
        """Apply the manifest and record the created objects as identity.

        The identity is only set once every step has succeeded.
        """
        with self._controller() as controller:
            controller.apply(data.content)
            response = controller.get_json(data.content)

        selflinks = discover_selflinks(response)
        data.id = encode_composite_id(selflinks)
        logger.info(f"Created {self.name} with {len(selflinks)} object(s)")

    def read(self, data: ResourceData) -> None:
        """Check that the recorded objects still exist.

        If any object is missing the identity is cleared, marking the whole
        resource as gone so the host recreates it.
        """
        if not data.exists:
            return

        errors: list[Exception] = []
        missing = []
        queried = 0
        with self._controller() as controller:
            for selflink, locator, ok in decode_all(data.id):
                if not ok:
                    errors.append(InvalidIdentifierError(selflink))
                    continue
                try:
                    output = controller.get_raw(locator.resource, locator.namespace)
                except ManifestProviderError as e:
                    errors.append(e)
                    continue
                queried += 1
                if not output.strip():
                    missing.append(locator)

        if missing:
            if len(missing) < queried:
                logger.warning(
                    f"{len(missing)} of {queried} objects of {self.name} are "
                    f"missing ({', '.join(str(m) for m in missing)}); "
                    "treating the whole resource as deleted"
                )
            else:
                logger.info(f"{self.name} no longer exists in the cluster")
            data.id = ""

        if errors:
            raise MultiError(errors)

    def update(self, data: ResourceData) -> None:
        """Re-apply the manifest. The identity is left unchanged."""
        with self._controller() as controller:
            controller.apply(data.content)
        logger.info(f"Updated {self.name}")

    def delete(self, data: ResourceData) -> None:
        """Delete the recorded objects, most recently created first.

        Every deletion is attempted even if an earlier one failed.
        """
        errors: list[Exception] = []
        with self._controller() as controller:
            for selflink, locator, ok in reversed(decode_all(data.id)):
                if not ok:
                    errors.append(InvalidIdentifierError(selflink))
                    continue
                try:
                    controller.delete(locator.resource, locator.namespace)
                except ManifestProviderError as e:
                    errors.append(e)

        if errors:
            raise MultiError(errors)

        data.id = ""
        logger.info(f"Deleted {self.name}")
