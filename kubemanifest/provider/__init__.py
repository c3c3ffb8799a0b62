"""The ``k8s_manifest`` resource and its host-facing schema."""

from .manifest import (
    RESOURCE_TYPE,
    ManifestResource,
    ResourceData,
    discover_selflinks,
    kubectl_controller_factory,
)
from .schema import PROVIDER_SCHEMA, RESOURCE_SCHEMAS, ManifestProvider, SchemaField
from .selflink import (
    SELFLINK_DELIMITER,
    ResourceLocator,
    decode_all,
    decode_selflink,
    encode_composite_id,
    split_composite_id,
)

__all__ = [
    # Provider
    "ManifestProvider",
    "SchemaField",
    "PROVIDER_SCHEMA",
    "RESOURCE_SCHEMAS",
    # Resource
    "RESOURCE_TYPE",
    "ManifestResource",
    "ResourceData",
    "discover_selflinks",
    "kubectl_controller_factory",
    # Identifiers
    "SELFLINK_DELIMITER",
    "ResourceLocator",
    "decode_all",
    "decode_selflink",
    "encode_composite_id",
    "split_composite_id",
]
