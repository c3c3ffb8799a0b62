"""Composite identifier encoding.

A manifest can produce several cluster objects. Their self-links are packed
into one identifier, in the order kubectl reported them, and unpacked again
to address each object for read and delete.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from urllib.parse import unquote

# Separator between self-links inside a composite identifier.
SELFLINK_DELIMITER = " "

_NAMESPACES_SEGMENT = "namespaces"
_MALFORMED_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


@dataclass(frozen=True)
class ResourceLocator:
    """Address of one cluster object.

    Attributes:
        resource: Object address as ``kind/name`` (e.g. ``deployments/bar``)
        namespace: Namespace, empty for cluster-scoped objects
    """

    resource: str
    namespace: str = ""

    def __str__(self) -> str:
        if self.namespace:
            return f"{self.resource} (namespace {self.namespace})"
        return self.resource


def _path_unescape(value: str) -> tuple[str, bool]:
    if _MALFORMED_ESCAPE.search(value):
        return value, False
    return unquote(value), True


def decode_selflink(selflink: str) -> tuple[ResourceLocator, bool]:
    """Derive a locator from a self-link.

    Args:
        selflink: Path-like self-link, e.g.
                  ``/apis/apps/v1/namespaces/foo/deployments/bar``

    Returns:
        Tuple of (locator, ok). ``ok`` is False when the self-link has fewer
        than two segments or contains a malformed percent escape; callers
        must treat such an identifier as invalid.
    """
    parts = selflink.split("/")
    if len(parts) < 2:
        return ResourceLocator(""), False

    resource = f"{parts[-2]}/{parts[-1]}"

    namespace = ""
    for i, part in enumerate(parts):
        if part == _NAMESPACES_SEGMENT and len(parts) > i + 1:
            namespace = parts[i + 1]
            break

    # Self-links percent-encode characters outside [a-z]
    resource, ok = _path_unescape(resource)
    return ResourceLocator(resource, namespace), ok


def encode_composite_id(selflinks: Sequence[str]) -> str:
    """Pack self-links into a composite identifier.

    Raises:
        ValueError: If no self-links are given
    """
    if not selflinks:
        raise ValueError("cannot encode an empty list of self-links")
    return SELFLINK_DELIMITER.join(selflinks)


def split_composite_id(composite_id: str) -> list[str]:
    """Unpack a composite identifier into its self-links, in creation order."""
    return composite_id.split(SELFLINK_DELIMITER)


def decode_all(composite_id: str) -> list[tuple[str, ResourceLocator, bool]]:
    """Decode every self-link of a composite identifier.

    Returns:
        List of (selflink, locator, ok) in creation order
    """
    return [
        (selflink, *decode_selflink(selflink))
        for selflink in split_composite_id(composite_id)
    ]
