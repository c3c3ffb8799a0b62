"""Abstract manifest controller interface.

Defines the narrow contract the lifecycle adapter needs from a cluster
backend. The kubectl subprocess backend implements it in production; tests
substitute an in-memory backend without touching adapter logic.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

# =============================================================================
# Data Types
# =============================================================================


@dataclass
class CommandResult:
    """Result of a command execution."""

    success: bool
    stdout: str = ""
    stderr: str = ""
    returncode: int = 0


# =============================================================================
# Abstract Controller
# =============================================================================


class ManifestController(ABC):
    """Abstract base class for the cluster operations used by the provider.

    Every method blocks until the cluster backend has answered. Failures are
    raised as ExecutionError; implementations never return partial results.
    """

    @abstractmethod
    def apply(self, manifest: str) -> None:
        """Apply a manifest document.

        Args:
            manifest: Raw YAML or JSON manifest text
        """
        ...

    @abstractmethod
    def get_json(self, manifest: str) -> str:
        """Fetch the live objects described by a manifest as JSON.

        Args:
            manifest: Raw YAML or JSON manifest text

        Returns:
            The backend's JSON list document, undecoded
        """
        ...

    @abstractmethod
    def get_raw(self, resource: str, namespace: str = "") -> str:
        """Look up a single object, ignoring not-found.

        Args:
            resource: Object address as ``kind/name``
            namespace: Namespace, empty for cluster-scoped objects

        Returns:
            Human-readable listing, empty when the object does not exist
        """
        ...

    @abstractmethod
    def delete(self, resource: str, namespace: str = "") -> None:
        """Delete a single object.

        Args:
            resource: Object address as ``kind/name``
            namespace: Namespace, empty for cluster-scoped objects
        """
        ...
