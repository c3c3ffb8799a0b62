"""Kubernetes infrastructure abstraction layer.

This module provides a narrow abstraction over the cluster operations the
provider needs, implemented with kubectl subprocess calls.

Example:
    from kubemanifest.infra.k8s import KubectlController, kubeconfig_path

    with kubeconfig_path(config) as path:
        controller = KubectlController(path, config.kubeconfig_context)
        controller.apply(manifest)
"""

from .controller import CommandResult, ManifestController
from .kubeconfig import kubeconfig_path, resolve_kubeconfig
from .kubectl_controller import KubectlController
from .runner import CommandRunner

__all__ = [
    # Controller classes
    "ManifestController",
    "KubectlController",
    # Execution
    "CommandRunner",
    "CommandResult",
    # Credentials
    "kubeconfig_path",
    "resolve_kubeconfig",
]
