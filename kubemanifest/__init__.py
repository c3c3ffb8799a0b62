"""Manage Kubernetes manifests as infrastructure-as-code resources via kubectl."""

__version__ = "0.1.0"
