"""Test doubles and sample data shared across test modules."""

from __future__ import annotations

import json
from dataclasses import dataclass, field

from kubemanifest.errors import ExecutionError
from kubemanifest.infra.k8s import ManifestController

DEPLOYMENT_SELFLINK = "/apis/apps/v1/namespaces/web/deployments/frontend"
SERVICE_SELFLINK = "/api/v1/namespaces/web/services/frontend"
CLUSTER_ROLE_SELFLINK = "/apis/rbac.authorization.k8s.io/v1/clusterroles/reader"

MANIFEST = """\
apiVersion: apps/v1
kind: Deployment
metadata:
  name: frontend
  namespace: web
"""


def list_response(*selflinks: str) -> str:
    """Build a kubectl ``get -o json`` list document."""
    return json.dumps(
        {
            "apiVersion": "v1",
            "kind": "List",
            "items": [{"metadata": {"selfLink": link}} for link in selflinks],
        }
    )


def kubectl_failure(*args: str, stderr: str = "boom") -> ExecutionError:
    return ExecutionError("kubectl", list(args), "exit status 1", stderr)


@dataclass
class FakeController(ManifestController):
    """In-memory cluster backend recording every call."""

    json_response: str = field(
        default_factory=lambda: list_response(DEPLOYMENT_SELFLINK)
    )
    existing: dict[tuple[str, str], str] = field(default_factory=dict)
    apply_error: Exception | None = None
    get_json_error: Exception | None = None
    get_errors: dict[str, Exception] = field(default_factory=dict)
    delete_errors: dict[str, Exception] = field(default_factory=dict)
    calls: list[tuple[str, ...]] = field(default_factory=list)

    def apply(self, manifest: str) -> None:
        self.calls.append(("apply", manifest))
        if self.apply_error:
            raise self.apply_error

    def get_json(self, manifest: str) -> str:
        self.calls.append(("get_json", manifest))
        if self.get_json_error:
            raise self.get_json_error
        return self.json_response

    def get_raw(self, resource: str, namespace: str = "") -> str:
        self.calls.append(("get_raw", resource, namespace))
        if resource in self.get_errors:
            raise self.get_errors[resource]
        return self.existing.get((resource, namespace), "")

    def delete(self, resource: str, namespace: str = "") -> None:
        self.calls.append(("delete", resource, namespace))
        if resource in self.delete_errors:
            raise self.delete_errors[resource]
        self.existing.pop((resource, namespace), None)
