"""Kubectl-based implementation of ManifestController.

Uses blocking subprocess calls to kubectl for all operations.
"""

from __future__ import annotations

from .controller import ManifestController
from .runner import CommandRunner


class KubectlController(ManifestController):
    """Manifest controller using kubectl subprocess calls.

    Global flags (``--kubeconfig``, ``--context``) are prepended to every
    invocation when set. Manifests are always passed on stdin.
    """

    def __init__(
        self,
        kubeconfig: str = "",
        context: str = "",
        *,
        binary: str = "kubectl",
        runner: CommandRunner | None = None,
    ) -> None:
        """Initialize the kubectl controller.

        Args:
            kubeconfig: Resolved kubeconfig path, empty to use kubectl's default
            context: Context name, empty to use the kubeconfig's current one
            binary: kubectl executable name or path
            runner: Command runner (a fresh one is created if omitted)
        """
        self.kubeconfig = kubeconfig
        self.context = context
        self.binary = binary
        self._runner = runner or CommandRunner()

    def _base_cmd(self) -> list[str]:
        cmd = [self.binary]
        if self.kubeconfig:
            cmd.extend(["--kubeconfig", self.kubeconfig])
        if self.context:
            cmd.extend(["--context", self.context])
        return cmd

    def _run_kubectl(self, args: list[str], *, input_data: str | None = None) -> str:
        """Run a kubectl command and return its stdout.

        Args:
            args: Command arguments (without the kubectl prefix)
            input_data: Optional input to send to stdin

        Raises:
            ExecutionError: If kubectl exits with a nonzero status
        """
        return self._runner.run_checked(
            [*self._base_cmd(), *args], input_data=input_data
        )

    @staticmethod
    def _namespace_args(namespace: str) -> list[str]:
        return ["-n", namespace] if namespace else []

    # =========================================================================
    # Manifest Operations
    # =========================================================================

    def apply(self, manifest: str) -> None:
        """Apply a manifest read from stdin."""
        self._run_kubectl(["apply", "-f", "-"], input_data=manifest)

    def get_json(self, manifest: str) -> str:
        """Get the objects of a manifest read from stdin as JSON."""
        return self._run_kubectl(["get", "-f", "-", "-o", "json"], input_data=manifest)

    # =========================================================================
    # Object Operations
    # =========================================================================

    def get_raw(self, resource: str, namespace: str = "") -> str:
        """Get a single object, printing nothing if it does not exist."""
        return self._run_kubectl(
            ["get", "--ignore-not-found", resource, *self._namespace_args(namespace)]
        )

    def delete(self, resource: str, namespace: str = "") -> None:
        """Delete a single object."""
        self._run_kubectl(["delete", resource, *self._namespace_args(namespace)])
