"""Error taxonomy for the manifest provider.

Every error raised by the provider derives from ManifestProviderError and
carries a ``message`` plus optional ``details``. Details only hold text the
message does not already contain, so the CLI can render both parts.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence


class ManifestProviderError(Exception):
    """Base class for all provider failures."""

    def __init__(self, message: str, details: str | None = None):
        self.message = message
        self.details = details
        super().__init__(message)


class ConfigConflictError(ManifestProviderError):
    """Both a kubeconfig path and inline kubeconfig content were supplied."""

    def __init__(self) -> None:
        super().__init__(
            "both kubeconfig and kubeconfig_content are defined, "
            "please use only one of the parameters"
        )


class CredentialMaterializationError(ManifestProviderError):
    """Inline kubeconfig content could not be written to a temporary file."""


class ExecutionError(ManifestProviderError):
    """An external command exited with a nonzero status.

    Attributes:
        command: Executable that was invoked
        args_list: Arguments passed to the executable
        cause: Raw exit cause (e.g. ``exit status 1``)
        stderr: Captured standard error, empty if none was written
    """

    def __init__(
        self,
        command: str,
        args: Sequence[str],
        cause: str,
        stderr: str = "",
    ):
        self.command = command
        self.args_list = list(args)
        self.cause = cause
        self.stderr = stderr

        command_line = " ".join([command, *self.args_list])
        if stderr.strip():
            message = f"{command_line} {cause}: {stderr.strip()}"
        else:
            message = f"{command_line}: {cause}"
        super().__init__(message)


class DecodeError(ManifestProviderError):
    """Structured kubectl output did not match the expected shape."""


class NoResourcesCreatedError(ManifestProviderError):
    """Applying a manifest reported no resulting objects."""

    def __init__(self) -> None:
        super().__init__("no resources created")


class MissingSelflinkError(ManifestProviderError):
    """A created object was reported without a self-link."""

    def __init__(self, response: str):
        self.response = response
        super().__init__(f"could not parse self-link from response {response}")


class InvalidIdentifierError(ManifestProviderError):
    """A stored identifier segment could not be decoded into a locator."""

    def __init__(self, selflink: str):
        self.selflink = selflink
        super().__init__(f"invalid resource id: {selflink}")


class UnknownResourceTypeError(ManifestProviderError):
    """The host asked for a resource type this provider does not serve."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"unknown resource type: {name}")


class MultiError(ManifestProviderError):
    """Ordered, non-empty collection of errors from best-effort operations.

    Read and delete attempt every object of a composite resource and report
    all failures together once the attempts have finished.
    """

    def __init__(self, errors: Iterable[Exception]):
        self.errors: tuple[Exception, ...] = tuple(errors)
        if not self.errors:
            raise ValueError("MultiError requires at least one error")
        rendered = "[" + ", ".join(str(err) for err in self.errors) + "]"
        super().__init__(rendered)

    def __iter__(self):
        return iter(self.errors)

    def __len__(self) -> int:
        return len(self.errors)


__all__ = [
    "ManifestProviderError",
    "ConfigConflictError",
    "CredentialMaterializationError",
    "ExecutionError",
    "DecodeError",
    "NoResourcesCreatedError",
    "MissingSelflinkError",
    "InvalidIdentifierError",
    "UnknownResourceTypeError",
    "MultiError",
]
