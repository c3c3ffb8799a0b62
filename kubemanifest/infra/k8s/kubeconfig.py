"""Kubeconfig resolution.

Turns the provider's credential settings into a path kubectl can use. Inline
kubeconfig content is written to a private temporary file that lives only for
the duration of one operation.
"""

from __future__ import annotations

import os
import tempfile
from collections.abc import Callable, Iterator
from contextlib import contextmanager

from loguru import logger

from kubemanifest.config import ProviderConfig
from kubemanifest.errors import ConfigConflictError, CredentialMaterializationError

TEMP_FILE_PREFIX = "kubeconfig_"


def _noop() -> None:
    return None


def _remover(path: str) -> Callable[[], None]:
    def release() -> None:
        try:
            os.remove(path)
        except FileNotFoundError:
            pass
        else:
            logger.debug(f"Removed temporary kubeconfig {path}")

    return release


def resolve_kubeconfig(config: ProviderConfig) -> tuple[str, Callable[[], None]]:
    """Resolve the kubeconfig to hand to kubectl.

    Args:
        config: Provider configuration

    Returns:
        Tuple of (path, release). ``path`` is empty when neither a path nor
        inline content is configured. ``release`` must be called exactly once
        after the path is no longer needed.

    Raises:
        ConfigConflictError: If both a path and inline content are set
        CredentialMaterializationError: If inline content cannot be written
    """
    path = config.kubeconfig
    content = config.inline_kubeconfig

    if path and content:
        raise ConfigConflictError()

    if not content:
        return path, _noop

    try:
        fd, tmp_path = tempfile.mkstemp(prefix=TEMP_FILE_PREFIX)
    except OSError as e:
        raise CredentialMaterializationError(
            f"creating a kubeconfig file: {e}"
        ) from e

    release = _remover(tmp_path)
    try:
        tmp_file = os.fdopen(fd, "w")
    except OSError as e:
        os.close(fd)
        release()
        raise CredentialMaterializationError(
            f"writing kubeconfig to file: {e}"
        ) from e

    try:
        tmp_file.write(content)
    except OSError as e:
        tmp_file.close()
        release()
        raise CredentialMaterializationError(
            f"writing kubeconfig to file: {e}"
        ) from e

    try:
        tmp_file.close()
    except OSError as e:
        release()
        raise CredentialMaterializationError(
            f"completion of write to kubeconfig file: {e}"
        ) from e

    logger.debug(f"Materialized inline kubeconfig at {tmp_path}")
    return tmp_path, release


@contextmanager
def kubeconfig_path(config: ProviderConfig) -> Iterator[str]:
    """Resolve the kubeconfig for the duration of a ``with`` block.

    Example:
        with kubeconfig_path(config) as path:
            controller = KubectlController(path, config.kubeconfig_context)
    """
    path, release = resolve_kubeconfig(config)
    try:
        yield path
    finally:
        release()
