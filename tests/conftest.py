"""Shared fixtures for kubemanifest tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from loguru import logger

from kubemanifest.config import ProviderConfig
from kubemanifest.provider import ManifestResource
from tests.helpers import FakeController


@pytest.fixture
def fake_controller() -> FakeController:
    return FakeController()


@pytest.fixture
def kubeconfig_paths() -> list[str]:
    """Kubeconfig paths handed to the controller factory, one per operation."""
    return []


@pytest.fixture
def controller_factory(fake_controller, kubeconfig_paths):
    def factory(kubeconfig: str, config: ProviderConfig) -> FakeController:
        kubeconfig_paths.append(kubeconfig)
        return fake_controller

    return factory


@pytest.fixture
def resource(controller_factory) -> ManifestResource:
    return ManifestResource(ProviderConfig(), controller_factory)


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Loguru messages emitted during the test, as ``LEVEL: message``."""
    messages: list[str] = []
    handler_id = logger.add(messages.append, level="INFO", format="{level}: {message}")
    yield messages
    logger.remove(handler_id)
