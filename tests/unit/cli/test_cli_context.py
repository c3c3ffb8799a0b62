"""Tests for CLI context dependency injection."""

from unittest.mock import Mock, patch

import click
import pytest
import typer

from kubemanifest.cli.context import (
    CLIContext,
    build_cli_context,
    build_provider_config,
    get_cli_context,
)
from kubemanifest.config import ProviderConfig


def test_cli_context_is_immutable():
    """Test that CLIContext is frozen/immutable."""
    ctx = CLIContext(console=Mock(), config=ProviderConfig(), provider=Mock())

    with pytest.raises(AttributeError):
        ctx.console = Mock()  # type: ignore[misc]


def test_build_cli_context_binds_provider_to_config():
    config = ProviderConfig(kubeconfig_context="staging")

    ctx = build_cli_context(config)

    assert ctx.config is config
    assert ctx.provider.config is config
    assert ctx.console is not None


def test_build_cli_context_defaults():
    ctx = build_cli_context()

    assert ctx.config == ProviderConfig()


def test_get_cli_context_from_typer_context():
    """Test that get_cli_context retrieves from Typer context."""
    mock_ctx_obj = CLIContext(console=Mock(), config=ProviderConfig(), provider=Mock())

    typer_ctx = Mock(spec=typer.Context)
    typer_ctx.obj = mock_ctx_obj

    assert get_cli_context(typer_ctx) is mock_ctx_obj


def test_get_cli_context_with_none_falls_back():
    """Test that get_cli_context creates new context when ctx is None."""
    with patch("kubemanifest.cli.context.build_cli_context") as mock_build:
        mock_build.return_value = Mock(spec=CLIContext)

        get_cli_context(None)

        mock_build.assert_called_once()


def test_get_cli_context_uses_current_click_context():
    mock_ctx_obj = CLIContext(console=Mock(), config=ProviderConfig(), provider=Mock())
    command = click.Command("dummy")

    with click.Context(command, obj=mock_ctx_obj):
        assert get_cli_context() is mock_ctx_obj


class TestBuildProviderConfig:
    def test_overrides_apply_on_top_of_file(self, tmp_path):
        path = tmp_path / "kubemanifest.yaml"
        path.write_text(
            "config:\n  kubeconfig_context: from-file\n  kubectl_binary: /opt/kubectl\n"
        )

        config = build_provider_config(path, kubeconfig_context="from-flag")

        assert config.kubeconfig_context == "from-flag"
        assert config.kubectl_binary == "/opt/kubectl"

    def test_none_overrides_are_ignored(self):
        config = build_provider_config(None, kubeconfig=None, kubeconfig_context=None)

        assert config == ProviderConfig()

    def test_inline_content_survives_merge(self, tmp_path):
        path = tmp_path / "kubemanifest.yaml"
        path.write_text("config:\n  kubeconfig_content: 'apiVersion: v1'\n")

        config = build_provider_config(path, kubeconfig_context="dev")

        assert config.inline_kubeconfig == "apiVersion: v1"

    def test_invalid_override_raises_value_error(self):
        with pytest.raises(ValueError):
            build_provider_config(None, kubectl_binary="")
