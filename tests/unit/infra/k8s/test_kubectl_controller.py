"""Tests for the kubectl-backed manifest controller."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from kubemanifest.infra.k8s import CommandRunner, KubectlController


@pytest.fixture
def mock_runner() -> MagicMock:
    runner = MagicMock(spec=CommandRunner)
    runner.run_checked.return_value = ""
    return runner


class TestGlobalFlags:
    """Tests for --kubeconfig/--context handling."""

    def test_no_flags_by_default(self, mock_runner) -> None:
        KubectlController(runner=mock_runner).apply("m")

        assert mock_runner.run_checked.call_args.args[0] == [
            "kubectl",
            "apply",
            "-f",
            "-",
        ]

    def test_kubeconfig_and_context_prefix_every_command(self, mock_runner) -> None:
        controller = KubectlController(
            "/tmp/kubeconfig_abc", "staging", runner=mock_runner
        )

        controller.delete("deployments/frontend", "web")

        assert mock_runner.run_checked.call_args.args[0] == [
            "kubectl",
            "--kubeconfig",
            "/tmp/kubeconfig_abc",
            "--context",
            "staging",
            "delete",
            "deployments/frontend",
            "-n",
            "web",
        ]

    def test_custom_binary(self, mock_runner) -> None:
        KubectlController(binary="/opt/bin/kubectl", runner=mock_runner).delete(
            "clusterroles/reader"
        )

        assert mock_runner.run_checked.call_args.args[0] == [
            "/opt/bin/kubectl",
            "delete",
            "clusterroles/reader",
        ]


class TestManifestOperations:
    def test_apply_sends_manifest_on_stdin(self, mock_runner) -> None:
        KubectlController(runner=mock_runner).apply("kind: ConfigMap")

        assert mock_runner.run_checked.call_args.kwargs["input_data"] == "kind: ConfigMap"

    def test_get_json_returns_stdout(self, mock_runner) -> None:
        mock_runner.run_checked.return_value = '{"items": []}'

        output = KubectlController(runner=mock_runner).get_json("kind: ConfigMap")

        assert output == '{"items": []}'
        assert mock_runner.run_checked.call_args.args[0] == [
            "kubectl",
            "get",
            "-f",
            "-",
            "-o",
            "json",
        ]
        assert mock_runner.run_checked.call_args.kwargs["input_data"] == "kind: ConfigMap"


class TestObjectOperations:
    def test_get_raw_namespaced(self, mock_runner) -> None:
        mock_runner.run_checked.return_value = "NAME  READY\nfrontend  1/1\n"

        output = KubectlController(runner=mock_runner).get_raw(
            "deployments/frontend", "web"
        )

        assert output.startswith("NAME")
        assert mock_runner.run_checked.call_args.args[0] == [
            "kubectl",
            "get",
            "--ignore-not-found",
            "deployments/frontend",
            "-n",
            "web",
        ]

    def test_get_raw_cluster_scoped_omits_namespace(self, mock_runner) -> None:
        KubectlController(runner=mock_runner).get_raw("clusterroles/reader")

        assert mock_runner.run_checked.call_args.args[0] == [
            "kubectl",
            "get",
            "--ignore-not-found",
            "clusterroles/reader",
        ]
