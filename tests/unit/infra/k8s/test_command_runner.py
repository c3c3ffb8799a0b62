"""Tests for the CommandRunner helper."""

import subprocess
from unittest.mock import patch

import pytest

from kubemanifest.errors import ExecutionError
from kubemanifest.infra.k8s import CommandRunner


@pytest.fixture
def runner():
    return CommandRunner()


@patch("subprocess.run")
def test_run_passes_stdin_and_captures_output(mock_run, runner):
    """Test that run() feeds input and captures both streams."""
    mock_run.return_value = subprocess.CompletedProcess(
        args=[], returncode=0, stdout="out", stderr=""
    )

    result = runner.run(["kubectl", "apply", "-f", "-"], input_data="kind: List")

    assert mock_run.call_args.args[0] == ["kubectl", "apply", "-f", "-"]
    assert mock_run.call_args.kwargs["input"] == "kind: List"
    assert mock_run.call_args.kwargs["capture_output"] is True
    assert mock_run.call_args.kwargs["text"] is True
    assert "cwd" not in mock_run.call_args.kwargs
    assert result.success is True
    assert result.stdout == "out"


@patch("subprocess.run")
def test_run_reports_failure_without_raising(mock_run, runner):
    mock_run.return_value = subprocess.CompletedProcess(
        args=[], returncode=2, stdout=None, stderr="bad"
    )

    result = runner.run(["kubectl", "get"])

    assert result.success is False
    assert result.returncode == 2
    assert result.stdout == ""
    assert result.stderr == "bad"


@patch("subprocess.run")
def test_run_checked_returns_stdout(mock_run, runner):
    mock_run.return_value = subprocess.CompletedProcess(
        args=[], returncode=0, stdout='{"items": []}', stderr="warning: ignored"
    )

    assert runner.run_checked(["kubectl", "get", "-o", "json"]) == '{"items": []}'


@patch("subprocess.run")
def test_run_checked_includes_stderr_in_error(mock_run, runner):
    mock_run.return_value = subprocess.CompletedProcess(
        args=[],
        returncode=1,
        stdout="",
        stderr="error: the server doesn't have a resource type\n",
    )

    with pytest.raises(ExecutionError) as excinfo:
        runner.run_checked(["kubectl", "delete", "widgets/a"])

    error = excinfo.value
    assert error.command == "kubectl"
    assert error.args_list == ["delete", "widgets/a"]
    assert error.cause == "exit status 1"
    assert str(error) == (
        "kubectl delete widgets/a exit status 1: "
        "error: the server doesn't have a resource type"
    )


@patch("subprocess.run")
def test_run_checked_without_stderr_uses_exit_cause(mock_run, runner):
    mock_run.return_value = subprocess.CompletedProcess(
        args=[], returncode=3, stdout="", stderr=""
    )

    with pytest.raises(ExecutionError) as excinfo:
        runner.run_checked(["kubectl", "get", "pods/a"])

    assert str(excinfo.value) == "kubectl get pods/a: exit status 3"
    assert excinfo.value.details is None


@patch("subprocess.run", side_effect=FileNotFoundError(2, "No such file or directory"))
def test_missing_executable_raises_execution_error(mock_run, runner):
    with pytest.raises(ExecutionError) as excinfo:
        runner.run(["kubectl-missing", "version"])

    assert excinfo.value.command == "kubectl-missing"
    assert "No such file or directory" in excinfo.value.cause
