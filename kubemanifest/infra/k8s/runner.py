"""Command runner for executing external commands.

This module provides the blocking command execution used by the kubectl
controller. Standard error is always captured so failures can be reported
with the tool's own diagnostics.
"""

from __future__ import annotations

import subprocess
from collections.abc import Sequence

from loguru import logger

from kubemanifest.errors import ExecutionError

from .controller import CommandResult


class CommandRunner:
    """Low-level command executor with consistent result handling."""

    def run(
        self,
        cmd: Sequence[str],
        *,
        input_data: str | None = None,
    ) -> CommandResult:
        """Execute a command and return structured result.

        Args:
            cmd: Command and arguments as a sequence
            input_data: Optional text to send to stdin

        Returns:
            CommandResult with success status, output, and return code

        Raises:
            ExecutionError: If the executable cannot be started
        """
        cmd = list(cmd)
        logger.debug(f"Running {' '.join(cmd)}")
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                input=input_data,
            )
        except OSError as e:
            raise ExecutionError(cmd[0], cmd[1:], str(e)) from e

        return CommandResult(
            success=result.returncode == 0,
            stdout=result.stdout or "",
            stderr=result.stderr or "",
            returncode=result.returncode,
        )

    def run_checked(
        self,
        cmd: Sequence[str],
        *,
        input_data: str | None = None,
    ) -> str:
        """Execute a command and return stdout, raising on failure.

        Args:
            cmd: Command and arguments
            input_data: Optional text to send to stdin

        Returns:
            Standard output from the command

        Raises:
            ExecutionError: If command exits with non-zero code
        """
        cmd = list(cmd)
        result = self.run(cmd, input_data=input_data)
        if not result.success:
            logger.debug(f"{cmd[0]} exited with status {result.returncode}")
            raise ExecutionError(
                cmd[0],
                cmd[1:],
                f"exit status {result.returncode}",
                result.stderr,
            )
        return result.stdout
