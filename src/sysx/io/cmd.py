"""
Shell-command execution and console input.

Command lines are split with POSIX shell rules and executed directly,
without an intermediate shell.
"""

import shlex
import subprocess
from dataclasses import dataclass
from typing import Optional

import click

from ..core.config import get_config
from ..core.exceptions import CommandError, CommandTimeoutError, InvalidSyntaxError
from ..core.logging import get_logger

logger = get_logger(__name__)


@dataclass
class CommandResult:
    """Outcome of a finished command."""

    command: str
    returncode: int
    stdout: str
    stderr: str

    @property
    def success(self) -> bool:
        return self.returncode == 0

    @property
    def output(self) -> str:
        """stdout when the command succeeded, stderr otherwise."""
        return self.stdout if self.success else self.stderr


def _decode_stream(data: bytes, stream: str, command_line: str) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidSyntaxError(
            f"Command {stream} is not valid UTF-8: {e.reason}",
            {"command": command_line, "position": e.start},
        ) from e


def silent_run(command_line: str, timeout: Optional[float] = None) -> CommandResult:
    """
    Execute a command without printing anything.

    Args:
        command_line: Program and arguments, shell-quoted
        timeout: Seconds to wait (defaults to the configured command timeout)

    Returns:
        CommandResult with decoded stdout/stderr and the exit code

    Raises:
        CommandError: If the command line is empty, unparsable or cannot be started
        CommandTimeoutError: If the command exceeds its timeout
        InvalidSyntaxError: If the output is not valid UTF-8
    """
    trimmed = command_line.strip()
    if not trimmed:
        raise CommandError("Empty command line")

    try:
        argv = shlex.split(trimmed)
    except ValueError as e:
        raise CommandError(
            f"Failed to parse command line: {e}", {"command": command_line}
        ) from e

    if timeout is None:
        timeout = get_config().command.default_timeout

    logger.debug("Running command: %s", argv)

    try:
        completed = subprocess.run(
            argv,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired as e:
        raise CommandTimeoutError(
            f"Command timed out after {timeout}s", {"command": command_line}
        ) from e
    except OSError as e:
        raise CommandError(
            f"Failed to execute command '{command_line}': {e}",
            {"command": command_line},
        ) from e

    result = CommandResult(
        command=command_line,
        returncode=completed.returncode,
        stdout=_decode_stream(completed.stdout, "stdout", command_line),
        stderr=_decode_stream(completed.stderr, "stderr", command_line),
    )

    if not result.success:
        logger.debug(
            "Command exited with status %d: %s", result.returncode, command_line
        )
    return result


def run(command_line: str, timeout: Optional[float] = None) -> CommandResult:
    """
    Execute a command and echo its output.

    Output is echoed unless ``command.echo_output`` is disabled in the config.
    See ``silent_run`` for arguments and errors.
    """
    result = silent_run(command_line, timeout=timeout)
    if get_config().command.echo_output:
        click.echo(result.output, nl=False, err=not result.success)
    return result


def read_input(prompt: str = "") -> str:
    """
    Read one line from standard input, without the trailing newline.

    Raises:
        CommandError: If standard input is closed
    """
    try:
        return input(prompt)
    except EOFError as e:
        raise CommandError("Failed to read line: end of input") from e
