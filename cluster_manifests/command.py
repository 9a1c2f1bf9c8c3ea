"""Library for issuing commands and returning the result."""

import logging
import shlex
import subprocess
from dataclasses import dataclass
from pathlib import Path
import os

from .exceptions import CommandException

_LOGGER = logging.getLogger(__name__)

_TIMEOUT = 60.0


# No public API
__all__: list[str] = []


@dataclass
class Command:
    """An instance of a command to run."""

    cmd: list[str]
    """Array of command line arguments."""

    cwd: Path | None = None
    """Current working directory."""

    exc: type[CommandException] = CommandException
    """Exception to throw in case of an error."""

    env: dict[str, str] | None = None
    """Environment variables for the subprocess."""

    @property
    def string(self) -> str:
        """Render the command as a single string."""
        return " ".join([shlex.quote(arg) for arg in self.cmd])

    def __str__(self) -> str:
        """Render as a debug string."""
        cwd: str = ""
        if self.cwd:
            cwd = f"({self.cwd}) "
        return f"{cwd}{self.string}"

    def run(self, stdin: bytes | None = None) -> bytes:
        """Run the command, returning stdout."""
        _LOGGER.debug("Running command: %s", self)
        env = {
            **os.environ,
            **(self.env if self.env else {}),
        }
        try:
            proc = subprocess.run(
                self.cmd,
                input=stdin,
                capture_output=True,
                cwd=self.cwd,
                env=env,
                timeout=_TIMEOUT,
            )
        except FileNotFoundError as err:
            raise self.exc(f"Command '{self}' not found: {err}") from err
        except subprocess.TimeoutExpired as err:
            raise self.exc(f"Command '{self}' timed out") from err
        if proc.returncode:
            errors = [f"Command '{self}' failed with return code {proc.returncode}"]
            if proc.stdout:
                errors.append(proc.stdout.decode("utf-8"))
            if proc.stderr:
                errors.append(proc.stderr.decode("utf-8"))
            _LOGGER.debug("\n".join(errors))
            raise self.exc("\n".join(errors))
        return proc.stdout


def run(cmd: Command) -> str:
    """Run the specified command and return stdout."""
    return cmd.run().decode("utf-8")
