"""Invocation of the external blog generator."""

import logging
import subprocess
from abc import ABC, abstractmethod
from collections.abc import Callable
from pathlib import Path

import click

from notepub.core.errors import CommandFailedError, CommandNotFoundError

logger = logging.getLogger(__name__)


class CommandRunner(ABC):
    """Abstract base class for running external commands."""

    @abstractmethod
    def run(self, command: str, args: list[str], cwd: Path) -> int:
        """Run ``command`` with ``args`` in ``cwd``. Returns the exit status."""
        ...


class SubprocessRunner(CommandRunner):
    """Runs commands as child processes sharing this process's streams.

    The call blocks until the child exits. There is no timeout.
    """

    def run(self, command: str, args: list[str], cwd: Path) -> int:
        """Run the command, raising CommandNotFoundError if it cannot start."""
        try:
            completed = subprocess.run([command, *args], cwd=cwd, check=False)
        except OSError as exc:
            raise CommandNotFoundError(
                f"failed to start '{command}': {exc}"
            ) from exc
        return completed.returncode


class SiteBuilder:
    """Generate and deploy steps of the static site generator."""

    def __init__(
        self,
        runner: CommandRunner,
        command: str,
        cwd: Path,
        generate_arg: str = "g",
        deploy_arg: str = "d",
        echo: Callable[..., None] = click.echo,
    ):
        self.runner = runner
        self.command = command
        self.cwd = cwd
        self.generate_arg = generate_arg
        self.deploy_arg = deploy_arg
        self.echo = echo

    def _run(self, arg: str) -> None:
        self.echo(f"👉 Running: {self.command} {arg}")
        logger.debug("Running %s %s in %s", self.command, arg, self.cwd)
        returncode = self.runner.run(self.command, [arg], self.cwd)
        if returncode != 0:
            raise CommandFailedError([self.command, arg], returncode)

    def generate(self) -> None:
        """Build the site."""
        self._run(self.generate_arg)

    def deploy(self) -> None:
        """Deploy the built site."""
        self._run(self.deploy_arg)
