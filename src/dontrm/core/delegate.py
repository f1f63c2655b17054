"""Hand allowed invocations over to the real rm."""

from __future__ import annotations

import logging
import shlex
import subprocess
from collections.abc import Sequence

logger = logging.getLogger(__name__)

DEFAULT_RM_PATH = "/usr/bin/rm"


class DelegateError(Exception):
    """The real rm could not be started."""

    pass


class RmDelegate:
    """Runs the system rm with an unmodified argument list."""

    def __init__(self, rm_path: str = DEFAULT_RM_PATH):
        self.rm_path = rm_path

    def command(self, args: Sequence[str]) -> list[str]:
        """Build the full command line."""
        return [self.rm_path, *args]

    def describe(self, args: Sequence[str]) -> str:
        """Return the command line as a shell-quoted string."""
        return shlex.join(self.command(args))

    def run(self, args: Sequence[str]) -> int:
        """
        Run rm, sharing this process's stdin, stdout and stderr.

        Args:
            args: Arguments exactly as the user passed them

        Returns:
            Exit status of rm

        Raises:
            DelegateError: If rm is missing or not executable
        """
        command = self.command(args)
        logger.debug("Running %s", self.describe(args))
        try:
            completed = subprocess.run(command, check=False)
        except (FileNotFoundError, PermissionError) as e:
            raise DelegateError(f"Cannot run {self.rm_path}: {e}") from e
        return completed.returncode
