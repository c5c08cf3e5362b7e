"""External process execution."""

import shlex
import subprocess
from typing import Optional, Sequence, Union


class ProcessRunner:
    """Starts external commands such as dependency build scripts."""

    def start(self, command: str, arguments: Union[str, Sequence[str], None] = None,
              working_directory: Optional[str] = None) -> subprocess.Popen:
        """Start a command without waiting for it.

        Args:
            command: Executable or script to run
            arguments: Argument string (split like a shell would) or sequence
            working_directory: Directory the command runs in

        Returns:
            subprocess.Popen: Handle of the running process; ``wait()`` blocks
            until it exits and returns the exit code

        Raises:
            OSError: If the command cannot be started
        """
        if isinstance(arguments, str):
            arguments = shlex.split(arguments)

        return subprocess.Popen([command, *(arguments or [])], cwd=working_directory)

    def run(self, command: str, arguments: Union[str, Sequence[str], None] = None,
            working_directory: Optional[str] = None) -> int:
        """Run a command to completion and get its exit code."""
        with self.start(command, arguments, working_directory) as proc:
            return proc.wait()
