"""NuGet package manager adapter."""

import subprocess
from typing import List

from .base import PackageManagerAdapter
from ...models.return_code import ReturnCode
from ...utils.console import _rich_error, _rich_info
from ...utils.helpers import is_tool_available


class NugetPackageManager(PackageManagerAdapter):
    """Restores and updates NuGet package references with the nuget CLI."""

    solution_pattern = "*.sln"
    package_pattern = "*.nupkg"
    tracked_files = ("*.csproj", "*/packages.config")

    def __init__(self, working_directory=None, executable="nuget"):
        super().__init__(working_directory)
        self.executable = executable

    def restore(self, solution):
        """Restore the packages of a solution.

        Args:
            solution (str): Path to the solution file.

        Returns:
            ReturnCode: SUCCESS, or FAILED_TO_RUN_NUGET_COMMAND.
        """
        return self._run(["restore", solution])

    def update(self, solution, package_id, version, source_directory):
        """Update a package reference of a solution.

        Args:
            solution (str): Path to the solution file.
            package_id (str): Id of the package to update.
            version (str): Version to pin.
            source_directory (str): Package source holding the new version.

        Returns:
            ReturnCode: SUCCESS, or FAILED_TO_RUN_NUGET_COMMAND.
        """
        return self._run([
            "update", solution,
            "-Id", package_id,
            "-Version", version,
            "-Source", source_directory,
            "-Pre",
        ])

    def _run(self, args: List[str]) -> ReturnCode:
        if not is_tool_available(self.executable):
            _rich_error(f"'{self.executable}' was not found on PATH", symbol="error")
            return ReturnCode.FAILED_TO_RUN_NUGET_COMMAND

        command = [self.executable, *args]
        _rich_info(" ".join(command), symbol="gear")
        try:
            result = subprocess.run(command, cwd=self.working_directory, check=False)
        except OSError as e:
            _rich_error(f"Failed to run {self.executable}: {e}", symbol="error")
            return ReturnCode.FAILED_TO_RUN_NUGET_COMMAND

        if result.returncode != 0:
            _rich_error(f"{self.executable} {args[0]} exited with code {result.returncode}", symbol="error")
            return ReturnCode.FAILED_TO_RUN_NUGET_COMMAND
        return ReturnCode.SUCCESS
