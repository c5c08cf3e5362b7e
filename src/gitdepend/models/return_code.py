"""Return codes shared by every GitDepend operation."""

from enum import IntEnum


# Highest exit status a process can report
MAX_EXIT_CODE = 255


class ReturnCode(IntEnum):
    """Outcome of an operation.

    The integer value is the process exit code, except for values above 255
    which a POSIX shell would truncate; those exit with 255 (see ``exit_code``).
    """
    SUCCESS = 0
    GIT_REPOSITORY_NOT_FOUND = 1
    FAILED_TO_RUN_GIT_COMMAND = 2
    FAILED_TO_RUN_NUGET_COMMAND = 3
    FAILED_TO_RUN_BUILD_SCRIPT = 4
    DIRECTORY_DOES_NOT_EXIST = 5
    COULD_NOT_CREATE_CACHE_DIRECTORY = 6
    FAILED_TO_LOCATE_ARTIFACTS_DIR = 7
    INVALID_CONFIGURATION = 8
    UNKNOWN_ERROR = 9999

    @property
    def exit_code(self) -> int:
        """Get the process exit status for this code."""
        return min(int(self), MAX_EXIT_CODE)

    def describe(self) -> str:
        """Get a human readable description of this code."""
        return _DESCRIPTIONS.get(self, self.name.replace('_', ' ').lower())


_DESCRIPTIONS = {
    ReturnCode.SUCCESS: "success",
    ReturnCode.GIT_REPOSITORY_NOT_FOUND: "the target directory is not a git repository",
    ReturnCode.FAILED_TO_RUN_GIT_COMMAND: "a git command failed",
    ReturnCode.FAILED_TO_RUN_NUGET_COMMAND: "a nuget command failed",
    ReturnCode.FAILED_TO_RUN_BUILD_SCRIPT: "a dependency build script failed",
    ReturnCode.DIRECTORY_DOES_NOT_EXIST: "the directory does not exist",
    ReturnCode.COULD_NOT_CREATE_CACHE_DIRECTORY: "the package cache directory could not be created",
    ReturnCode.FAILED_TO_LOCATE_ARTIFACTS_DIR: "the artifacts directory could not be found",
    ReturnCode.INVALID_CONFIGURATION: "the GitDepend configuration is invalid",
    ReturnCode.UNKNOWN_ERROR: "an unknown error occurred",
}
