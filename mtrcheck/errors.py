"""Application errors carrying the process exit code."""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes reported by the checker."""

    SUCCESS = 0
    INVALID_NUMBER_OF_ARGUMENTS = 1
    INVALID_LOG_LEVEL = 2
    PATH_DOES_NOT_EXIST = 3
    PATH_IS_NOT_A_DIRECTORY = 4
    STD_EXCEPTION_CAUGHT = 5
    UNKNOWN_EXCEPTION_CAUGHT = 6


class AppError(RuntimeError):
    """An error that ends the program with a specific exit code."""

    def __init__(self, exit_code, message):
        super().__init__(message)
        self.exit_code = ExitCode(exit_code)