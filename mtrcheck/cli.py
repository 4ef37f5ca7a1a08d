"""Command line entry point of the test directory checker."""

import sys
from pathlib import Path

from .errors import AppError, ExitCode
from .logger import Logger, Severity
from .processor import execute

_PROG = "mtrcheck"


def _check_directory(path):
    if not path.exists():
        raise AppError(ExitCode.PATH_DOES_NOT_EXIST, f'"{path}" does not exist')
    if not path.is_dir():
        raise AppError(ExitCode.PATH_IS_NOT_A_DIRECTORY, f'"{path}" is not a directory')


def _check(argv, stdout):
    if len(argv) not in (2, 3):
        raise AppError(
            ExitCode.INVALID_NUMBER_OF_ARGUMENTS,
            f"use {_PROG} <log_level:info|warning|error> <test_dir> [<result_dir>]",
        )
    try:
        severity = Severity.from_label(argv[0])
    except ValueError:
        raise AppError(ExitCode.INVALID_LOG_LEVEL, f'invalid log level "{argv[0]}"') from None

    tests_path = Path(argv[1])
    _check_directory(tests_path)

    results_path = None
    if len(argv) == 3:
        results_path = Path(argv[2])
        if results_path == tests_path:
            results_path = None
        else:
            _check_directory(results_path)

    execute(Logger(stdout, severity), tests_path, results_path)


def run(argv, stdout=None):
    """Run the checker on ``argv`` (without program name) and return the exit code."""
    stdout = sys.stdout if stdout is None else stdout
    try:
        _check(list(argv), stdout)
    except AppError as error:
        stdout.write(f"{error}\n")
        return int(error.exit_code)
    except Exception as error:  # noqa: BLE001 - report anything unexpected as an exit code
        sys.stderr.write(f"unexpected error: {error}\n")
        return int(ExitCode.STD_EXCEPTION_CAUGHT)
    return int(ExitCode.SUCCESS)


def main(argv=None):
    return run(sys.argv[1:] if argv is None else argv, sys.stdout)


if __name__ == "__main__":
    raise SystemExit(main())