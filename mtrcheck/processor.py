"""Scanning of test and result directories and consistency analysis."""

from enum import Enum
from pathlib import Path

from .components import Component, ComponentSet
from .logger import Severity

_EXTENSIONS = {
    ".result": Component.RESULT,
    ".test": Component.TEST,
    ".cnf": Component.CNF,
    ".combinations": Component.COMBINATIONS,
}

_OPT_SUFFIXES = (
    ("-master", Component.OPT_MASTER),
    ("-slave", Component.OPT_SLAVE),
    ("-client", Component.OPT_CLIENT),
)

_SH_SUFFIXES = (
    ("-master", Component.SH_MASTER),
    ("-slave", Component.SH_SLAVE),
)

_SUITE_STEM = "suite"


class DirectoryMode(Enum):
    """What kind of files a scanned directory is expected to hold."""

    TESTS = "tests"
    RESULTS = "results"
    COMBINED = "combined"


def _split_name(filename):
    dot = filename.rfind(".")
    if dot <= 0 or filename in (".", ".."):
        return filename, ""
    return filename[:dot], filename[dot:]


def _match_suffix(stem, suffixes):
    for suffix, component in suffixes:
        if stem.endswith(suffix):
            return stem[: -len(suffix)], component
    return stem, None


def classify(filename):
    """Return ``(test_name, component)`` for a file name; component is None if unknown."""
    stem, extension = _split_name(filename)
    if extension in _EXTENSIONS:
        return stem, _EXTENSIONS[extension]
    if extension == ".opt":
        name, component = _match_suffix(stem, _OPT_SUFFIXES)
        return name, component or Component.OPT
    if extension == ".sh":
        return _match_suffix(stem, _SH_SUFFIXES)
    return stem, None


class Processor:
    """Collects test case components from directories and reports on them."""

    def __init__(self, sink):
        self.sink = sink
        self.test_cases = {}

    def process_directory(self, root, mode):
        mode = DirectoryMode(mode)
        for path in sorted(Path(root).iterdir()):
            name = path.name
            if not path.is_file():
                self.sink.log(Severity.ERROR, 'found "', name, '" that is not a regular file')
                continue
            if path.stat().st_size == 0:
                self.sink.log(Severity.WARNING, 'found "', name, '" of size 0')

            stem, component = classify(name)
            if component is None:
                severity = Severity.ERROR if mode is DirectoryMode.RESULTS else Severity.WARNING
                self.sink.log(severity, 'found unknown file "', name, '"')
                continue

            update = True
            if component is Component.OPT and stem == _SUITE_STEM:
                self.sink.log(Severity.INFO, 'found  "', _SUITE_STEM, '.opt"')
                update = False
            if mode is DirectoryMode.TESTS and component is Component.RESULT:
                self.sink.log(
                    Severity.ERROR, 'unexpected file found in the tests directory "', name, '"'
                )
                update = False
            if mode is DirectoryMode.RESULTS and component is not Component.RESULT:
                self.sink.log(
                    Severity.ERROR, 'unexpected file found in the results directory "', name, '"'
                )
                update = False
            if update:
                self.test_cases.setdefault(stem, ComponentSet()).add(component)

    def analyze(self):
        """Log each collected test case as verified or inconsistent."""
        for name in sorted(self.test_cases):
            components = self.test_cases[name]
            if components.is_consistent():
                self.sink.log(Severity.INFO, 'verified test case "', name, '": ', components)
            else:
                self.sink.log(Severity.ERROR, 'inconsistent test case "', name, '": ', components)


def execute(sink, tests_path, results_path=None):
    """Scan the directories and log the analysis of every test case."""
    proc = Processor(sink)
    if not results_path:
        proc.process_directory(tests_path, DirectoryMode.COMBINED)
    else:
        proc.process_directory(tests_path, DirectoryMode.TESTS)
        proc.process_directory(results_path, DirectoryMode.RESULTS)
    proc.analyze()
    return proc