"""Severity levels and a minimal stream logger."""

from enum import IntEnum


class Severity(IntEnum):
    """Message severity, ordered from least to most severe."""

    INFO = 0
    WARNING = 1
    ERROR = 2

    @classmethod
    def from_label(cls, label):
        """Return the severity named by ``label``; raise ValueError if unknown."""
        for severity in cls:
            if str(severity) == label:
                return severity
        raise ValueError(f"unknown severity label {label!r}")

    def __str__(self):
        return self.name.lower()


class Logger:
    """Writes messages at or above a minimum severity to a text stream."""

    def __init__(self, stream, min_severity):
        self.stream = stream
        self.min_severity = Severity(min_severity)

    def log(self, severity, *args):
        """Write one line made of ``args`` if ``severity`` passes the filter."""
        severity = Severity(severity)
        if severity < self.min_severity:
            return
        body = "".join(str(arg) for arg in args)
        self.stream.write(f"[{severity}]: {body}\n")