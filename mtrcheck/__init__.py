"""Consistency checker for MySQL test-run suite directories."""

__version__ = "0.1.0"
__all__ = ["__version__"]