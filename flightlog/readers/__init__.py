"""
flightlog reader package.

Readers register themselves via the @register decorator in registry.py.
See registry.py for details on how to add a new reader.
"""

# Import reader modules for their side effects (they register themselves).
from . import csvlog as _csvlog  # noqa: F401

# Explicit re-exports for library users.
from .base import EndOfData as EndOfData
from .base import FormatError as FormatError
from .base import LogReader as LogReader
from .csvlog import CsvLogReader as CsvLogReader
from .registry import REGISTRY as REGISTRY
from .registry import get_reader_for as get_reader_for
from .registry import open_log as open_log
from .registry import register as register

__all__ = [
    "REGISTRY",
    "CsvLogReader",
    "EndOfData",
    "FormatError",
    "LogReader",
    "get_reader_for",
    "open_log",
    "register",
]
