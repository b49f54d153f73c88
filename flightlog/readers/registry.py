"""
Reader registry for flightlog.

Log formats are plugged in as `LogReader` subclasses without touching the
callers that open logs. To add a new reader:

1. Create a new module in flightlog/readers/, e.g. `ulog.py`.
2. Subclass `LogReader` and implement its abstract methods.
3. Optionally define a classmethod `sniff(sample, filename) -> float` so the
   content sniffer can pick the reader for files with an unexpected extension.
4. Decorate the class with @register("<ext>") where <ext> is the file extension.
5. Import the module in flightlog/readers/__init__.py.

Example:

    from .registry import register

    @register("ulg")
    class ULogReader(LogReader):
        @classmethod
        def sniff(cls, sample: str, filename: str) -> float:
            return 0.9 if sample.startswith("ULog") else 0.0
"""

import logging
from pathlib import Path

from .base import FormatError, LogReader

logger = logging.getLogger(__name__)

# Global reader registry: maps extension name → reader class
REGISTRY: dict[str, type[LogReader]] = {}


def register(name: str):
    """
    Decorator to register a reader class under a given name.

    Args:
        name (str): File extension the reader handles (e.g. "csv").
    """

    def decorator(cls):
        REGISTRY[name.lower()] = cls
        return cls

    return decorator


def get_reader_for(path: Path) -> type[LogReader] | None:
    """Look up a reader class for the given file path by extension."""
    ext = Path(path).suffix.lower().lstrip(".")
    return REGISTRY.get(ext)


def open_log(path: str | Path) -> LogReader:
    """
    Open a log with the reader registered for its extension. Files with an
    unknown extension are sniffed by content.
    """
    from flightlog.sniffer import sniff_file  # local import to avoid cycles

    path = Path(path)
    reader_cls = get_reader_for(path)
    if reader_cls is None:
        reader_cls = sniff_file(path)
    if reader_cls is None:
        raise FormatError(f"No reader accepts {path.name}")

    logger.debug("Opening %s with %s", path.name, reader_cls.__name__)
    return reader_cls(path)
