import logging
from pathlib import Path

from flightlog import config
from flightlog.readers.base import LogReader
from flightlog.readers.registry import REGISTRY

logger = logging.getLogger(__name__)


def sniff_file(path: Path, sample_size: int = config.SNIFF_LINES) -> type[LogReader] | None:
    """
    Pick the best reader class for the given file.
    - Reads the first `sample_size` lines as a sample.
    - Returns a reader class, or None if no registered reader claims the file.
    """
    sample_lines = []
    with path.open("r", encoding=config.CSV_ENCODING, errors="ignore") as f:
        for _ in range(sample_size):
            line = f.readline()
            if not line:
                break
            sample_lines.append(line.rstrip("\r\n"))

    sample_text = "\n".join(sample_lines)
    if not sample_text:
        logger.warning("Could not read a sample from %s", path.name)
        return None

    best_reader_cls: type[LogReader] | None = None
    best_conf = 0.0

    # Let each registered reader sniff
    for name, reader_cls in REGISTRY.items():
        sniff = getattr(reader_cls, "sniff", None)
        if sniff is None:
            continue
        conf = sniff(sample_text, str(path))
        logger.debug("Reader %s scored %.2f on %s", name, conf, path.name)
        if conf > best_conf:
            best_conf = conf
            best_reader_cls = reader_cls

    if best_reader_cls:
        logger.debug(
            "Sniffer selected %s for %s (conf=%.2f)",
            best_reader_cls.__name__,
            path.name,
            best_conf,
        )
    else:
        logger.debug("No reader matched %s", path.name)
    return best_reader_cls
