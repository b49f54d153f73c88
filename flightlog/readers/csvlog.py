# flightlog/readers/csvlog.py
import logging
import math
from pathlib import Path
from typing import Any

import numpy as np

from flightlog import config

from .base import EndOfData, FormatError, LogReader
from .registry import register

logger = logging.getLogger(__name__)


# signed 64-bit bounds that stored time values saturate to
LONG_MAX = 2**63 - 1
LONG_MIN = -(2**63)


def split_line(line: str) -> list[str]:
    """Split one line on the delimiter, dropping trailing empty cells."""
    cells = line.rstrip("\r\n").split(config.CSV_DELIMITER)
    while cells and not cells[-1]:
        cells.pop()
    return cells


def parse_value(cell: str) -> float:
    """
    Parse a numeric cell or return 0.0 on failure.
    Malformed cells never abort a load.
    """
    if "_" in cell:
        return 0.0
    try:
        return float(cell)
    except ValueError:
        return 0.0


def to_microseconds(value: float) -> int:
    """Truncate a stored time value to integer microseconds (nan -> 0, saturating)."""
    if math.isnan(value):
        return 0
    if value >= LONG_MAX:
        return LONG_MAX
    if value <= LONG_MIN:
        return LONG_MIN
    return int(value)


@register("csv")
class CsvLogReader(LogReader):
    """
    Reader for flight logs exported as comma-separated text.

    The first line holds the field names; every following line is one record.
    All fields are numeric. The whole file is loaded into a dense float64
    table when the reader is opened, so statistics (start, duration, UTC
    reference) are known up front and `seek` / `read_update` work on memory.

    Required column: a field whose name contains "TIME_StartTime" (record
    time, microseconds). Optional: a field containing "GPS_GPSTime", used to
    derive the UTC reference.
    """

    FORMAT = "CSV"

    def __init__(self, file_name: str | Path):
        self._path = Path(file_name)
        self._fields: list[str] = []
        self._fields_formats: dict[str, str] = {}
        self._column_time = -1
        self._column_utc = -1
        self._size_updates = -1
        self._size_microseconds = -1
        self._start_microseconds = -1
        self._utc_time_reference: int | None = None
        self._data = np.zeros((0, 0), dtype=np.float64)
        self._index = 0

        self._file = self._path.open("r", encoding=config.CSV_ENCODING, errors="replace")
        try:
            self._read_formats()
            self._update_statistics()
        except Exception as exc:
            logger.error("CsvLogReader failed on %s: %s", self._path, exc, exc_info=True)
            self.close()
            raise

    @classmethod
    def sniff(cls, sample: str, filename: str) -> float:
        """High confidence when the header carries the time column."""
        header = sample.splitlines()[0] if sample else ""
        if config.TIME_COLUMN_FRAGMENT in header:
            return 0.9
        return 0.0

    def _read_formats(self) -> None:
        header_line = self._file.readline()
        if not header_line:
            raise FormatError("Empty CSV file")

        self._fields = split_line(header_line)
        for i, field in enumerate(self._fields):
            self._fields_formats[field] = config.NUMERIC_TYPE
            if config.TIME_COLUMN_FRAGMENT in field:
                self._column_time = i
            if config.UTC_COLUMN_FRAGMENT in field:
                self._column_utc = i

        if self._column_time < 0:
            raise FormatError(f"{config.TIME_COLUMN_FRAGMENT} column not found")

    def _rewind_to_data(self) -> None:
        self._file.seek(0)
        self._file.readline()

    def _update_statistics(self) -> None:
        self._rewind_to_data()
        packets_num = sum(1 for _ in self._file)
        if packets_num == 0:
            raise FormatError("No data records in CSV file")

        width = len(self._fields)
        data = np.zeros((packets_num, width), dtype=np.float64)

        self._rewind_to_data()
        for i, line in enumerate(self._file):
            if i >= packets_num:
                break
            values = split_line(line)
            if len(values) > width:
                logger.debug(
                    "%s line %d: %d values for %d fields, extra values ignored",
                    self._path.name, i + 2, len(values), width,
                )
                values = values[:width]
            data[i, : len(values)] = [parse_value(v) for v in values]
        data.flags.writeable = False

        times = data[:, self._column_time]
        time_start = to_microseconds(times[0])
        time_end = to_microseconds(times[-1])
        if np.any(np.diff(times) < 0):
            logger.warning("%s: time column is not monotonic; seek results are unreliable", self._path.name)

        if self._column_utc >= 0:
            last_utc = data[-1, self._column_utc]
            if last_utc > 0:
                self._utc_time_reference = to_microseconds(last_utc) - time_end

        self._data = data
        self._start_microseconds = time_start
        self._size_updates = packets_num
        self._size_microseconds = time_end - time_start
        self._index = 0
        logger.info("Loaded %d records (%d fields) from %s", packets_num, width, self._path.name)

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()

    def seek(self, seek_time: int) -> bool:
        self._index = 0
        if seek_time == 0:
            return True

        data: dict[str, Any] = {}
        while True:
            data.clear()
            try:
                t = self.read_update(data)
            except EndOfData:
                return False
            if t >= seek_time:
                # leave the matching record as the next one to read
                self._index -= 1
                return True

    def read_update(self, update: dict[str, Any]) -> int:
        if self._index >= self._size_updates:
            raise EndOfData()
        row = self._data[self._index]
        update.update(zip(self._fields, row.tolist()))
        self._index += 1
        return to_microseconds(row[self._column_time])

    @property
    def path(self) -> Path:
        return self._path

    @property
    def fields(self) -> tuple[str, ...]:
        return tuple(self._fields)

    @property
    def time_column(self) -> int:
        return self._column_time

    @property
    def utc_column(self) -> int:
        return self._column_utc

    def get_fields(self) -> dict[str, str]:
        return dict(self._fields_formats)

    def get_format(self) -> str:
        return self.FORMAT

    def get_size_updates(self) -> int:
        return self._size_updates

    def get_start_microseconds(self) -> int:
        return self._start_microseconds

    def get_size_microseconds(self) -> int:
        return self._size_microseconds

    def get_utc_time_reference_microseconds(self) -> int | None:
        return self._utc_time_reference

    def get_version(self) -> dict[str, Any]:
        return {}

    def get_parameters(self) -> dict[str, Any] | None:
        return None
