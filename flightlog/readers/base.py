# flightlog/readers/base.py
from abc import ABC, abstractmethod
from typing import Any, Iterator


class FormatError(Exception):
    """Raised when a log source cannot be opened as the requested format."""


class EndOfData(EOFError):
    """Raised by `read_update` once every record has been read."""


class LogReader(ABC):
    """
    Time-indexed record interface shared by every log format.

    A reader exposes a cursor over the records of one log. `read_update`
    returns the time (microseconds) of the record under the cursor and moves
    the cursor forward; `seek` repositions it by time.
    """

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def __iter__(self) -> Iterator[tuple[int, dict[str, Any]]]:
        """Yield (time, record) pairs from the current cursor to the end."""
        while True:
            update: dict[str, Any] = {}
            try:
                t = self.read_update(update)
            except EndOfData:
                return
            yield t, update

    @abstractmethod
    def close(self) -> None:
        """Release the underlying source handle."""

    @abstractmethod
    def seek(self, seek_time: int) -> bool:
        """
        Move the cursor so the next read returns the first record with
        time >= seek_time. Return False if the log ends before that.
        """

    @abstractmethod
    def read_update(self, update: dict[str, Any]) -> int:
        """
        Fill `update` with field -> value for the next record and return its time.
        Raise EndOfData when no records are left.
        """

    @abstractmethod
    def get_fields(self) -> dict[str, str]:
        """Field name -> type tag."""

    @abstractmethod
    def get_format(self) -> str: ...

    @abstractmethod
    def get_size_updates(self) -> int: ...

    @abstractmethod
    def get_start_microseconds(self) -> int: ...

    @abstractmethod
    def get_size_microseconds(self) -> int: ...

    @abstractmethod
    def get_utc_time_reference_microseconds(self) -> int | None:
        """Offset from log time to UTC, or None if the log cannot provide one."""

    @abstractmethod
    def get_version(self) -> dict[str, Any]: ...

    @abstractmethod
    def get_parameters(self) -> dict[str, Any] | None: ...
