"""
flightlog -- readers for flight-log data.

Every log format is exposed through the same time-indexed `LogReader`
interface: a cursor over records, seekable by time, with start time,
duration and UTC reference known once the log is open.

    from flightlog import open_log

    with open_log("flight.csv") as log:
        log.seek(0)
        for t, record in log:
            ...
"""

from .readers import CsvLogReader, EndOfData, FormatError, LogReader, open_log

__all__ = ["CsvLogReader", "EndOfData", "FormatError", "LogReader", "open_log"]
