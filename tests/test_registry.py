from pathlib import Path

import pytest

from flightlog.readers import FormatError, open_log
from flightlog.readers.csvlog import CsvLogReader
from flightlog.readers.registry import REGISTRY, get_reader_for


def test_csv_reader_is_registered():
    assert REGISTRY["csv"] is CsvLogReader
    assert get_reader_for(Path("flight.csv")) is CsvLogReader
    assert get_reader_for(Path("FLIGHT.CSV")) is CsvLogReader
    assert get_reader_for(Path("flight.bin")) is None


def test_open_log_by_extension(tmp_path: Path):
    f = tmp_path / "flight.csv"
    f.write_text("TIME_StartTime,A\n100,1\n")

    with open_log(f) as log:
        assert isinstance(log, CsvLogReader)
        assert log.get_size_updates() == 1


def test_open_log_sniffs_unknown_extension(tmp_path: Path):
    f = tmp_path / "export.txt"
    f.write_text("TIME_StartTime,A\n100,1\n")

    with open_log(f) as log:
        assert isinstance(log, CsvLogReader)


def test_open_log_rejects_unrecognized_file(tmp_path: Path):
    f = tmp_path / "notes.txt"
    f.write_text("some text\n")

    with pytest.raises(FormatError):
        open_log(f)


def test_open_log_single_column_unknown_extension(tmp_path: Path):
    f = tmp_path / "export.txt"
    f.write_text("TIME_StartTime\n100\n200\n")

    with open_log(f) as log:
        assert log.get_size_microseconds() == 100
