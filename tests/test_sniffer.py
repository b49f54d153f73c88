from pathlib import Path

from flightlog.readers.csvlog import CsvLogReader
from flightlog.sniffer import sniff_file


def test_sniffer_picks_csv_reader(tmp_path: Path):
    f = tmp_path / "flight.dat"
    f.write_text("TIME_StartTime,GPS_GPSTime\n100,0\n200,0\n")

    assert sniff_file(f) is CsvLogReader


def test_sniffer_returns_none_without_match(tmp_path: Path):
    f = tmp_path / "fallback.log"
    f.write_text("line1\nline2\n")

    assert sniff_file(f) is None


def test_sniffer_returns_none_for_empty_file(tmp_path: Path):
    f = tmp_path / "empty.csv"
    f.write_text("")

    assert sniff_file(f) is None


def test_csv_sniff_scores():
    assert CsvLogReader.sniff("TIME_StartTime,A\n1,2", "x.csv") == 0.9
    assert CsvLogReader.sniff("TIME_StartTime\n1", "x.csv") == 0.9
    assert CsvLogReader.sniff("ATT_Roll,ATT_Pitch\n1,2", "x.csv") == 0.0
    assert CsvLogReader.sniff("", "x.csv") == 0.0


def test_sniffer_accepts_single_column_log(tmp_path: Path):
    f = tmp_path / "flight.dat"
    f.write_text("TIME_StartTime\n100\n")

    assert sniff_file(f) is CsvLogReader
