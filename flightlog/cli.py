"""
Dump a flight log to stdout.

    python -m flightlog.cli flight.csv
    python -m flightlog.cli flight.csv --summary
    python -m flightlog.cli flight.csv --seek 2500000 --limit 10
    python -m flightlog.cli flight.csv --from-utc "2014-06-10 12:46:00"

Each record is printed as `<time_us> <field dict>`.
"""

import argparse
import logging
import sys
import time
from datetime import datetime, timedelta, timezone

from dateutil import parser as dtp

from flightlog import config
from flightlog.readers import FormatError, LogReader, open_log

logger = logging.getLogger(__name__)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def utc_to_microseconds(text: str) -> int:
    """Parse a human timestamp (naive means UTC) into microseconds since the epoch."""
    ts = dtp.parse(text)
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return (ts - EPOCH) // timedelta(microseconds=1)


def summarize(log: LogReader) -> list[str]:
    utc_ref = log.get_utc_time_reference_microseconds()
    return [
        f"format:      {log.get_format()}",
        f"fields:      {', '.join(log.get_fields())}",
        f"records:     {log.get_size_updates()}",
        f"start_us:    {log.get_start_microseconds()}",
        f"duration_us: {log.get_size_microseconds()}",
        f"utc_ref_us:  {utc_ref if utc_ref is not None else 'not supported'}",
    ]


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Print the records of a flight log")
    ap.add_argument("path", help="Log file to read")
    where = ap.add_mutually_exclusive_group()
    where.add_argument("--seek", type=int, default=0, help="Start at this log time (microseconds)")
    where.add_argument("--from-utc", help="Start at this UTC timestamp (needs a GPS time column)")
    ap.add_argument("--limit", type=int, default=None, help="Print at most N records")
    ap.add_argument("--summary", action="store_true", help="Print log statistics instead of records")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        log = open_log(args.path)
    except (FormatError, OSError) as exc:
        print(f"{args.path}: {exc}", file=sys.stderr)
        return 1

    with log:
        if args.summary:
            for line in summarize(log):
                print(line)
            return 0

        seek_time = args.seek
        if args.from_utc:
            utc_ref = log.get_utc_time_reference_microseconds()
            if utc_ref is None:
                print(f"{args.path}: log has no UTC reference, --from-utc unavailable", file=sys.stderr)
                return 2
            try:
                seek_time = utc_to_microseconds(args.from_utc) - utc_ref
            except (ValueError, OverflowError) as exc:
                print(f"invalid --from-utc value {args.from_utc!r}: {exc}", file=sys.stderr)
                return 2

        t_start = time.perf_counter()
        if not log.seek(seek_time):
            logger.info("No records at or after t=%d", seek_time)
            return 0

        count = 0
        for t, record in log:
            if args.limit is not None and count >= args.limit:
                break
            print(t, record)
            count += 1
        logger.info("Dumped %d records in %.1f ms", count, (time.perf_counter() - t_start) * 1000)
    return 0


if __name__ == "__main__":
    sys.exit(main())
