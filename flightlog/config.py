import os

# -----------------------
# Runtime config (from env, with sane defaults)
# -----------------------
LOG_LEVEL = os.getenv("FLIGHTLOG_LOG_LEVEL", "INFO").upper()
CSV_ENCODING = os.getenv("FLIGHTLOG_CSV_ENCODING", "utf-8")
SNIFF_LINES = int(os.getenv("FLIGHTLOG_SNIFF_LINES", "5"))

# -----------------------
# CSV format constants
# -----------------------
CSV_DELIMITER = ","
TIME_COLUMN_FRAGMENT = "TIME_StartTime"
UTC_COLUMN_FRAGMENT = "GPS_GPSTime"
NUMERIC_TYPE = "d"
