import os
import tempfile

# Keep test runs from writing log files into the user's home directory.
os.environ.setdefault("HORSE_RACE_LOG_DIR", tempfile.mkdtemp(prefix="horse_race_logs_"))
