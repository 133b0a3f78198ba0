import os

# Keep the test run from writing log files; Config reads this at import.
os.environ["LOG_DIR"] = ""
