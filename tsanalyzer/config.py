# tsanalyzer/config.py
# Service settings, read once from environment variables (with sensible defaults)
import os

SERVICE_TITLE = os.environ.get("TSA_SERVICE_TITLE", "Time-Series Analyzer Service")
SERVICE_VERSION = "1.0.0"
LOG_LEVEL = os.environ.get("TSA_LOG_LEVEL", "INFO").upper()  # Root log level name
MAX_POINTS = int(os.environ.get("TSA_MAX_POINTS", 100000))  # Max values accepted per request
