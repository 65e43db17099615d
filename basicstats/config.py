"""Runtime settings read from the environment."""
from __future__ import annotations

import os

# Initial slot count of a freshly created NumericBuffer
INITIAL_CAPACITY = int(os.environ.get("BASICSTATS_INITIAL_CAPACITY", 20))

# Log level for the HTTP service (stdout)
LOG_LEVEL = os.environ.get("BASICSTATS_LOG_LEVEL", "INFO").upper()

# Log level for the CLI (stderr, keeps the report on stdout clean)
CLI_LOG_LEVEL = os.environ.get("BASICSTATS_CLI_LOG_LEVEL", "WARNING").upper()

# Bind address for basicstats-serve
HOST = os.environ.get("BASICSTATS_HOST", "0.0.0.0")
PORT = int(os.environ.get("BASICSTATS_PORT", 8000))
