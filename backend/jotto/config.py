"""Centralised runtime configuration loaded from environment variables."""

import os

SERVICE_URL: str = os.getenv(
    "JOTTO_SERVICE_URL", "http://courses.csail.mit.edu/6.005/jotto.py"
)

REQUEST_TIMEOUT: float = float(os.getenv("JOTTO_REQUEST_TIMEOUT", "30.0"))
DEFAULT_ROWS: int = int(os.getenv("JOTTO_DEFAULT_ROWS", "10"))
MAX_PUZZLE_ID: int = int(os.getenv("JOTTO_MAX_PUZZLE_ID", "10000"))
INITIAL_PUZZLE: str = os.getenv("JOTTO_INITIAL_PUZZLE", "")
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
