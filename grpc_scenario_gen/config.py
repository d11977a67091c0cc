"""
Runtime configuration, read from the environment (and a local .env file).

    HARNESS_OUTPUT_DIR  where generated files are written (default: ./generated)
    LOG_LEVEL           logging level name (default: INFO)
    CORS_ORIGINS        comma-separated allowed origins for the API (default: *)
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

OUTPUT_DIR = Path(os.getenv("HARNESS_OUTPUT_DIR", "generated"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Comma-separated; "*" allows any origin
_cors_raw = os.getenv("CORS_ORIGINS", "*")
CORS_ORIGINS = [o.strip() for o in _cors_raw.split(",")]
