"""
ClientCore - Centralised configuration.

All tunables live here.  Every other module imports from config
instead of reading os.environ directly.
"""

from __future__ import annotations
import os
from pathlib import Path


# ── Paths ──────────────────────────────────────────────────────────────
BASE_DIR = Path(__file__).resolve().parent

# ── Database ───────────────────────────────────────────────────────────
DB_URL = os.environ.get("CLIENTCORE_DB", f"sqlite:///{BASE_DIR / 'clientcore.sqlite'}")

# ── Server ─────────────────────────────────────────────────────────────
HOST   = os.environ.get("CLIENTCORE_HOST", "0.0.0.0")
PORT   = int(os.environ.get("CLIENTCORE_PORT", "5000"))
DEBUG  = os.environ.get("CLIENTCORE_DEBUG", "0") == "1"
SECRET = os.environ.get("CLIENTCORE_SECRET", "clientcore-dev-key-change-in-prod")

# ── Logging ────────────────────────────────────────────────────────────
LOG_LEVEL = os.environ.get("CLIENTCORE_LOG_LEVEL", "INFO").upper()

# ── Client codes ───────────────────────────────────────────────────────
# Generate-and-insert attempts before a code collision is reported
CODE_CREATE_RETRIES = int(os.environ.get("CLIENTCORE_CODE_RETRIES", "3"))

# ── Field limits ───────────────────────────────────────────────────────
NAME_MAX_LENGTH  = 200
EMAIL_MAX_LENGTH = 500
