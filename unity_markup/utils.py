"""
utils.py - shared, low-level utilities for the unity-markup package.

This module consolidates the helpers reports rely on:
- Timestamps (ISO-8601 format)
- Hashing (files and in-memory text)
"""

from __future__ import annotations

import datetime as _dt
import hashlib
from pathlib import Path

# --------------------------------------------------------------------------- #
# Timestamp & Hashing Utilities                                               #
# --------------------------------------------------------------------------- #

def _now_iso() -> str:
    """Current UTC timestamp in ISO-8601 (second precision)."""
    return _dt.datetime.now(_dt.timezone.utc).isoformat(timespec="seconds")


def _sha256(path: Path) -> str:
    """Return SHA-256 hash for the file at the given path."""
    h = hashlib.sha256()
    with path.open("rb") as fd:
        for chunk in iter(lambda: fd.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _sha256_text(text: str) -> str:
    """Return SHA-256 hash of *text* encoded as UTF-8."""
    return hashlib.sha256(text.encode("utf-8", "surrogatepass")).hexdigest()
