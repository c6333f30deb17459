"""
loader.py - reading Unity documents from disk, stdin or package data.

Public API
----------
read_text(path) : document text from a file (``"-"`` means stdin)
load_sample(name) : text of a sample document bundled with the package
list_samples() : names of the bundled samples
"""

from __future__ import annotations

import sys
from importlib import resources
from pathlib import Path
from typing import List, Union

__all__ = [
    "list_samples",
    "load_sample",
    "read_text",
]

_SAMPLES_PKG = "unity_markup.samples"

# --------------------------------------------------------------------------- #
# Public utilities                                                            #
# --------------------------------------------------------------------------- #

def read_text(path: Union[str, Path]) -> str:
    """Read a document as UTF-8 text, raising crisp errors on failure."""
    if str(path) == "-":
        return sys.stdin.read()

    p = Path(path)
    try:
        return p.read_bytes().decode("utf-8")
    except FileNotFoundError as exc:
        raise FileNotFoundError(f"Document not found: {p}") from exc
    except IsADirectoryError as exc:
        raise FileNotFoundError(f"Document is a directory: {p}") from exc
    except UnicodeDecodeError as exc:
        raise ValueError(f"Cannot decode {p} as UTF-8: {exc}") from exc


def list_samples() -> List[str]:
    pkg = resources.files(_SAMPLES_PKG)
    return sorted(entry.name for entry in pkg.iterdir() if entry.name.endswith(".json"))


def load_sample(name: str) -> str:
    """Return the text of a bundled sample (exact name or basename)."""
    pkg = resources.files(_SAMPLES_PKG)
    candidates = (Path(name).name, f"{Path(name).name}.json")
    for candidate in candidates:
        try:
            return pkg.joinpath(candidate).read_text(encoding="utf-8")
        except FileNotFoundError:
            pass  # try the next candidate

    raise FileNotFoundError(f"Sample '{name}' not found in package data")
