# unity_markup/report.py
"""
report.py - rendering validation results for people and pipelines.

Public API
----------
summarize(source, result, *, text=None) -> dict
    JSON-safe summary of one validated document.
to_text(source, result) -> str
to_json(summaries) -> str
to_markdown_card(summary, *, heading_level=2) -> str
to_markdown(summaries, *, heading_level=2) -> str
to_frame(summaries) -> pandas.DataFrame
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional, Sequence

from . import utils
from .result import ValidationResult

__all__ = [
    "summarize",
    "to_frame",
    "to_json",
    "to_markdown",
    "to_markdown_card",
    "to_text",
]

# --------------------------------------------------------------------------- #
# Summaries                                                                   #
# --------------------------------------------------------------------------- #

def summarize(source: str, result: ValidationResult, *, text: Optional[str] = None) -> dict[str, Any]:
    """Return a JSON-safe record describing *result* for *source*.

    ``sha256`` hashes the file when *source* names a readable file, otherwise
    the supplied *text*; it is ``None`` when neither is available.
    """
    path = Path(source)
    if source != "-" and path.is_file():
        digest: Optional[str] = utils._sha256(path)
    elif text is not None:
        digest = utils._sha256_text(text)
    else:
        digest = None

    return {
        "source":      source,
        "sha256":      digest,
        "checked_at":  utils._now_iso(),
        "valid":       result.is_valid,
        "error_count": len(result),
        "errors":      [err.to_dict() for err in result.errors],
    }


def to_text(source: str, result: ValidationResult) -> str:
    return f"{source}: {result}".rstrip("\n")


def to_json(summaries: Sequence[Mapping[str, Any]], *, indent: int = 2) -> str:
    return json.dumps(list(summaries), indent=indent, ensure_ascii=False)

# --------------------------------------------------------------------------- #
# Markdown                                                                    #
# --------------------------------------------------------------------------- #

def _cell(text: str) -> str:
    """Escape a value for a Markdown table cell."""
    return text.replace("|", "\\|").replace("\n", " ")

def to_markdown_card(summary: Mapping[str, Any], *, heading_level: int = 2) -> str:
    """
    Render one :func:`summarize` record as a Markdown card.

    The card carries a heading naming the source, a status block, and, when
    the document is invalid, a ``Path | Message`` table in traversal order.

    Parameters
    ----------
    summary : Mapping[str, Any]
        A record produced by :func:`summarize`.
    heading_level : int, default 2
        Markdown heading level for the source heading (##, ###, …).
    """
    count = summary["error_count"]
    status = "valid" if summary["valid"] else f"invalid ({count} error(s))"
    digest = f"`{summary['sha256']}`" if summary.get("sha256") else "n/a"

    lines = [
        f"{'#' * heading_level} `{summary['source']}`",
        "",
        f"- **Status:** {status}",
        f"- **SHA-256:** {digest}",
        f"- **Checked:** {summary['checked_at']}",
    ]
    if summary["errors"]:
        lines += ["", "| Path | Message |", "|---|---|"]
        lines += [
            f"| `{_cell(err['path']) or '(root)'}` | {_cell(err['message'])} |"
            for err in summary["errors"]
        ]
    return "\n".join(lines)


def to_markdown(summaries: Iterable[Mapping[str, Any]], *, heading_level: int = 2) -> str:
    """One card per summary, separated by horizontal rules."""
    return "\n\n---\n\n".join(
        to_markdown_card(summary, heading_level=heading_level) for summary in summaries
    )

# --------------------------------------------------------------------------- #
# Tabular                                                                     #
# --------------------------------------------------------------------------- #

def to_frame(summaries: Iterable[Mapping[str, Any]]):
    """Flatten *summaries* into a :class:`pandas.DataFrame`, one row per error."""
    import pandas as pd

    rows = [
        {"source": summary["source"], "path": err["path"], "message": err["message"]}
        for summary in summaries
        for err in summary["errors"]
    ]
    return pd.DataFrame(rows, columns=["source", "path", "message"])
