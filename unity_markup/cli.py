"""
cli.py - ``unity-validate`` command-line front-end
==================================================

    unity-validate menu.json                 # human-readable report
    unity-validate --format json a.json b.json
    unity-validate --quiet - < doc.json      # exit status only
    unity-validate --config opts.json docs/*.json
    unity-validate @args.txt                 # flags read from a file

Public API
----------
`build_arg_parser() -> argparse.ArgumentParser`
    The parser behind the command.

`resolve_options(argv) -> tuple[list[str], dict]`
    Merge built-in defaults, an optional ``--config`` JSON file and explicit
    flags (explicit flags win).

`main(argv=None) -> int`
    Validate every file and return the exit status: ``0`` all valid, ``1``
    at least one invalid document, ``2`` unreadable input or bad config.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Sequence

from . import __version__, loader, report
from .validator import validate

log = logging.getLogger(__name__)

FORMATS = ("text", "json", "markdown")
LEVELS  = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_DEFAULTS: dict[str, Any] = {
    "format":    "text",
    "quiet":     False,
    "verbosity": "WARNING",
}

# --------------------------------------------------------------------------- #
# Parser builder                                                              #
# --------------------------------------------------------------------------- #

def build_arg_parser() -> argparse.ArgumentParser:
    """Return the :pyclass:`argparse.ArgumentParser` for ``unity-validate``.

    Option defaults are suppressed so that :func:`resolve_options` can tell
    explicit flags apart from values coming from ``--config``.
    """
    p = argparse.ArgumentParser(
        prog="unity-validate",
        description="Validate Unity markup (XML-like documents encoded as JSON arrays).",
        fromfile_prefix_chars="@",
        add_help=False,
    )

    # standard meta flags ----------------------------------------------------
    p.add_argument("-h", "--help", action="help", help="Show this help message and exit.")
    p.add_argument(
        "--version",
        action="version",
        version=f"unity-markup : {__version__}",
        help="Print package version and exit.",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="JSON file with default option values; explicit flags take precedence.",
    )

    p.add_argument("files", nargs="+", metavar="FILE", help="Documents to validate ('-' reads stdin).")
    p.add_argument(
        "--format",
        choices=FORMATS,
        default=argparse.SUPPRESS,
        help="Report format (default: text).",
    )
    p.add_argument(
        "--quiet",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Print nothing; report through the exit status only.",
    )
    p.add_argument(
        "--verbosity",
        choices=LEVELS,
        type=str.upper,
        default=argparse.SUPPRESS,
        help="Logging level (default: WARNING).",
    )
    return p

# --------------------------------------------------------------------------- #
# Configuration                                                               #
# --------------------------------------------------------------------------- #

def _load_config(path: str | Path) -> dict[str, Any]:
    """Read and check a ``--config`` file, raising ``ValueError`` on bad content."""
    text = loader.read_text(path)
    try:
        cfg = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in config {path}: {exc}") from exc
    if not isinstance(cfg, dict):
        raise ValueError(f"Config {path} must hold a JSON object")

    unknown = set(cfg) - set(_DEFAULTS)
    if unknown:
        raise ValueError(f"Unknown config key(s) in {path}: {sorted(unknown)}")
    if "format" in cfg and cfg["format"] not in FORMATS:
        raise ValueError(f"{path}: format '{cfg['format']}' not in {list(FORMATS)}")
    if "quiet" in cfg and not isinstance(cfg["quiet"], bool):
        raise ValueError(f"{path}: quiet must be true or false")
    if "verbosity" in cfg:
        level = str(cfg["verbosity"]).upper()
        if level not in LEVELS:
            raise ValueError(f"{path}: verbosity '{cfg['verbosity']}' not in {list(LEVELS)}")
        cfg["verbosity"] = level
    return cfg


def resolve_options(argv: Sequence[str]) -> tuple[list[str], dict[str, Any]]:
    """Return ``(files, options)`` for *argv*."""
    ns = vars(build_arg_parser().parse_args(list(argv)))
    files = ns.pop("files")

    options = dict(_DEFAULTS)
    if config_file := ns.pop("config", None):
        options.update(_load_config(config_file))
    options.update(ns)
    return files, options

# --------------------------------------------------------------------------- #
# Entry point                                                                 #
# --------------------------------------------------------------------------- #

def _emit(fmt: str, summaries: list[dict[str, Any]], results: list[tuple[str, Any]]) -> None:
    if fmt == "json":
        print(report.to_json(summaries))
    elif fmt == "markdown":
        print(report.to_markdown(summaries))
    else:
        for source, result in results:
            print(report.to_text(source, result))


def main(argv: Sequence[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    try:
        files, options = resolve_options(argv)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=options["verbosity"],
        format="%(asctime)s %(levelname)s %(message)s",
    )

    status = 0
    summaries: list[dict[str, Any]] = []
    results: list[tuple[str, Any]] = []
    for source in files:
        try:
            text = loader.read_text(source)
        except (OSError, ValueError) as exc:
            print(f"error: {exc}", file=sys.stderr)
            status = 2
            continue

        result = validate(text)
        log.info("%s: %s", source, "valid" if result.is_valid else f"{len(result)} error(s)")
        summaries.append(report.summarize(source, result, text=text))
        results.append((source, result))
        if not result.is_valid and status == 0:
            status = 1

    if not options["quiet"]:
        _emit(options["format"], summaries, results)
    return status


if __name__ == "__main__":
    sys.exit(main())
