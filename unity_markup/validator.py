"""
validator.py - structural validation of Unity markup
====================================================

A Unity document is a JSON tree in which every element is a JSON array::

    ["name", {"attr": "value"}, "text", ["child"], 42]

* index 0 is the element name (an XML 1.0 ``Name``);
* index 1, *iff* it is a JSON object, holds the attributes, whose keys are
  XML names and whose values are primitives;
* every remaining item is content: a primitive or a nested element.

Public API
----------
validate(text) -> ValidationResult
    Parse *text* as JSON and walk it.  Never raises; every problem is
    collected as a :class:`~unity_markup.result.ValidationError`.

validate_document(value) -> ValidationResult
    Walk an already-parsed value tree.

validate_file(path) -> ValidationResult
    Read a document from disk (see :mod:`unity_markup.loader`) and validate
    it.  I/O problems raise; they are not validation errors.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Mapping, Sequence, Tuple, Union

from . import loader
from .result import ValidationResult
from .xml_name import is_valid_name

__all__ = [
    "validate",
    "validate_document",
    "validate_file",
]

log = logging.getLogger(__name__)

_PRIMITIVES = (str, int, float, bool)

# Routing trims ASCII controls and space only; other Unicode spaces are content.
_TRIM_CHARS = "".join(chr(cp) for cp in range(0x21))

# --------------------------------------------------------------------------- #
# Value helpers                                                               #
# --------------------------------------------------------------------------- #

def _is_primitive(value: Any) -> bool:
    """True for JSON null, string, number and boolean values."""
    return value is None or isinstance(value, _PRIMITIVES)


def _type_name(value: Any) -> str:
    """Return the JSON-flavoured type name used in error messages."""
    if value is None:
        return "null"
    if isinstance(value, list):
        return "Array"
    if isinstance(value, dict):
        return "Object"
    if isinstance(value, str):
        return "String"
    if isinstance(value, bool):  # before Number: bool is an int subclass
        return "Boolean"
    if isinstance(value, (int, float)):
        return "Number"
    return type(value).__name__


def _parse(text: str) -> Any:
    """Route on the first non-blank character, then hand over to :mod:`json`."""
    trimmed = text.strip(_TRIM_CHARS)
    if not trimmed.startswith(("[", "{")):
        raise ValueError("JSON must start with '[' or '{'")
    return json.loads(trimmed)

# --------------------------------------------------------------------------- #
# Tree walk                                                                   #
# --------------------------------------------------------------------------- #

def _walk(root: Sequence[Any], result: ValidationResult) -> None:
    """Depth-first, left-to-right walk over *root* with an explicit stack.

    Each production checks its name, then its attributes, then pushes its
    content slots in reverse so they pop in document order.
    """
    stack: List[Tuple[Any, str]] = [(root, "")]
    while stack:
        value, path = stack.pop()
        if isinstance(value, list):
            stack.extend(reversed(_validate_production(value, path, result)))
        else:
            _validate_content(value, path, result)


def _validate_production(array: Sequence[Any], path: str, result: ValidationResult) -> List[Tuple[Any, str]]:
    """Check one ``[name, attrs?, content*]`` element; return its content slots."""
    if not array:
        result.add_error(path, "Unity production must have at least one element (the element name)")
        return []

    # 1) element name -------------------------------------------------------
    name = array[0]
    if not isinstance(name, str):
        result.add_error(f"{path}[0]", f"Element name must be a string, got {_type_name(name)}")
    elif not is_valid_name(name):
        result.add_error(f"{path}[0]", f'Invalid XML element name: "{name}"')

    if len(array) == 1:
        return []  # self-closing

    # 2) attributes (positional: slot 1 only) -------------------------------
    content_start = 1
    if isinstance(array[1], dict):
        _validate_attributes(array[1], f"{path}[1]", result)
        content_start = 2

    # 3) content ------------------------------------------------------------
    return [(array[idx], f"{path}[{idx}]") for idx in range(content_start, len(array))]


def _validate_attributes(attrs: Mapping[Any, Any], path: str, result: ValidationResult) -> None:
    for key, value in attrs.items():
        key_path = f"{path}.{key}"
        if not is_valid_name(key):
            result.add_error(key_path, f'Invalid XML attribute name: "{key}"')
        if not _is_primitive(value):
            result.add_error(
                key_path,
                "Attribute value must be a primitive (String, Number, Boolean, or Null), "
                f"got {_type_name(value)}",
            )


def _validate_content(value: Any, path: str, result: ValidationResult) -> None:
    """Check a non-array content slot; arrays are productions handled by :func:`_walk`."""
    if isinstance(value, dict):
        result.add_error(path, "JSON Object not allowed as content (only allowed at index 1 as attributes)")
    elif not _is_primitive(value):
        result.add_error(path, f"Invalid content type: {_type_name(value)}")

# --------------------------------------------------------------------------- #
# Public entry points                                                         #
# --------------------------------------------------------------------------- #

def validate_document(value: Any) -> ValidationResult:
    """Validate a parsed JSON value tree whose root must be a Unity production."""
    result = ValidationResult()
    if not isinstance(value, list):
        result.add_error("", f"Top level must be a JSON Array, got {_type_name(value)}")
        return result

    _walk(value, result)
    log.debug("Unity walk finished with %d error(s)", len(result))
    return result


def validate(text: Union[str, bytes, None]) -> ValidationResult:
    """Validate Unity markup supplied as JSON *text*.

    ``bytes`` are decoded as UTF-8.  The result is always returned: empty
    input, malformed JSON and a non-array top level are reported as single
    errors at path ``""``.
    """
    result = ValidationResult()

    if isinstance(text, (bytes, bytearray)):
        try:
            text = bytes(text).decode("utf-8")
        except UnicodeDecodeError as exc:
            result.add_error("", f"Invalid JSON: {exc}")
            return result

    if text is None or not text.strip():
        result.add_error("", "Input is null or empty")
        return result

    log.debug("Validating Unity document (%d characters)", len(text))
    try:
        parsed = _parse(text)
    except (ValueError, RecursionError) as exc:  # JSONDecodeError is a ValueError
        result.add_error("", f"Invalid JSON: {exc}")
        return result

    return validate_document(parsed)


def validate_file(path: Union[str, Path]) -> ValidationResult:
    """Read *path* (``"-"`` for stdin) and validate its contents."""
    return validate(loader.read_text(path))
