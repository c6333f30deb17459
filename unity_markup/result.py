"""
result.py - validation error records and the per-run error collector
====================================================================

Public API
----------
ValidationError
    Immutable ``(path, message)`` pair.

ValidationResult
    Ordered collection of :class:`ValidationError` produced by a single
    validation run.  ``is_valid`` is ``True`` iff no errors were recorded.

UnityError
    Exception raised by :meth:`ValidationResult.raise_for_errors`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, List, Tuple

__all__ = [
    "UnityError",
    "ValidationError",
    "ValidationResult",
]

# --------------------------------------------------------------------------- #
# Exceptions                                                                  #
# --------------------------------------------------------------------------- #

class UnityError(ValueError):
    """Raised when a caller asks for an invalid result to be treated as fatal."""

    def __init__(self, result: "ValidationResult"):
        super().__init__(str(result).rstrip("\n"))
        self.result = result

# --------------------------------------------------------------------------- #
# Records                                                                     #
# --------------------------------------------------------------------------- #

@dataclass(frozen=True)
class ValidationError:
    """A single nonconformance located by a JSON path (e.g. ``[1].id``)."""

    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"

    def to_dict(self) -> dict[str, str]:
        return {"path": self.path, "message": self.message}


class ValidationResult:
    """Errors collected during one validation run, in traversal order."""

    def __init__(self) -> None:
        self._errors: List[ValidationError] = []

    def add_error(self, path: str, message: str) -> None:
        self._errors.append(ValidationError(path, message))

    @property
    def is_valid(self) -> bool:
        return not self._errors

    @property
    def errors(self) -> Tuple[ValidationError, ...]:
        """Read-only view of the recorded errors."""
        return tuple(self._errors)

    def __len__(self) -> int:
        return len(self._errors)

    def __iter__(self) -> Iterator[ValidationError]:
        return iter(tuple(self._errors))

    def __bool__(self) -> bool:
        return self.is_valid

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ValidationResult):
            return NotImplemented
        return self._errors == other._errors

    def __repr__(self) -> str:
        return f"ValidationResult(errors={self._errors!r})"

    def __str__(self) -> str:
        if self.is_valid:
            return "Valid Unity markup"
        lines = [f"Invalid Unity markup ({len(self._errors)} error(s)):\n"]
        lines.extend(f"  - {err}\n" for err in self._errors)
        return "".join(lines)

    # ------------------------------------------------------------------ #
    # Conversions                                                        #
    # ------------------------------------------------------------------ #

    def to_dict(self) -> dict[str, Any]:
        return {
            "valid": self.is_valid,
            "errors": [err.to_dict() for err in self._errors],
        }

    def to_frame(self):
        """Return the errors as a :class:`pandas.DataFrame` (``path``, ``message``)."""
        import pandas as pd

        return pd.DataFrame(
            [err.to_dict() for err in self._errors],
            columns=["path", "message"],
        )

    def raise_for_errors(self) -> None:
        """Raise :class:`UnityError` if any error was recorded."""
        if not self.is_valid:
            raise UnityError(self)
