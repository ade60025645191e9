"""Diagnostics collected while normalizing and validating site configuration.

Non-fatal problems never raise. Each stage returns :class:`Diagnostic`
records tagged with a :class:`Severity` and the location of the offending
entry, and callers decide what to do with them: error diagnostics should
block publishing, warnings only need to show up in the logs.

Examples
--------
>>> from sitenav.diagnostics import Diagnostic, Severity, ValidationReport
>>> issue = Diagnostic(Severity.WARNING, "duplicate-label", "Repeated", ("navigation", 1))
>>> issue.pointer
'navigation[1]'
>>> ValidationReport((issue,)).has_errors
False
"""

from __future__ import annotations

import dataclasses as dc
import enum
import logging
import typing as typ

from .models import PublishBlockedError

logger = logging.getLogger(__name__)

Location: typ.TypeAlias = tuple[str | int, ...]


class Severity(enum.Enum):
    """How seriously a diagnostic should be treated."""

    ERROR = "error"
    WARNING = "warning"


@dc.dataclass(frozen=True, slots=True)
class Diagnostic:
    """A single problem found in a site configuration.

    Attributes
    ----------
    severity : Severity
        ``ERROR`` blocks publishing; ``WARNING`` is informational.
    code : str
        Stable kebab-case identifier such as ``"malformed-nav-entry"``.
    message : str
        Human readable explanation.
    location : tuple[str | int, ...]
        Path to the offending value, e.g. ``("navigation", 2, 0)``.
    """

    severity: Severity
    code: str
    message: str
    location: Location = ()

    @property
    def pointer(self) -> str:
        """Render ``location`` as ``navigation[2][0]``-style text."""
        rendered = ""
        for segment in self.location:
            match segment:
                case int():
                    rendered += f"[{segment}]"
                case str() if rendered:
                    rendered += f".{segment}"
                case _:
                    rendered += str(segment)
        return rendered or "<root>"

    @property
    def is_error(self) -> bool:
        """Return True when the diagnostic has error severity."""
        return self.severity is Severity.ERROR

    def __str__(self) -> str:
        return f"{self.severity.value}: {self.pointer}: {self.message} [{self.code}]"


def error(code: str, message: str, location: Location = ()) -> Diagnostic:
    """Build an error-severity diagnostic."""
    return Diagnostic(Severity.ERROR, code, message, location)


def warning(code: str, message: str, location: Location = ()) -> Diagnostic:
    """Build a warning-severity diagnostic."""
    return Diagnostic(Severity.WARNING, code, message, location)


@dc.dataclass(frozen=True, slots=True)
class ValidationReport:
    """Ordered collection of diagnostics produced by a validation pass."""

    diagnostics: tuple[Diagnostic, ...] = ()

    def __iter__(self) -> typ.Iterator[Diagnostic]:
        return iter(self.diagnostics)

    def __len__(self) -> int:
        return len(self.diagnostics)

    @property
    def errors(self) -> tuple[Diagnostic, ...]:
        """Return the error-severity diagnostics."""
        return tuple(item for item in self.diagnostics if item.is_error)

    @property
    def warnings(self) -> tuple[Diagnostic, ...]:
        """Return the warning-severity diagnostics."""
        return tuple(item for item in self.diagnostics if not item.is_error)

    @property
    def has_errors(self) -> bool:
        """Return True when anything should block publishing."""
        return any(item.is_error for item in self.diagnostics)

    def codes(self) -> list[str]:
        """Return diagnostic codes in report order."""
        return [item.code for item in self.diagnostics]

    def merge(self, other: typ.Iterable[Diagnostic]) -> ValidationReport:
        """Return a new report with ``other`` appended."""
        return ValidationReport((*self.diagnostics, *other))

    def raise_for_errors(self) -> None:
        """Raise :class:`PublishBlockedError` when error diagnostics exist."""
        errors = self.errors
        if errors:
            raise PublishBlockedError(errors)


def log_report(
    diagnostics: typ.Iterable[Diagnostic], log: logging.Logger | None = None
) -> int:
    """Emit diagnostics through ``logging`` and return the error count.

    Parameters
    ----------
    diagnostics : Iterable[Diagnostic]
        Report or plain sequence of diagnostics to emit.
    log : logging.Logger, optional
        Destination logger; defaults to this module's logger.

    Returns
    -------
    int
        Number of error-severity diagnostics emitted.
    """
    target = log or logger
    error_count = 0
    for item in diagnostics:
        if item.is_error:
            error_count += 1
            target.error("%s", item)
        else:
            target.warning("%s", item)
    return error_count


__all__ = [
    "Diagnostic",
    "Location",
    "Severity",
    "ValidationReport",
    "error",
    "log_report",
    "warning",
]
