"""
Diagnostics collector.

Replaces fire-and-forget logging with an explicit sink that is passed
through the inclusion call chain and can be inspected by the caller.
Every recorded diagnostic is also forwarded to the ``mdext`` logger.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

logger = logging.getLogger("mdext")


class Severity(str, Enum):
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Diagnostic:
    severity: Severity
    component: str
    message: str
    kind: Optional[str] = None   # machine-readable error kind, e.g. "fetch-failed"

    def format(self) -> str:
        return f"[{self.component}] {self.message}"

    def to_dict(self) -> dict:
        return {
            "severity": self.severity.value,
            "component": self.component,
            "message": self.message,
            "kind": self.kind,
        }


@dataclass
class Diagnostics:
    """
    Ordered collection of warnings and errors.

    Both ``warn`` and ``error`` are fire-and-continue: they never raise.
    """
    items: List[Diagnostic] = field(default_factory=list)

    def warn(self, component: str, message: str, *, kind: str | None = None) -> Diagnostic:
        return self._record(Severity.WARNING, component, message, kind)

    def error(self, component: str, message: str, *, kind: str | None = None) -> Diagnostic:
        return self._record(Severity.ERROR, component, message, kind)

    def _record(self, severity: Severity, component: str, message: str, kind: str | None) -> Diagnostic:
        d = Diagnostic(severity=severity, component=component, message=message, kind=kind)
        self.items.append(d)
        level = logging.WARNING if severity is Severity.WARNING else logging.ERROR
        logger.log(level, d.format())
        return d

    @property
    def warnings(self) -> List[Diagnostic]:
        return [d for d in self.items if d.severity is Severity.WARNING]

    @property
    def errors(self) -> List[Diagnostic]:
        return [d for d in self.items if d.severity is Severity.ERROR]

    def has_errors(self) -> bool:
        return any(d.severity is Severity.ERROR for d in self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)


__all__ = ["Severity", "Diagnostic", "Diagnostics"]
