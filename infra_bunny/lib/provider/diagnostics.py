from dataclasses import dataclass
from enum import Enum

from .errors import ProviderError


class Severity(Enum):
    error = "error"
    warning = "warning"


@dataclass
class Diagnostic:
    severity: Severity
    summary: str
    detail: str = ""

    def __str__(self):
        return f"{self.summary}: {self.detail}" if self.detail else self.summary


class Diagnostics(list):
    """The errors and warnings produced by a resource operation, an empty instance means success"""

    def add(self, severity: Severity, summary: str, detail: str = "") -> "Diagnostics":
        self.append(Diagnostic(severity, summary, detail))
        return self

    def error(self, summary: str, detail: str = "") -> "Diagnostics":
        return self.add(Severity.error, summary, detail)

    def warning(self, summary: str, detail: str = "") -> "Diagnostics":
        return self.add(Severity.warning, summary, detail)

    def errors(self) -> list[Diagnostic]:
        return [d for d in self if d.severity is Severity.error]

    def warnings(self) -> list[Diagnostic]:
        return [d for d in self if d.severity is Severity.warning]

    def has_error(self) -> bool:
        return any(d.severity is Severity.error for d in self)

    def raise_for_errors(self) -> None:
        """Raise a ``ProviderError`` carrying these diagnostics if any of them is an error"""
        if self.has_error():
            raise ProviderError(self)


def errors_from(summary: str, err: Exception) -> Diagnostics:
    return Diagnostics().error(summary, str(err))


def warnings_from(summary: str, err: Exception) -> Diagnostics:
    return Diagnostics().warning(summary, str(err))
