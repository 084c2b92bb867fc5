from dataclasses import dataclass


class WeeklyReportError(Exception):
    """Base exception for weekly report errors"""

    pass


class InvalidDateError(WeeklyReportError):
    """Raised when a reference date cannot be parsed into a calendar date"""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid reference date: {value!r}")


@dataclass(frozen=True)
class FieldIssue:
    """A single violated constraint, addressed by its field path"""

    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class ReportValidationError(WeeklyReportError):
    """Raised with every field issue found in a submission"""

    def __init__(self, issues: list[FieldIssue]):
        self.issues = list(issues)
        super().__init__(self.summary())

    def summary(self) -> str:
        return "; ".join(str(issue) for issue in self.issues)


class EmptyRenderOutputError(WeeklyReportError):
    """Raised when the renderer produced zero bytes"""

    pass


class PersistenceError(WeeklyReportError):
    """Raised when archiving a rendered report fails"""

    pass
