from __future__ import annotations


class ReportError(ValueError):
    """Base class for errors that abort a report run."""


class MissingFieldError(ReportError):
    def __init__(self, field_name: str) -> None:
        super().__init__(f"Missing required field: {field_name}")
        self.field_name = field_name


class NumericParseError(ReportError):
    def __init__(self, field_name: str, value: str | None) -> None:
        super().__init__(f"Field {field_name} must be an integer, got {value!r}")
        self.field_name = field_name
        self.value = value


class DateParseError(ReportError):
    def __init__(self, field_name: str, value: str | None) -> None:
        super().__init__(f"Field {field_name} must be a calendar date, got {value!r}")
        self.field_name = field_name
        self.value = value
