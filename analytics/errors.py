"""Errors raised by the creator analytics engine."""

from __future__ import annotations

from typing import List, Optional


class CreatorAnalyticsError(ValueError):
    """Base class for input rejections. Every subclass is terminal for a run."""


class SchemaError(CreatorAnalyticsError):
    def __init__(self, headers: List[str]):
        self.headers = list(headers)
        super().__init__(
            f"Could not find title or views columns. Found columns: {', '.join(self.headers)}. "
            "Expected: title, views, retention (avg % viewed), ctr."
        )


class InsufficientDataError(CreatorAnalyticsError):
    def __init__(
        self,
        found: int,
        required: int = 4,
        detected_columns: Optional[List[str]] = None,
        retention_sample: Optional[List[float]] = None,
    ):
        self.found = found
        self.required = required
        self.detected_columns = list(detected_columns or [])
        self.retention_sample = list(retention_sample or [])

        message = f"Found {found} valid videos (need {required}+)."
        if detected_columns is not None:
            message += f" Detected columns: {', '.join(self.detected_columns) or 'none'}."
        if self.retention_sample:
            sample = ", ".join(_format_sample(value) for value in self.retention_sample)
            message += f" Sample retention values: [{sample}]."
        if detected_columns is not None:
            message += ' Check your CSV has title, views, and "Average percentage viewed" columns.'
        super().__init__(message)


class EmptyWindowError(CreatorAnalyticsError):
    def __init__(self, count: int, required: int = 4):
        self.count = count
        self.required = required
        super().__init__(f"Analysis window holds {count} videos after trimming (need {required}+).")


def _format_sample(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)
