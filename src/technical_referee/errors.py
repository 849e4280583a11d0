"""Custom error types for the Technical Referee."""

from pathlib import Path
from typing import Optional


class RefereeError(Exception):
    """Base error for input that cannot be evaluated.

    Carries the offending field and a machine-readable code alongside the
    human-readable message.
    """

    def __init__(self, message: str, field: Optional[str] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field
        self.code = code


class InvalidOptionCount(RefereeError):
    """Fewer than 2 or more than 3 options were supplied."""

    def __init__(self, message: str, count: int, code: Optional[str] = None):
        super().__init__(message, field="options", code=code)
        self.count = count


class InvalidOption(RefereeError):
    """An option failed structural validation."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        code: Optional[str] = None,
        option_name: Optional[str] = None,
    ):
        super().__init__(message, field=field, code=code)
        self.option_name = option_name


class InvalidConstraints(RefereeError):
    """A constraints document could not be parsed into UserConstraints."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        code: Optional[str] = None,
        issues: Optional[list[str]] = None,
    ):
        super().__init__(message, field=field, code=code)
        self.issues = issues or []


class InvalidConfig(RefereeError):
    """A referee configuration file could not be loaded."""

    def __init__(
        self,
        message: str,
        path: Optional[Path] = None,
        issues: Optional[list[str]] = None,
    ):
        super().__init__(message, field="config", code="invalid_config")
        self.path = path
        self.issues = issues or []
