"""Custom exception types for the onboarding wizard."""

from __future__ import annotations

from collections.abc import Sequence


class OnboardingError(Exception):
    """Base exception for onboarding wizard integration errors."""


class InvalidFieldError(OnboardingError, KeyError):
    """Raised when a field update names a field the record does not define."""

    def __init__(self, field: str, known_fields: Sequence[str] = ()) -> None:
        self.field = field
        self.known_fields = tuple(known_fields)
        message = f"Unknown onboarding field '{field}'"
        if self.known_fields:
            message = f"{message}; expected one of: {', '.join(self.known_fields)}"
        super().__init__(message)

    def __str__(self) -> str:
        return str(self.args[0])


class SubmissionNotReadyError(OnboardingError):
    """Raised when submission is requested before the wizard can hand off."""

    def __init__(self, message: str, *, step: int | None = None, missing: Sequence[str] = ()) -> None:
        super().__init__(message)
        self.step = step
        self.missing = tuple(missing)
