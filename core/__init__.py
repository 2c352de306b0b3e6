"""Core package for onboarding error types."""

from .errors import InvalidFieldError, OnboardingError, SubmissionNotReadyError

__all__ = ["InvalidFieldError", "OnboardingError", "SubmissionNotReadyError"]
