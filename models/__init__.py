"""Pydantic models for the onboarding record and wizard cursor."""

from .onboarding import (
    OnboardingRecord,
    Resource,
    Role,
    WizardCursor,
    WizardStep,
)

__all__ = [
    "OnboardingRecord",
    "Resource",
    "Role",
    "WizardCursor",
    "WizardStep",
]
