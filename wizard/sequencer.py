"""Pure navigation rules for the onboarding wizard.

Every function here maps ``(step, record)`` to a decision and never touches
session state. Transitions walk the list of steps that are active for the
record, so the role-dependent skip of the department setup step lives in a
single place: the ``is_active`` predicate in :mod:`wizard.step_registry`.
"""

from __future__ import annotations

from models.onboarding import OnboardingRecord, WizardStep
from wizard.missing_fields import missing_fields
from wizard.step_registry import get_step, resolve_active_steps, resolve_nearest_active_step


def visible_steps(record: OnboardingRecord) -> tuple[WizardStep, ...]:
    """Return the ordered steps shown for ``record``."""

    return resolve_active_steps(record)


def next_step(current: WizardStep, record: OnboardingRecord) -> WizardStep:
    """Return the step after ``current``; the terminal step maps to itself."""

    current = WizardStep(current)
    for candidate in visible_steps(record):
        if candidate > current:
            return candidate
    return current


def prev_step(current: WizardStep, record: OnboardingRecord) -> WizardStep:
    """Return the step before ``current``; the first step maps to itself."""

    current = WizardStep(current)
    for candidate in reversed(visible_steps(record)):
        if candidate < current:
            return candidate
    return current


def restore_cursor(current: WizardStep, record: OnboardingRecord) -> WizardStep:
    """Move ``current`` forward to the nearest active step when it is no longer valid."""

    return resolve_nearest_active_step(WizardStep(current), visible_steps(record))


def missing_gate_fields(step: WizardStep, record: OnboardingRecord) -> list[str]:
    """Return gate fields of ``step`` that are still blank in ``record``."""

    return missing_fields(record, get_step(step).gate_fields)


def gate_satisfied(step: WizardStep, record: OnboardingRecord) -> bool:
    """Return ``True`` when forward navigation from ``step`` is not blocked by input."""

    return not missing_gate_fields(step, record)


def is_terminal(step: WizardStep, record: OnboardingRecord) -> bool:
    return next_step(step, record) == WizardStep(step)


def is_advance_allowed(step: WizardStep, record: OnboardingRecord) -> bool:
    """Return ``True`` when ``advance`` from ``step`` would move the cursor."""

    return not is_terminal(step, record) and gate_satisfied(step, record)


__all__ = [
    "gate_satisfied",
    "is_advance_allowed",
    "is_terminal",
    "missing_gate_fields",
    "next_step",
    "prev_step",
    "restore_cursor",
    "visible_steps",
]
