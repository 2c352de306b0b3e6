"""Registry for onboarding wizard steps, gates, and canonical order."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Final

from models.onboarding import OnboardingRecord, Role, WizardStep

StepPredicate = Callable[[OnboardingRecord], bool]


@dataclass(frozen=True)
class StepDefinition:
    """Metadata and navigation contract for an individual wizard step.

    ``gate_fields`` lists the record fields that must be non-blank before the
    user may move forward from this step. ``is_active`` decides whether the
    step is part of the flow for a given record; steps without a predicate
    are always active.
    """

    step: WizardStep
    key: str
    label: str
    title: str
    gate_fields: tuple[str, ...] = ()
    is_active: StepPredicate | None = None

    def active_for(self, record: OnboardingRecord) -> bool:
        return self.is_active is None or self.is_active(record)


def _department_setup_active(record: OnboardingRecord) -> bool:
    return record.role == Role.DEPARTMENT_HEAD


PROFILE_GATE_FIELDS: Final[tuple[str, ...]] = (
    "full_name",
    "email",
    "department",
    "designation",
)


WIZARD_STEPS: Final[tuple[StepDefinition, ...]] = (
    StepDefinition(
        step=WizardStep.ROLE_SELECTION,
        key="role",
        label="Role",
        title="Select Your Role",
        gate_fields=("role",),
    ),
    StepDefinition(
        step=WizardStep.PROFILE_INFO,
        key="profile",
        label="Profile",
        title="Profile Information",
        gate_fields=PROFILE_GATE_FIELDS,
    ),
    StepDefinition(
        step=WizardStep.DEPARTMENT_SETUP,
        key="setup",
        label="Setup",
        title="Department Setup",
        is_active=_department_setup_active,
    ),
    StepDefinition(
        step=WizardStep.CONFIRMATION,
        key="confirm",
        label="Confirm",
        title="Review and Confirm",
    ),
)


def step_keys() -> tuple[str, ...]:
    """Return wizard step keys in canonical order."""

    return tuple(definition.key for definition in WIZARD_STEPS)


def get_step(step: WizardStep | int) -> StepDefinition:
    """Lookup step metadata by ordinal."""

    target = WizardStep(step)
    return next(definition for definition in WIZARD_STEPS if definition.step == target)


def resolve_active_steps(record: OnboardingRecord) -> tuple[WizardStep, ...]:
    """Return active wizard steps for ``record`` in canonical order."""

    return tuple(definition.step for definition in WIZARD_STEPS if definition.active_for(record))


def resolve_nearest_active_step(target: WizardStep, active_steps: Sequence[WizardStep]) -> WizardStep:
    """Return ``target`` when active, else the first active step after it.

    Falls back to the last active step when nothing follows ``target``.
    """

    if target in active_steps:
        return target
    for candidate in active_steps:
        if candidate > target:
            return candidate
    return active_steps[-1]


__all__ = [
    "PROFILE_GATE_FIELDS",
    "StepDefinition",
    "StepPredicate",
    "WIZARD_STEPS",
    "get_step",
    "resolve_active_steps",
    "resolve_nearest_active_step",
    "step_keys",
]
