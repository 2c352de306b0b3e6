"""Pydantic models for the onboarding record and the wizard cursor."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, StrEnum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel


class Role(StrEnum):
    """Roles a new user can onboard as."""

    DEPARTMENT_HEAD = "Department Head"
    PERSONNEL = "Personnel"
    ADMIN = "Admin"

    @property
    def description(self) -> str:
        return ROLE_DESCRIPTIONS[self]


ROLE_DESCRIPTIONS: dict[Role, str] = {
    Role.DEPARTMENT_HEAD: "Manage your department and resources",
    Role.PERSONNEL: "Update field data and request resources",
    Role.ADMIN: "Manage users, configs, and audit logs",
}


class Resource(StrEnum):
    """Initial resources a department head may request during setup."""

    INFRASTRUCTURE = "Infrastructure"
    PERSONNEL = "Personnel"
    DIGITAL_ASSETS = "Digital Assets"


class WizardStep(IntEnum):
    """Ordinal position of each wizard step."""

    ROLE_SELECTION = 1
    PROFILE_INFO = 2
    DEPARTMENT_SETUP = 3
    CONFIRMATION = 4


class OnboardingRecord(BaseModel):
    """Accumulating submission payload built across the wizard steps.

    The record is immutable; the form store replaces it with
    :meth:`pydantic.BaseModel.model_copy` on every field update. Field values
    are not validated on update, so ``role`` may briefly hold a raw value the
    presentation layer passed through.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    role: Optional[Role] = None
    full_name: str = ""
    email: str = ""
    department: str = ""
    designation: str = ""
    phone: str = ""
    setup_resources_requested: bool = False
    selected_resources: frozenset[Resource] = Field(default_factory=frozenset)

    @property
    def is_department_head(self) -> bool:
        return self.role == Role.DEPARTMENT_HEAD

    @property
    def resources_live(self) -> bool:
        """Return ``True`` when ``selected_resources`` should be consulted."""

        return self.is_department_head and bool(self.setup_resources_requested)

    @property
    def effective_resources(self) -> frozenset[Resource]:
        """Return the resource selection, or an empty set while it is inert."""

        if not self.resources_live:
            return frozenset()
        return frozenset(self.selected_resources)

    @field_serializer("selected_resources")
    def _serialize_resources(self, value: frozenset[Resource]) -> list[str]:
        return sorted(str(item) for item in value)


def record_field_names() -> tuple[str, ...]:
    """Return the Python field names of :class:`OnboardingRecord`."""

    return tuple(OnboardingRecord.model_fields)


def record_field_aliases() -> dict[str, str]:
    """Map camelCase wire names to :class:`OnboardingRecord` field names."""

    return {to_camel(name): name for name in OnboardingRecord.model_fields}


@dataclass(frozen=True)
class WizardCursor:
    """Pointer to the currently visible wizard step."""

    step: WizardStep = WizardStep.ROLE_SELECTION

    def __post_init__(self) -> None:
        try:
            step = WizardStep(self.step)
        except ValueError as exc:
            raise ValueError(f"Wizard step must be between 1 and 4, got {self.step!r}") from exc
        object.__setattr__(self, "step", step)


__all__ = [
    "OnboardingRecord",
    "ROLE_DESCRIPTIONS",
    "Resource",
    "Role",
    "WizardCursor",
    "WizardStep",
    "record_field_aliases",
    "record_field_names",
]
