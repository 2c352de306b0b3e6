from __future__ import annotations

import logging
from collections.abc import Iterable, MutableMapping, Sequence
from dataclasses import dataclass
from typing import Any

from core.errors import InvalidFieldError, SubmissionNotReadyError
from models.onboarding import (
    OnboardingRecord,
    Resource,
    Role,
    WizardCursor,
    WizardStep,
    record_field_aliases,
    record_field_names,
)
from utils.logging_context import log_context, set_wizard_step
from wizard import sequencer
from wizard.navigation.keys import WizardSessionKeys
from wizard.step_registry import get_step
from wizard.submission import Submitter

logger = logging.getLogger(__name__)

_TEXT_FIELDS: frozenset[str] = frozenset({"full_name", "email", "department", "designation", "phone"})


@dataclass(frozen=True)
class WizardSnapshot:
    """Read-only view of the record and cursor at one point in time."""

    record: OnboardingRecord
    cursor: WizardCursor

    @property
    def step(self) -> WizardStep:
        return self.cursor.step


def resolve_field_name(name: str) -> str:
    """Return the record field for ``name`` (field name or camelCase alias)."""

    if name in OnboardingRecord.model_fields:
        return name
    aliases = record_field_aliases()
    if name in aliases:
        return aliases[name]
    raise InvalidFieldError(name, record_field_names())


_TRUTHY_TEXT: tuple[str, ...] = ("1", "true", "yes", "on")


def _coerce_role(value: object) -> object:
    if value is None or isinstance(value, Role):
        return value
    if isinstance(value, str):
        if not value:
            return None
        try:
            return Role(value)
        except ValueError:
            logger.warning("Storing unrecognised role value %r", value)
            return value
    return value


def _coerce_resource(value: object) -> object:
    if isinstance(value, Resource):
        return value
    try:
        return Resource(value)
    except (TypeError, ValueError):
        logger.warning("Storing unrecognised resource value %r", value)
        return value


def _coerce_resources(value: object) -> frozenset[Any]:
    if value is None:
        return frozenset()
    if isinstance(value, (str, Resource)) or not isinstance(value, Iterable):
        value = (value,)
    resources: set[Any] = set()
    for item in value:
        coerced = _coerce_resource(item)
        try:
            resources.add(coerced)
        except TypeError:
            logger.warning("Dropping unhashable resource value %r", item)
    return frozenset(resources)


def _coerce_flag(value: object) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY_TEXT
    return bool(value)


def coerce_field_value(field: str, value: object) -> object:
    """Normalise ``value`` for ``field`` without rejecting anything."""

    if field == "role":
        return _coerce_role(value)
    if field == "selected_resources":
        return _coerce_resources(value)
    if field == "setup_resources_requested":
        return _coerce_flag(value)
    if field in _TEXT_FIELDS:
        return "" if value is None else value
    return value


class FormStateStore:
    """Own the onboarding record and cursor for one wizard session.

    State is kept inside ``session_state`` under keys namespaced by
    ``wizard_id``. Pass ``st.session_state`` to bind the store to a Streamlit
    session; the default is a private dictionary. Navigation policy is
    delegated to :mod:`wizard.sequencer`.
    """

    def __init__(
        self,
        *,
        session_state: MutableMapping[str, object] | None = None,
        wizard_id: str = "default",
    ) -> None:
        self._session_state: MutableMapping[str, object] = {} if session_state is None else session_state
        self._keys = WizardSessionKeys(wizard_id=wizard_id)
        self.ensure_state_defaults()

    @property
    def wizard_id(self) -> str:
        return self._keys.wizard_id

    @property
    def keys(self) -> WizardSessionKeys:
        return self._keys

    @property
    def record(self) -> OnboardingRecord:
        raw = self._session_state.get(self._keys.record)
        return raw if isinstance(raw, OnboardingRecord) else OnboardingRecord()

    @property
    def cursor(self) -> WizardCursor:
        raw = self._session_state.get(self._keys.cursor)
        return raw if isinstance(raw, WizardCursor) else WizardCursor()

    @property
    def step(self) -> WizardStep:
        return self.cursor.step

    def ensure_state_defaults(self) -> None:
        if not isinstance(self._session_state.get(self._keys.record), OnboardingRecord):
            self._session_state[self._keys.record] = OnboardingRecord()
        if not isinstance(self._session_state.get(self._keys.cursor), WizardCursor):
            self._session_state[self._keys.cursor] = WizardCursor()
        set_wizard_step(get_step(self.step).key)

    def reset(self) -> None:
        """Discard the record and return the cursor to the first step."""

        self._session_state[self._keys.record] = OnboardingRecord()
        self._set_step(WizardStep.ROLE_SELECTION)
        logger.info("Wizard session '%s' reset", self.wizard_id)

    def snapshot(self) -> WizardSnapshot:
        return WizardSnapshot(record=self.record, cursor=self.cursor)

    def update_field(self, name: str, value: object) -> OnboardingRecord:
        """Set a single record field and restore the cursor invariant."""

        field = resolve_field_name(name)
        coerced = coerce_field_value(field, value)
        record = self.record.model_copy(update={field: coerced})
        self._session_state[self._keys.record] = record
        logger.debug("Updated field '%s'", field)
        self._restore_cursor()
        return record

    def toggle_resource(self, resource: Resource | str) -> frozenset[Resource]:
        """Add ``resource`` to the selection, or remove it when already selected."""

        item = _coerce_resource(resource)
        selected = set(self.record.selected_resources)
        if item in selected:
            selected.remove(item)
        else:
            selected.add(item)
        return self.update_field("selected_resources", selected).selected_resources

    def advance(self) -> WizardStep:
        """Move to the next visible step when the current gate is satisfied."""

        current = self.step
        record = self.record
        if not sequencer.is_advance_allowed(current, record):
            logger.debug(
                "Advance from '%s' blocked; missing %s",
                get_step(current).key,
                sequencer.missing_gate_fields(current, record) or "nothing (terminal step)",
            )
            return current
        target = sequencer.next_step(current, record)
        logger.info("Advancing from '%s' to '%s'", get_step(current).key, get_step(target).key)
        self._set_step(target)
        return target

    def retreat(self) -> WizardStep:
        """Move to the previous visible step; no-op on the first step."""

        current = self.step
        target = sequencer.prev_step(current, self.record)
        if target == current:
            return current
        logger.info("Retreating from '%s' to '%s'", get_step(current).key, get_step(target).key)
        self._set_step(target)
        return target

    def is_advance_allowed(self) -> bool:
        return sequencer.is_advance_allowed(self.step, self.record)

    def missing_fields(self) -> list[str]:
        """Return gate fields of the current step that still need input."""

        return sequencer.missing_gate_fields(self.step, self.record)

    def visible_steps(self) -> tuple[WizardStep, ...]:
        return sequencer.visible_steps(self.record)

    def visible_step_labels(self) -> tuple[str, ...]:
        return tuple(get_step(step).label for step in self.visible_steps())

    def submit(self, submitter: Submitter) -> OnboardingRecord:
        """Hand the final record to ``submitter`` and discard the session.

        Errors raised by ``submitter`` propagate and leave the session intact.
        """

        snapshot = self.snapshot()
        if not sequencer.is_terminal(snapshot.step, snapshot.record):
            raise SubmissionNotReadyError(
                "Submission is only possible from the confirmation step",
                step=int(snapshot.step),
            )
        missing = self._missing_required_fields(snapshot.record)
        if missing:
            raise SubmissionNotReadyError(
                "Required onboarding fields are missing",
                step=int(snapshot.step),
                missing=missing,
            )
        logger.info("Submitting onboarding record for role '%s'", snapshot.record.role)
        with log_context(wizard_step="submit"):
            submitter(snapshot.record)
        self.reset()
        return snapshot.record

    @staticmethod
    def _missing_required_fields(record: OnboardingRecord) -> Sequence[str]:
        missing: list[str] = []
        for step in (WizardStep.ROLE_SELECTION, WizardStep.PROFILE_INFO):
            missing.extend(sequencer.missing_gate_fields(step, record))
        return missing

    def _restore_cursor(self) -> None:
        current = self.step
        target = sequencer.restore_cursor(current, self.record)
        if target != current:
            logger.info(
                "Step '%s' no longer applies; moving to '%s'",
                get_step(current).key,
                get_step(target).key,
            )
            self._set_step(target)

    def _set_step(self, step: WizardStep) -> None:
        self._session_state[self._keys.cursor] = WizardCursor(step=step)
        set_wizard_step(get_step(step).key)


__all__ = [
    "FormStateStore",
    "WizardSnapshot",
    "coerce_field_value",
    "resolve_field_name",
]
