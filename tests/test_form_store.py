from __future__ import annotations

import logging

import pytest

from core.errors import InvalidFieldError, OnboardingError
from models.onboarding import OnboardingRecord, Resource, Role, WizardCursor, WizardStep
from utils.logging_context import current_wizard_step
from wizard.store import FormStateStore, coerce_field_value, resolve_field_name


def _walk_forward(store: FormStateStore) -> list[WizardStep]:
    visited = [store.step]
    while store.is_advance_allowed():
        visited.append(store.advance())
    return visited


def test_new_store_starts_on_first_step_with_empty_record(store: FormStateStore) -> None:
    snapshot = store.snapshot()

    assert snapshot.cursor == WizardCursor(step=WizardStep.ROLE_SELECTION)
    assert snapshot.record == OnboardingRecord()
    assert snapshot.step is WizardStep.ROLE_SELECTION


@pytest.mark.parametrize("role", [Role.PERSONNEL, Role.ADMIN])
def test_other_roles_walk_role_profile_confirmation(profile_store, role: Role) -> None:
    store = profile_store(role)

    visited = [WizardStep.ROLE_SELECTION, *_walk_forward(store)]

    assert visited == [WizardStep.ROLE_SELECTION, WizardStep.PROFILE_INFO, WizardStep.CONFIRMATION]


def test_department_head_walks_every_step(profile_store) -> None:
    store = profile_store(Role.DEPARTMENT_HEAD)

    visited = [WizardStep.ROLE_SELECTION, *_walk_forward(store)]

    assert visited == list(WizardStep)


def test_advance_from_role_step_is_noop_without_role(store: FormStateStore) -> None:
    assert not store.is_advance_allowed()
    assert store.advance() is WizardStep.ROLE_SELECTION
    assert store.step is WizardStep.ROLE_SELECTION
    assert store.missing_fields() == ["role"]

    store.update_field("role", Role.ADMIN)

    assert store.is_advance_allowed()
    assert store.advance() is WizardStep.PROFILE_INFO


def test_clearing_role_blocks_advance_again(store: FormStateStore) -> None:
    store.update_field("role", "Personnel")
    store.update_field("role", "")

    assert store.record.role is None
    assert store.advance() is WizardStep.ROLE_SELECTION


def test_empty_profile_blocks_advance(store: FormStateStore) -> None:
    store.update_field("role", Role.PERSONNEL)
    store.advance()
    before = store.snapshot()

    assert store.is_advance_allowed() is False
    assert store.advance() is WizardStep.PROFILE_INFO
    assert store.snapshot() == before
    assert store.missing_fields() == ["full_name", "email", "department", "designation"]


@pytest.mark.parametrize("blank_field", ["full_name", "email", "department", "designation"])
def test_single_blank_profile_field_blocks_advance(store: FormStateStore, fill_profile, blank_field: str) -> None:
    store.update_field("role", Role.ADMIN)
    store.advance()
    fill_profile(store, **{blank_field: ""})

    assert store.advance() is WizardStep.PROFILE_INFO

    store.update_field(blank_field, "filled in")

    assert store.advance() is WizardStep.CONFIRMATION


def test_whitespace_only_designation_passes_profile_gate(store: FormStateStore, fill_profile) -> None:
    store.update_field("role", Role.PERSONNEL)
    store.advance()
    fill_profile(store, designation="   ")

    assert store.missing_fields() == []
    assert store.advance() is WizardStep.CONFIRMATION


def test_personnel_scenario_skips_department_setup(profile_store) -> None:
    store = profile_store(Role.PERSONNEL)

    store.advance()
    store.advance()

    assert store.step is WizardStep.CONFIRMATION
    assert store.visible_steps() == (
        WizardStep.ROLE_SELECTION,
        WizardStep.PROFILE_INFO,
        WizardStep.CONFIRMATION,
    )
    assert store.visible_step_labels() == ("Role", "Profile", "Confirm")


def test_role_change_on_setup_step_jumps_to_confirmation_and_keeps_resources(profile_store) -> None:
    store = profile_store(Role.DEPARTMENT_HEAD)
    store.advance()
    store.update_field("setupResourcesRequested", True)
    store.update_field("selectedResources", {Resource.INFRASTRUCTURE})
    assert store.step is WizardStep.DEPARTMENT_SETUP

    store.update_field("role", Role.ADMIN)

    assert store.step is WizardStep.CONFIRMATION
    record = store.record
    assert record.selected_resources == frozenset({Resource.INFRASTRUCTURE})
    assert record.setup_resources_requested is True
    assert record.effective_resources == frozenset()

    store.update_field("role", Role.ADMIN)

    assert store.step is WizardStep.CONFIRMATION


def test_role_change_elsewhere_does_not_move_cursor(profile_store) -> None:
    store = profile_store(Role.DEPARTMENT_HEAD)

    store.update_field("role", Role.PERSONNEL)

    assert store.step is WizardStep.PROFILE_INFO


def test_switching_back_to_department_head_restores_setup_branch(profile_store) -> None:
    store = profile_store(Role.DEPARTMENT_HEAD)
    store.advance()
    store.update_field("role", Role.PERSONNEL)
    assert store.step is WizardStep.CONFIRMATION

    store.update_field("role", Role.DEPARTMENT_HEAD)

    assert store.step is WizardStep.CONFIRMATION
    assert store.retreat() is WizardStep.DEPARTMENT_SETUP


@pytest.mark.parametrize(
    "role, expected",
    [
        (Role.DEPARTMENT_HEAD, WizardStep.DEPARTMENT_SETUP),
        (Role.PERSONNEL, WizardStep.PROFILE_INFO),
        (Role.ADMIN, WizardStep.PROFILE_INFO),
    ],
)
def test_retreat_from_confirmation(profile_store, role: Role, expected: WizardStep) -> None:
    store = profile_store(role)
    _walk_forward(store)
    assert store.step is WizardStep.CONFIRMATION

    assert store.retreat() is expected


def test_retreat_on_first_step_is_noop(store: FormStateStore) -> None:
    assert store.retreat() is WizardStep.ROLE_SELECTION
    assert store.step is WizardStep.ROLE_SELECTION


def test_retreat_has_no_gate(store: FormStateStore) -> None:
    store.update_field("role", Role.PERSONNEL)
    store.advance()

    assert store.missing_fields()
    assert store.retreat() is WizardStep.ROLE_SELECTION


def test_advance_on_confirmation_is_noop(profile_store) -> None:
    store = profile_store(Role.PERSONNEL)
    store.advance()

    assert store.is_advance_allowed() is False
    assert store.advance() is WizardStep.CONFIRMATION


@pytest.mark.parametrize("role", [Role.DEPARTMENT_HEAD, Role.PERSONNEL, Role.ADMIN])
def test_advance_then_retreat_round_trips(profile_store, role: Role) -> None:
    store = profile_store(role)
    while store.step is not WizardStep.CONFIRMATION:
        before = store.snapshot()

        store.advance()
        store.retreat()

        assert store.snapshot() == before
        store.advance()


def test_update_field_accepts_python_names_and_aliases(store: FormStateStore) -> None:
    store.update_field("full_name", "Amina")
    store.update_field("fullName", "Amina Okafor")
    store.update_field("setup_resources_requested", 1)

    assert store.record.full_name == "Amina Okafor"
    assert store.record.setup_resources_requested is True


def test_update_field_with_unknown_name_fails_fast(store: FormStateStore) -> None:
    before = store.snapshot()

    with pytest.raises(InvalidFieldError) as excinfo:
        store.update_field("nickname", "Ami")

    assert excinfo.value.field == "nickname"
    assert "full_name" in excinfo.value.known_fields
    assert "Unknown onboarding field 'nickname'" in str(excinfo.value)
    assert isinstance(excinfo.value, OnboardingError)
    assert isinstance(excinfo.value, KeyError)
    assert store.snapshot() == before


def test_update_field_does_not_validate_values(store: FormStateStore) -> None:
    store.update_field("email", "not-an-email")
    store.update_field("phone", None)

    assert store.record.email == "not-an-email"
    assert store.record.phone == ""


@pytest.mark.parametrize("raw", ["false", "0", "no", "off", "", "  "])
def test_setup_flag_strings_that_are_not_truthy_stay_off(store: FormStateStore, raw: str) -> None:
    store.update_field("role", Role.DEPARTMENT_HEAD)
    store.update_field("selectedResources", ["Infrastructure"])

    store.update_field("setupResourcesRequested", raw)

    assert store.record.setup_resources_requested is False
    assert store.record.effective_resources == frozenset()


@pytest.mark.parametrize("raw", ["true", "1", " Yes ", "ON"])
def test_setup_flag_strings_that_are_truthy_turn_on(store: FormStateStore, raw: str) -> None:
    store.update_field("setupResourcesRequested", raw)

    assert store.record.setup_resources_requested is True


def test_unhashable_resource_items_are_dropped(store: FormStateStore, caplog) -> None:
    caplog.set_level(logging.WARNING, logger="wizard.store")

    record = store.update_field("selectedResources", [["Infrastructure"], "Personnel", {"x": 1}])

    assert record.selected_resources == frozenset({Resource.PERSONNEL})
    assert any("unhashable" in entry.getMessage() for entry in caplog.records)


def test_unrecognised_role_is_stored_but_does_not_open_setup(store: FormStateStore) -> None:
    store.update_field("role", "Auditor")

    assert store.record.role == "Auditor"
    assert store.is_advance_allowed()
    assert WizardStep.DEPARTMENT_SETUP not in store.visible_steps()


def test_toggle_resource_adds_and_removes(store: FormStateStore) -> None:
    assert store.toggle_resource(Resource.PERSONNEL) == frozenset({Resource.PERSONNEL})
    assert store.toggle_resource("Digital Assets") == frozenset({Resource.PERSONNEL, Resource.DIGITAL_ASSETS})
    assert store.toggle_resource(Resource.PERSONNEL) == frozenset({Resource.DIGITAL_ASSETS})


def test_snapshot_is_read_only(store: FormStateStore) -> None:
    store.update_field("role", Role.ADMIN)
    first = store.snapshot()
    second = store.snapshot()

    store.update_field("department", "Finance")

    assert first == second
    assert first.record.department == ""
    assert store.snapshot().record.department == "Finance"


def test_reset_discards_record_and_cursor(profile_store) -> None:
    store = profile_store(Role.ADMIN)

    store.reset()

    assert store.snapshot().record == OnboardingRecord()
    assert store.step is WizardStep.ROLE_SELECTION


def test_state_lives_in_namespaced_session_state() -> None:
    session_state: dict[str, object] = {}
    first = FormStateStore(session_state=session_state, wizard_id="alpha")
    second = FormStateStore(session_state=session_state, wizard_id="beta")

    first.update_field("role", Role.PERSONNEL)
    first.advance()

    assert second.step is WizardStep.ROLE_SELECTION
    assert second.record.role is None
    assert session_state["wiz:alpha:cursor"] == WizardCursor(step=WizardStep.PROFILE_INFO)

    rebound = FormStateStore(session_state=session_state, wizard_id="alpha")

    assert rebound.step is WizardStep.PROFILE_INFO
    assert rebound.record.role is Role.PERSONNEL


def test_corrupt_session_entries_fall_back_to_defaults() -> None:
    session_state: dict[str, object] = {"wiz:default:record": {"role": "Admin"}, "wiz:default:cursor": 9}

    store = FormStateStore(session_state=session_state)

    assert store.record == OnboardingRecord()
    assert store.step is WizardStep.ROLE_SELECTION


def test_snapshot_does_not_repair_corrupt_entries() -> None:
    session_state: dict[str, object] = {}
    store = FormStateStore(session_state=session_state)
    session_state["wiz:default:record"] = {"role": "Admin"}
    session_state["wiz:default:cursor"] = 9

    snapshot = store.snapshot()

    assert snapshot.record == OnboardingRecord()
    assert snapshot.step is WizardStep.ROLE_SELECTION
    assert session_state == {"wiz:default:record": {"role": "Admin"}, "wiz:default:cursor": 9}


def test_navigation_binds_wizard_step_to_logging_context(store: FormStateStore, caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="wizard.store")

    store.advance()
    store.update_field("role", Role.DEPARTMENT_HEAD)
    store.advance()

    assert current_wizard_step() == "profile"
    assert any("blocked" in record.getMessage() for record in caplog.records)
    assert any("Advancing from 'role' to 'profile'" in record.getMessage() for record in caplog.records)


def test_resolve_field_name() -> None:
    assert resolve_field_name("selectedResources") == "selected_resources"
    assert resolve_field_name("department") == "department"
    with pytest.raises(InvalidFieldError):
        resolve_field_name("FullName")


def test_coerce_field_value() -> None:
    assert coerce_field_value("role", "Department Head") is Role.DEPARTMENT_HEAD
    assert coerce_field_value("role", "") is None
    assert coerce_field_value("selected_resources", ["Infrastructure", Resource.PERSONNEL]) == frozenset(
        {Resource.INFRASTRUCTURE, Resource.PERSONNEL}
    )
    assert coerce_field_value("selected_resources", None) == frozenset()
    assert coerce_field_value("selected_resources", "Personnel") == frozenset({Resource.PERSONNEL})
    assert coerce_field_value("setup_resources_requested", "") is False
    assert coerce_field_value("full_name", None) == ""
