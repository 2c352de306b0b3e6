"""Streamlit rendering for the onboarding wizard.

The functions here only read snapshots and call the store's public
operations; every navigation decision comes from :mod:`wizard.sequencer`.
"""

from __future__ import annotations

import streamlit as st

import config as app_config
from constants.keys import StateKeys, UIKeys
from models.onboarding import Resource, Role, WizardStep
from state.ensure_state import clear_widget_state
from wizard.hints import email_hint
from wizard.step_registry import get_step
from wizard.store import FormStateStore
from wizard.submission import Submitter, confirmation_summary

PROFILE_INPUTS: tuple[tuple[str, str], ...] = (
    ("full_name", "Full Name"),
    ("email", "Official Government Email"),
    ("department", "Department"),
    ("designation", "Designation"),
    ("phone", "Phone Number (Optional)"),
)

_ROLE_OPTIONS: tuple[str, ...] = tuple(role.value for role in Role)


def _prime_widget(key: str, value: object) -> None:
    """Seed widget state from the record the first time a widget is shown."""

    if key not in st.session_state:
        st.session_state[key] = value


def _sync_widget(store: FormStateStore, field: str, widget_key: str) -> None:
    store.update_field(field, st.session_state.get(widget_key))


def _toggle_resource(store: FormStateStore, resource: Resource) -> None:
    store.toggle_resource(resource)


def _submit(store: FormStateStore, submitter: Submitter) -> None:
    record = store.submit(submitter)
    clear_widget_state(store)
    st.session_state[StateKeys.LAST_SUBMISSION] = record.full_name or True


def render_progress(store: FormStateStore) -> None:
    """Render the step indicator for the steps visible to the current role."""

    current = store.step
    steps = store.visible_steps()
    columns = st.columns(len(steps))
    for column, step in zip(columns, steps):
        label = get_step(step).label
        column.markdown(f":blue[**{label}**]" if step == current else f":gray[{label}]")


def render_role_step(store: FormStateStore) -> None:
    role = store.record.role
    _prime_widget(UIKeys.ROLE_RADIO, str(role) if role in _ROLE_OPTIONS else None)
    st.radio(
        "Role",
        options=_ROLE_OPTIONS,
        index=None,
        captions=[Role(option).description for option in _ROLE_OPTIONS],
        key=UIKeys.ROLE_RADIO,
        label_visibility="collapsed",
        on_change=_sync_widget,
        args=(store, "role", UIKeys.ROLE_RADIO),
    )


def render_profile_step(store: FormStateStore) -> None:
    record = store.record
    for field, label in PROFILE_INPUTS:
        widget_key = store.keys.widget(field)
        _prime_widget(widget_key, getattr(record, field))
        st.text_input(
            label,
            key=widget_key,
            placeholder=label,
            on_change=_sync_widget,
            args=(store, field, widget_key),
        )
        if field == "email" and app_config.EMAIL_HINTS_ENABLED:
            hint = email_hint(record.email)
            if hint:
                st.caption(hint)


def render_setup_step(store: FormStateStore) -> None:
    record = store.record
    _prime_widget(UIKeys.SETUP_RESOURCES, record.setup_resources_requested)
    st.checkbox(
        "Add initial department resources?",
        key=UIKeys.SETUP_RESOURCES,
        on_change=_sync_widget,
        args=(store, "setup_resources_requested", UIKeys.SETUP_RESOURCES),
    )
    if not record.setup_resources_requested:
        return
    columns = st.columns(len(Resource))
    for column, resource in zip(columns, Resource):
        widget_key = f"{UIKeys.RESOURCE_PREFIX}{resource.name.lower()}"
        _prime_widget(widget_key, resource in record.selected_resources)
        column.checkbox(
            resource.value,
            key=widget_key,
            on_change=_toggle_resource,
            args=(store, resource),
        )


def render_confirmation_step(store: FormStateStore) -> None:
    lines = [f"**{label}:** {value}" for label, value in confirmation_summary(store.record)]
    st.info("  \n".join(lines))


_STEP_RENDERERS = {
    WizardStep.ROLE_SELECTION: render_role_step,
    WizardStep.PROFILE_INFO: render_profile_step,
    WizardStep.DEPARTMENT_SETUP: render_setup_step,
    WizardStep.CONFIRMATION: render_confirmation_step,
}


def render_navigation(store: FormStateStore, submitter: Submitter) -> None:
    """Render Back/Next (or Submit) with the gate state of the current step."""

    step = store.step
    back_col, next_col = st.columns(2)
    with back_col:
        if step != WizardStep.ROLE_SELECTION:
            st.button("Back", key=UIKeys.BACK_BUTTON, on_click=store.retreat)
    with next_col:
        if step == WizardStep.CONFIRMATION:
            st.button(
                "Submit",
                key=UIKeys.SUBMIT_BUTTON,
                type="primary",
                on_click=_submit,
                args=(store, submitter),
            )
        else:
            st.button(
                "Next",
                key=UIKeys.NEXT_BUTTON,
                type="primary",
                disabled=not store.is_advance_allowed(),
                on_click=store.advance,
            )


def render_wizard(store: FormStateStore, submitter: Submitter) -> None:
    """Render the current step of ``store``, or the post-submission notice."""

    if st.session_state.get(StateKeys.LAST_SUBMISSION):
        st.success("Your onboarding details were submitted.")
        if st.button("Start again", key=UIKeys.RESTART_BUTTON):
            st.session_state[StateKeys.LAST_SUBMISSION] = None
            st.rerun()
        return

    render_progress(store)
    definition = get_step(store.step)
    st.subheader(definition.title)
    _STEP_RENDERERS[definition.step](store)
    render_navigation(store, submitter)
