"""Helpers for initializing Streamlit session state."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Callable

import streamlit as st

import config as app_config
from constants.keys import StateKeys, UIKeys
from utils.logging_context import set_session_id
from wizard.store import FormStateStore


logger = logging.getLogger(__name__)


_DEFAULT_STATE_FACTORIES: Mapping[str, Callable[[], Any]] = MappingProxyType(
    {
        StateKeys.SESSION_ID: lambda: uuid.uuid4().hex[:12],
        StateKeys.LAST_SUBMISSION: lambda: None,
    }
)


def ensure_state() -> None:
    """Initialize ``st.session_state`` with required keys.

    Existing keys are preserved so reruns keep the user's progress.
    """

    for key, factory in _DEFAULT_STATE_FACTORIES.items():
        if key not in st.session_state:
            st.session_state[key] = factory()
    set_session_id(str(st.session_state[StateKeys.SESSION_ID]))
    get_wizard_store()


def get_wizard_store() -> FormStateStore:
    """Return the form store bound to the current Streamlit session."""

    return FormStateStore(session_state=st.session_state, wizard_id=app_config.WIZARD_ID)


def clear_widget_state(store: FormStateStore) -> None:
    """Drop widget values so the next render re-reads them from the record."""

    prefixes = (store.keys.widget(""), UIKeys.RESOURCE_PREFIX, UIKeys.ROLE_RADIO, UIKeys.SETUP_RESOURCES)
    for key in list(st.session_state.keys()):
        if isinstance(key, str) and key.startswith(prefixes):
            del st.session_state[key]


def reset_state() -> None:
    """Abandon the current wizard session and start from the first step."""

    store = get_wizard_store()
    store.reset()
    clear_widget_state(store)
    st.session_state[StateKeys.LAST_SUBMISSION] = None
    logger.info("Wizard session abandoned")
    ensure_state()
