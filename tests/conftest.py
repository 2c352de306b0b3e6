from pathlib import Path
import sys
from dataclasses import dataclass

import streamlit as st

import pytest


ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from models.onboarding import Role  # noqa: E402
from wizard.store import FormStateStore  # noqa: E402


@dataclass
class _SessionDict(dict[str, object]):
    """Lightweight replacement for ``st.session_state`` during tests."""

    def clear(self) -> None:  # type: ignore[override]
        super().clear()


@pytest.fixture
def stub_session_state(monkeypatch: pytest.MonkeyPatch) -> _SessionDict:
    """Replace Streamlit's runtime-bound session state with a plain dictionary."""

    session_state = _SessionDict()
    monkeypatch.setattr(st, "session_state", session_state, raising=False)
    return session_state


@pytest.fixture
def store() -> FormStateStore:
    return FormStateStore()


PROFILE_VALUES: dict[str, str] = {
    "full_name": "Amina Okafor",
    "email": "amina.okafor@agency.gov",
    "department": "Public Works",
    "designation": "Director",
}


@pytest.fixture
def fill_profile():
    """Return a helper that populates the required profile fields of a store."""

    def _fill(target: FormStateStore, **overrides: str) -> None:
        for field, value in {**PROFILE_VALUES, **overrides}.items():
            target.update_field(field, value)

    return _fill


@pytest.fixture
def profile_store(store: FormStateStore, fill_profile):
    """Return a factory that moves a fresh store to the profile step for ``role``."""

    def _build(role: Role) -> FormStateStore:
        store.update_field("role", role)
        store.advance()
        fill_profile(store)
        return store

    return _build
