"""Central configuration for the onboarding wizard.

Values are read from the environment once at import time; a local ``.env``
file is loaded first so development setups do not need exported variables.

``ONBOARDING_LOG_LEVEL`` sets the root logging level, ``ONBOARDING_WIZARD_ID``
namespaces the wizard's session-state keys, ``ONBOARDING_EMAIL_HINTS`` toggles
the non-blocking email-shape hint on the profile step, and
``ONBOARDING_APP_TITLE`` is the page title of the Streamlit app.
"""

import logging
import os

from dotenv import load_dotenv

load_dotenv()


logger = logging.getLogger(__name__)

_TRUTHY_ENV_VALUES: tuple[str, ...] = ("1", "true", "yes", "on")
_LOG_LEVELS: tuple[str, ...] = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _is_truthy_flag(value: str | None) -> bool:
    """Return ``True`` when ``value`` matches a truthy environment token."""

    if value is None:
        return False
    return value.strip().lower() in _TRUTHY_ENV_VALUES


def _flag_env(name: str, *, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return _is_truthy_flag(raw)


def _normalise_log_level(value: str | None, *, default: str = "INFO") -> str:
    """Return an upper-case logging level name, falling back to ``default``."""

    if value is None:
        return default
    candidate = value.strip().upper()
    if candidate in _LOG_LEVELS:
        return candidate
    if candidate:
        logger.warning("Unknown log level '%s'; using %s", value, default)
    return default


LOG_LEVEL = _normalise_log_level(os.getenv("ONBOARDING_LOG_LEVEL"))
WIZARD_ID = (os.getenv("ONBOARDING_WIZARD_ID") or "").strip() or "onboarding"
EMAIL_HINTS_ENABLED = _flag_env("ONBOARDING_EMAIL_HINTS", default=True)
APP_TITLE = (os.getenv("ONBOARDING_APP_TITLE") or "").strip() or "Onboarding"


__all__ = [
    "APP_TITLE",
    "EMAIL_HINTS_ENABLED",
    "LOG_LEVEL",
    "WIZARD_ID",
]
