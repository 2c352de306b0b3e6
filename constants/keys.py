class UIKeys:
    """Keys for UI widgets in ``st.session_state``."""

    ROLE_RADIO = "ui.role_radio"
    SETUP_RESOURCES = "ui.setup_resources"
    RESOURCE_PREFIX = "ui.resource."
    BACK_BUTTON = "ui.nav.back"
    NEXT_BUTTON = "ui.nav.next"
    SUBMIT_BUTTON = "ui.nav.submit"
    RESTART_BUTTON = "ui.nav.restart"


class StateKeys:
    """Keys for data stored in ``st.session_state``."""

    SESSION_ID = "session_id"
    LAST_SUBMISSION = "data.last_submission"
