"""Session state utilities."""

from .ensure_state import clear_widget_state, ensure_state, get_wizard_store, reset_state

__all__ = ["clear_widget_state", "ensure_state", "get_wizard_store", "reset_state"]
