"""Session state utilities."""

from .ensure_state import clear_field_widgets, ensure_state

__all__ = ["clear_field_widgets", "ensure_state"]
