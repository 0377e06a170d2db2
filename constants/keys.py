class UIKeys:
    """Keys for UI widgets in ``st.session_state``."""

    FIELD_PREFIX = "ui.survey.field."
    PREVIOUS_BUTTON = "ui.survey.previous"
    NEXT_BUTTON = "ui.survey.next"
    SUBMIT_BUTTON = "ui.survey.submit"

    @classmethod
    def field(cls, field_id: str) -> str:
        return f"{cls.FIELD_PREFIX}{field_id}"


class StateKeys:
    """Keys for data stored in ``st.session_state``."""

    SESSION = "survey.session"
    SESSION_ID = "survey.session_id"
    SETTINGS = "survey.settings"
    NOTIFICATIONS = "survey.notifications"
