"""Explicit survey session object passed through every operation."""

from __future__ import annotations

import logging
from typing import Mapping

from survey.navigation import SectionNavigator
from survey.progress import compute_progress
from survey.schema import FIELD_IDS, TOTAL_SECTIONS, empty_response, get_field
from survey.submission import Clock, Notifier, SubmissionController, SubmissionState, SubmitFn
from survey.validation import (
    field_errors,
    is_field_valid,
    is_response_submittable,
    sections_with_missing_fields,
)

logger = logging.getLogger(__name__)


class SurveySession:
    """Own the response, navigation and submission state of one participant.

    Every mutation recomputes progress and per-field validity before it
    returns, so readers never observe stale derived values.
    """

    def __init__(
        self,
        submit: SubmitFn,
        *,
        notify: Notifier | None = None,
        clock: Clock | None = None,
        total_sections: int = TOTAL_SECTIONS,
    ) -> None:
        self._response: dict[str, str] = empty_response()
        self.navigation = SectionNavigator(total_sections)
        self.controller = SubmissionController(submit, notify=notify, clock=clock)
        self.submit_attempted = False
        self._progress = 0
        self._validity: dict[str, bool] = {}
        self._recompute()

    # -- read surface -------------------------------------------------

    @property
    def response(self) -> Mapping[str, str]:
        return dict(self._response)

    @property
    def current_section_index(self) -> int:
        return self.navigation.current_section_index

    @property
    def submission_state(self) -> SubmissionState:
        return self.controller.state

    @property
    def progress(self) -> int:
        return self._progress

    @property
    def is_dirty(self) -> bool:
        """``True`` once any answer differs from its blank default."""

        return any(self._response.values())

    @property
    def can_submit(self) -> bool:
        return self.controller.can_submit(self)

    def field_value(self, field_id: str) -> str:
        get_field(field_id)
        return self._response[field_id]

    def field_valid(self, field_id: str) -> bool:
        get_field(field_id)
        return self._validity[field_id]

    def visible_errors(self) -> dict[str, str]:
        """Inline errors to render; empty until a submit has been attempted."""

        if not self.submit_attempted:
            return {}
        return field_errors(self._response)

    def incomplete_sections(self) -> list[int]:
        return sections_with_missing_fields(self._response)

    # -- write surface ------------------------------------------------

    def _recompute(self) -> None:
        self._progress = compute_progress(self._response)
        self._validity = {
            field_id: is_field_valid(field_id, self._response[field_id]) for field_id in FIELD_IDS
        }

    def set_field(self, field_id: str, value: str | None) -> None:
        """Store ``value`` for ``field_id``; ``None`` clears the answer."""

        get_field(field_id)
        self._response[field_id] = value or ""
        self._recompute()

    def advance(self) -> int:
        return self.navigation.advance()

    def retreat(self) -> int:
        return self.navigation.retreat()

    async def request_submit(self) -> bool:
        """Submit the response, or flag inline errors when it is incomplete."""

        attempted = await self.controller.request_submit(self)
        if (
            not attempted
            and not self.submission_state.is_submitting
            and not is_response_submittable(self._response)
        ):
            self.submit_attempted = True
        return attempted

    def clear_answers(self) -> None:
        """Blank every answer and go back to the first section."""

        self._response = empty_response()
        self.navigation.reset()
        self.submit_attempted = False
        self._recompute()
        logger.debug("Survey session cleared.")

    def reset(self) -> None:
        """Return every component to its initial state."""

        self.clear_answers()
        self.controller.reset()


__all__ = ["SurveySession"]
