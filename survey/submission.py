"""Submission lifecycle for the feedback survey.

The controller owns the ``idle -> submitting -> succeeded|failed -> idle``
state machine. It accepts one in-flight submission at a time, composes the
record with a timestamp taken at the moment of invocation, and reports the
outcome through the notify capability. Retrying after a failure is left to
the user.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import StrEnum
from typing import TYPE_CHECKING, Awaitable, Callable, Final, Literal, Mapping, Protocol

from models.survey import SurveyRecord
from survey.validation import is_response_submittable

if TYPE_CHECKING:
    from survey.session import SurveySession

logger = logging.getLogger(__name__)

NotificationKind = Literal["success", "error"]
SubmitFn = Callable[[Mapping[str, str]], Awaitable[object]]
Clock = Callable[[], datetime]

SUCCESS_TITLE: Final[str] = "Thank you for your feedback!"
SUCCESS_MESSAGE: Final[str] = (
    "Your responses have been saved and will help us improve future events."
)
FAILURE_TITLE: Final[str] = "Submission failed"
FAILURE_MESSAGE: Final[str] = "We couldn't save your responses. Please try again later."


class Notifier(Protocol):
    def __call__(self, kind: NotificationKind, title: str, message: str) -> None: ...


class SubmissionStatus(StrEnum):
    """Enumerate the submission lifecycle states."""

    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class SubmissionState:
    """Current lifecycle state; ``reason`` is only set for failures."""

    status: SubmissionStatus = SubmissionStatus.IDLE
    reason: str | None = None

    @property
    def is_submitting(self) -> bool:
        return self.status is SubmissionStatus.SUBMITTING


IDLE: Final[SubmissionState] = SubmissionState()


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _silent_notify(kind: NotificationKind, title: str, message: str) -> None:
    return None


class SubmissionController:
    """Validate, send and settle a single survey submission at a time."""

    def __init__(
        self,
        submit: SubmitFn,
        *,
        notify: Notifier | None = None,
        clock: Clock | None = None,
    ) -> None:
        self._submit = submit
        self._notify: Notifier = notify or _silent_notify
        self._clock: Clock = clock or _utc_now
        self._state: SubmissionState = IDLE
        self.last_outcome: SubmissionState | None = None

    @property
    def state(self) -> SubmissionState:
        return self._state

    def can_submit(self, session: "SurveySession") -> bool:
        """Return ``True`` when the guard for leaving ``idle`` holds."""

        return (
            self._state.status is SubmissionStatus.IDLE
            and session.navigation.is_last
            and is_response_submittable(session.response)
        )

    def _transition(self, state: SubmissionState) -> None:
        logger.debug("Submission state %s -> %s", self._state.status, state.status)
        self._state = state

    async def request_submit(self, session: "SurveySession") -> bool:
        """Send ``session``'s response when the guard holds.

        Returns ``True`` if a submission was attempted. Requests made while
        another submission is in flight, before the last section, or with
        unanswered required fields are ignored.
        """

        if self._state.is_submitting:
            logger.info("Ignoring submit request while a submission is in flight.")
            return False
        if not self.can_submit(session):
            logger.debug("Submit guard failed; staying idle.")
            return False

        # Entering ``submitting`` before the first await blocks duplicates.
        self._transition(SubmissionState(SubmissionStatus.SUBMITTING))
        outcome = SubmissionState(SubmissionStatus.FAILED, reason="submission interrupted")
        try:
            try:
                record = SurveyRecord.from_response(session.response, self._clock())
                await self._submit(record.to_row())
            except Exception as exc:
                reason = str(exc) or exc.__class__.__name__
                logger.warning("Survey submission failed: %s", reason, exc_info=True)
                outcome = SubmissionState(SubmissionStatus.FAILED, reason=reason)
                self._transition(outcome)
                self._safe_notify("error", FAILURE_TITLE, FAILURE_MESSAGE)
            else:
                logger.info("Survey submission stored.")
                outcome = SubmissionState(SubmissionStatus.SUCCEEDED)
                self._transition(outcome)
                session.clear_answers()
                self._safe_notify("success", SUCCESS_TITLE, SUCCESS_MESSAGE)
        finally:
            self.last_outcome = outcome
            self._transition(IDLE)
        return True

    def _safe_notify(self, kind: NotificationKind, title: str, message: str) -> None:
        try:
            self._notify(kind, title, message)
        except Exception:
            logger.warning("Survey notification %r could not be delivered.", kind, exc_info=True)

    def reset(self) -> None:
        """Return to ``idle`` and forget the last outcome."""

        self._state = IDLE
        self.last_outcome = None


__all__ = [
    "FAILURE_MESSAGE",
    "FAILURE_TITLE",
    "NotificationKind",
    "Notifier",
    "SUCCESS_MESSAGE",
    "SUCCESS_TITLE",
    "SubmissionController",
    "SubmissionState",
    "SubmissionStatus",
    "SubmitFn",
]
