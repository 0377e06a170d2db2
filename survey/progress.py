"""Completion progress for the feedback survey."""

from __future__ import annotations

from typing import Mapping, Sequence

from survey.schema import REQUIRED_FIELDS
from survey.validation import has_answer


def compute_progress(
    response: Mapping[str, str | None],
    required_fields: Sequence[str] = REQUIRED_FIELDS,
) -> int:
    """Return the share of answered required fields as an integer percentage.

    Halves round up, so one answer out of eight reports ``13``. Optional
    fields never contribute.
    """

    total = len(required_fields)
    if total == 0:
        return 100
    answered = sum(1 for field_id in required_fields if has_answer(response.get(field_id)))
    return (200 * answered + total) // (2 * total)


__all__ = ["compute_progress"]
