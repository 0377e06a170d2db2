"""Section navigation state for the survey pages."""

from __future__ import annotations

import logging

from survey.schema import TOTAL_SECTIONS

logger = logging.getLogger(__name__)


class SectionNavigator:
    """Track the active 1-based section, clamped to ``[1, total_sections]``.

    Moving between sections never depends on the answers; only the final
    submission is validated.
    """

    def __init__(self, total_sections: int = TOTAL_SECTIONS) -> None:
        if total_sections < 1:
            raise ValueError("total_sections must be at least 1")
        self._total_sections = total_sections
        self._current = 1

    @property
    def current_section_index(self) -> int:
        return self._current

    @property
    def total_sections(self) -> int:
        return self._total_sections

    @property
    def is_first(self) -> bool:
        return self._current == 1

    @property
    def is_last(self) -> bool:
        return self._current == self._total_sections

    def advance(self) -> int:
        """Move to the next section; a no-op on the last one."""

        if self._current < self._total_sections:
            self._current += 1
            logger.debug("Advanced to section %s", self._current)
        return self._current

    def retreat(self) -> int:
        """Move to the previous section; a no-op on the first one."""

        if self._current > 1:
            self._current -= 1
            logger.debug("Went back to section %s", self._current)
        return self._current

    def reset(self) -> None:
        self._current = 1

    def __repr__(self) -> str:
        return f"SectionNavigator(current={self._current}, total={self._total_sections})"


__all__ = ["SectionNavigator"]
