"""Keyboard input mode state machine.

NORMAL routes keys to navigation. The two editing modes route printable
keys into a shared buffer until the edit is committed or cancelled.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from esdash.constants.enums import InputMode

logger = logging.getLogger(__name__)


class InputModeError(Exception):
    """Raised on an invalid input mode transition."""


@dataclass(frozen=True)
class EditCommit:
    """Result of committing an edit."""

    mode: InputMode
    value: str


class InputModeMachine:
    """Tracks the current input mode and the edit buffer."""

    def __init__(self) -> None:
        self.mode = InputMode.NORMAL
        self.buffer = ""

    @property
    def is_editing(self) -> bool:
        return self.mode != InputMode.NORMAL

    def _start(self, mode: InputMode, seed: str) -> None:
        if self.mode != InputMode.NORMAL:
            raise InputModeError(
                f"Cannot start {mode.value} while in {self.mode.value}"
            )
        self.mode = mode
        self.buffer = seed

    def start_query_edit(self, committed: str) -> None:
        self._start(InputMode.EDITING_QUERY, committed)

    def start_filter_edit(self, current: str) -> None:
        self._start(InputMode.EDITING_FILTER, current)

    def insert(self, char: str) -> None:
        if self.is_editing:
            self.buffer += char

    def backspace(self) -> None:
        if self.is_editing:
            self.buffer = self.buffer[:-1]

    def cancel(self) -> None:
        self.mode = InputMode.NORMAL
        self.buffer = ""

    def commit(self) -> EditCommit:
        """Finish the edit and return the trimmed buffer.

        Raises:
            InputModeError: If no edit is in progress.
        """
        if not self.is_editing:
            raise InputModeError("No edit in progress")
        result = EditCommit(mode=self.mode, value=self.buffer.strip())
        self.cancel()
        logger.debug("Committed %s: %r", result.mode.value, result.value)
        return result
