"""Mutable application state shared by the agent's event handlers."""

import logging
from dataclasses import dataclass
from enum import IntEnum

logger = logging.getLogger(__name__)


class QuitStatus(IntEnum):
    """Pause flag toggled from the keyboard."""

    RUNNING = 0
    PAUSED = 1


@dataclass
class AgentState:
    """State owned by a single NavigatorAgent.

    ``quit_status`` is written by the ``q`` and ``c`` keys. Navigation does
    not consult it; the only reader is the log line emitted on change.
    """

    quit_status: QuitStatus = QuitStatus.RUNNING

    def set_quit_status(self, status: QuitStatus) -> None:
        if status != self.quit_status:
            logger.info(f"Quit status: {self.quit_status.name} -> {status.name}")
        self.quit_status = status
