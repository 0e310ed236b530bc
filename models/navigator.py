"""
Navigator models - state and results of the hands-free step navigator.

Plain dataclasses so any UI layer can hold and observe them.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional


class NavigatorStatus(str, Enum):
    """Lifecycle states of a guided cooking session."""
    STOPPED = "stopped"
    LISTENING = "listening"
    PAUSED = "paused"


class Command(str, Enum):
    """Voice commands the navigator understands."""
    NEXT = "next"
    REPEAT = "repeat"
    BACK = "back"
    PAUSE = "pause"
    RESUME = "resume"
    GO_TO_STEP = "go_to_step"
    STOP = "stop"
    NONE = "none"


class CommandOutcome(str, Enum):
    """What handling a transcript did to the session."""
    ADVANCED = "advanced"
    REPEATED = "repeated"
    WENT_BACK = "went_back"
    PAUSED = "paused"
    RESUMED = "resumed"
    JUMPED = "jumped"
    FINISHED = "finished"           # "next" on the last step
    STOPPED = "stopped"             # "stop" / "exit"
    OUT_OF_RANGE = "out_of_range"   # back from step 1, jump to a missing step
    SUPPRESSED = "suppressed"       # anything but "resume" while paused
    IGNORED = "ignored"             # no keyword, or no session running


@dataclass
class NavigatorState:
    """Cursor and flags of a guided cooking session."""
    step_index: int = 0
    active: bool = False
    paused: bool = False
    last_message: str = ""
    hands_free: bool = False

    @property
    def status(self) -> NavigatorStatus:
        if not self.active:
            return NavigatorStatus.STOPPED
        if self.paused:
            return NavigatorStatus.PAUSED
        return NavigatorStatus.LISTENING

    def copy(self) -> "NavigatorState":
        return replace(self)


@dataclass
class CommandResult:
    """Outcome of one transcript: the new state and what was said, if anything."""
    command: Command
    outcome: CommandOutcome
    state: NavigatorState
    message: Optional[str] = None

    @property
    def session_ended(self) -> bool:
        return self.outcome in (CommandOutcome.FINISHED, CommandOutcome.STOPPED)
