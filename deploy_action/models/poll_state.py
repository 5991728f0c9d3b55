from dataclasses import dataclass
from enum import Enum
from typing import Optional


class PollPhase(Enum):
    WAITING = "Waiting"
    ACTIVE = "Active"
    TIMED_OUT = "Timed Out"


@dataclass(frozen=True)
class PollState:
    phase: PollPhase = PollPhase.WAITING
    attempt: int = 0
    last_status: Optional[str] = None

    @property
    def is_terminal(self):
        return self.phase is not PollPhase.WAITING

    @property
    def is_active(self):
        return self.phase is PollPhase.ACTIVE
