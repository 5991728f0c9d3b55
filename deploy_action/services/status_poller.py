import logging
import time
from typing import Callable

from deploy_action import constants
from deploy_action.models.poll_state import PollPhase, PollState

logger = logging.getLogger(__name__)


def backoff_delay(state: PollState) -> int:
    """Seconds to wait before the next status check: 1, 2, 3, ..."""
    return state.attempt + 1


def next_state(state: PollState, status: str, max_attempts: int = constants.FALLBACK_MAX_ATTEMPTS,
               success_status: str = constants.FALLBACK_SUCCESS_STATUS) -> PollState:
    if state.is_terminal:
        return state
    attempt = state.attempt + 1
    if status == success_status:
        return PollState(PollPhase.ACTIVE, attempt, status)
    if attempt < max_attempts:
        return PollState(PollPhase.WAITING, attempt, status)
    return PollState(PollPhase.TIMED_OUT, attempt, status)


class StatusPoller:
    """Queries a deployment until it reports the success status or the attempt budget runs out."""

    def __init__(self, query_status: Callable[[str], str], sleep: Callable[[float], None] = time.sleep,
                 max_attempts: int = constants.FALLBACK_MAX_ATTEMPTS,
                 success_status: str = constants.FALLBACK_SUCCESS_STATUS):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.query_status = query_status
        self.sleep = sleep
        self.max_attempts = max_attempts
        self.success_status = success_status

    def step(self, state: PollState, location: str) -> PollState:
        delay = backoff_delay(state)
        logger.info(f"Waiting {delay} seconds - and then testing status")
        self.sleep(delay)
        status = self.query_status(location)
        logger.info(f"Status is {status}")
        return next_state(state, status, self.max_attempts, self.success_status)

    def poll(self, location: str) -> PollState:
        logger.info(f"Checking location {location} for latest status on deployment")
        state = PollState()
        while not state.is_terminal:
            state = self.step(state, location)
        if state.is_active:
            logger.info("Deployment is ACTIVE!")
        else:
            logger.error(f"Deployment still '{state.last_status}' after {state.attempt} status checks.")
        return state
