"""
In-memory store of tracker page states, one per browser.

Dependencies: None
System role: Presentation state holder
"""

from collections import OrderedDict
import logging
import secrets

from job_tracker.presentation.state import TrackerState

logger = logging.getLogger(__name__)


class TrackerSessionStore:
    """Bounded, least-recently-used map from session key to TrackerState."""

    def __init__(self, max_sessions: int = 500) -> None:
        self._max_sessions = max_sessions
        self._states: OrderedDict[str, TrackerState] = OrderedDict()

    def __len__(self) -> int:
        return len(self._states)

    def create(self) -> tuple[str, TrackerState]:
        """Start a fresh state under a new key."""
        key = secrets.token_urlsafe(16)
        state = TrackerState()
        self._states[key] = state
        while len(self._states) > self._max_sessions:
            evicted, _ = self._states.popitem(last=False)
            logger.debug("Evicted tracker session", extra={"session_key": evicted[:6]})
        return key, state

    def get(self, key: str) -> TrackerState | None:
        state = self._states.get(key)
        if state is not None:
            self._states.move_to_end(key)
        return state

    def discard(self, key: str) -> None:
        """Forget a state; unknown keys are ignored."""
        self._states.pop(key, None)

    def get_or_create(self, key: str | None) -> tuple[str, TrackerState]:
        """Resume the state for key, or start a fresh one if unknown."""
        if key:
            state = self.get(key)
            if state is not None:
                return key, state
        return self.create()
