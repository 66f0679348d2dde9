"""
Tracker page UI state.

Dependencies: job_tracker.models
System role: Per-browser state of the add/view page
"""

from dataclasses import dataclass, field
from enum import Enum

from job_tracker.models.job import JobRow


class Tab(str, Enum):
    ADD = "add"
    VIEW = "view"


class FetchState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"


class SubmitState(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"


@dataclass
class Banner:
    """Transient success/error message."""

    success: bool
    message: str
    expires_at: float

    def is_expired(self, now: float) -> bool:
        return now >= self.expires_at

    def remaining(self, now: float) -> float:
        return max(0.0, self.expires_at - now)


@dataclass
class TrackerState:
    """Everything the page remembers between requests of one browser."""

    tab: Tab = Tab.ADD
    fetch_state: FetchState = FetchState.IDLE
    submit_state: SubmitState = SubmitState.IDLE
    view_visited: bool = False
    form_values: dict[str, str] = field(default_factory=dict)
    form_errors: dict[str, str] = field(default_factory=dict)
    rows: list[JobRow] = field(default_factory=list)
    banner: Banner | None = None
    # Set by an action, consumed by the GET that follows its redirect
    render_pending: bool = False

    @property
    def is_submitting(self) -> bool:
        return self.submit_state is SubmitState.SUBMITTING

    @property
    def is_loading(self) -> bool:
        return self.fetch_state is FetchState.LOADING

    def clear_form(self) -> None:
        self.form_values = {}
        self.form_errors = {}

    def visible_banner(self, now: float) -> Banner | None:
        """The banner if still within its display window; expired ones are dropped."""
        if self.banner is not None and self.banner.is_expired(now):
            self.banner = None
        return self.banner
