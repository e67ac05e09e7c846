"""
Per-view lifecycle: loading → ready | error.

Each page activation gets a fresh ViewState and a token. Load results are handed
back with that token; if the user navigated away in the meantime the result is
dropped instead of being written into a view that is no longer active.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Any, Optional

logger = logging.getLogger(__name__)


class ViewStatus(enum.Enum):
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


@dataclass
class ViewState:
    view: str
    token: int
    status: ViewStatus = ViewStatus.LOADING
    data: Any = None
    error: Optional[str] = None

    @property
    def is_loading(self) -> bool:
        return self.status is ViewStatus.LOADING

    def _leave_loading(self, status: ViewStatus) -> None:
        if self.status is not ViewStatus.LOADING:
            raise RuntimeError(
                f"View {self.view!r} already left loading (status={self.status.value})"
            )
        self.status = status

    def resolve(self, data: Any) -> None:
        self._leave_loading(ViewStatus.READY)
        self.data = data

    def fail(self, message: str) -> None:
        self._leave_loading(ViewStatus.ERROR)
        self.error = message


@dataclass
class ViewSession:
    """Tracks which view is active. Lives in st.session_state."""
    current: Optional[ViewState] = None
    _activations: int = field(default=0, repr=False)

    def activate(self, view: str) -> ViewState:
        """Tear down whatever was active and start `view` in loading."""
        if self.current is not None:
            logger.debug("Deactivating view %s", self.current.view)
        self._activations += 1
        self.current = ViewState(view=view, token=self._activations)
        return self.current

    def deactivate(self) -> None:
        self.current = None

    def ensure_active(self, view: str) -> ViewState:
        """Return the active state for `view`, activating it if another view was showing."""
        if self.current is None or self.current.view != view:
            return self.activate(view)
        return self.current

    def is_current(self, token: int) -> bool:
        return self.current is not None and self.current.token == token

    def complete(self, token: int, data: Any = None, error: Optional[str] = None) -> bool:
        """
        Apply a load result to the view it was started for.
        Returns False (and changes nothing) when that activation is gone.
        """
        if not self.is_current(token):
            logger.debug("Discarding stale load result for activation %d", token)
            return False
        if error is not None:
            self.current.fail(error)
        else:
            self.current.resolve(data)
        return True
