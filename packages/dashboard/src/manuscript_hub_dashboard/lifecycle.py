"""Page lifecycle tokens.

A ``PageLifecycle`` lives for one visit of a page. When the user navigates
elsewhere the app cancels it, and loaders stop writing results into that
page's state.

Streamlit finishes (or stops) a session's script run before the next run
calls ``enter_page``, so a load started by a run never outlives that run and
the ``active`` checks in the loaders do not fire during a normal load; the
runtime already prevents those late writes. The token matters across runs:
state kept in ``st.session_state`` is tied to the token that created it, so a
new visit starts from fresh state instead of the previous visit's.
"""

from typing import Optional

import streamlit as st

from manuscript_hub_common import get_logger

logger = get_logger(__name__)

LIFECYCLE_KEY = "page_lifecycle"


class PageLifecycle:
    """Cancellation token tied to one visit of a page."""

    def __init__(self, page: str):
        self.page = page
        self._cancelled = False

    @property
    def active(self) -> bool:
        return not self._cancelled

    def cancel(self) -> None:
        if not self._cancelled:
            self._cancelled = True
            logger.debug("page_lifecycle_cancelled", page=self.page)

    def __repr__(self) -> str:
        state = "active" if self.active else "cancelled"
        return f"PageLifecycle(page={self.page!r}, {state})"


def enter_page(page: str) -> PageLifecycle:
    """Return the lifecycle for ``page``, cancelling the previous page's.

    Staying on the same page across reruns keeps the same token.
    """
    current: Optional[PageLifecycle] = st.session_state.get(LIFECYCLE_KEY)
    if current is not None and current.page == page and current.active:
        return current
    if current is not None:
        current.cancel()
    lifecycle = PageLifecycle(page)
    st.session_state[LIFECYCLE_KEY] = lifecycle
    return lifecycle
