"""Toast notifications.

Page operations never talk to Streamlit's toast API directly. They receive a
``notify`` callable and publish ``Toast`` values through it; the app wires
that callable to a queue kept in session state, which is flushed on the next
script run so toasts survive ``st.rerun()``.
"""

from dataclasses import dataclass
from typing import Callable

import streamlit as st

from manuscript_hub_common import get_logger

logger = get_logger(__name__)

TOAST_QUEUE_KEY = "pending_toasts"


@dataclass(frozen=True)
class Toast:
    """Transient notification."""

    title: str
    description: str
    variant: str = "default"

    @property
    def is_error(self) -> bool:
        return self.variant == "destructive"


Notifier = Callable[[Toast], None]


def error_toast(description: str, title: str = "Error") -> Toast:
    return Toast(title=title, description=description, variant="destructive")


def queue_toast(toast: Toast) -> None:
    """Publish a toast to be shown on the next flush."""
    st.session_state.setdefault(TOAST_QUEUE_KEY, []).append(toast)
    logger.debug("toast_queued", title=toast.title, variant=toast.variant)


def flush_toasts() -> int:
    """Show all queued toasts and empty the queue.

    Returns:
        Number of toasts shown
    """
    queued = st.session_state.get(TOAST_QUEUE_KEY) or []
    st.session_state[TOAST_QUEUE_KEY] = []
    for toast in queued:
        icon = "⚠️" if toast.is_error else "✅"
        st.toast(f"**{toast.title}**\n\n{toast.description}", icon=icon)
    return len(queued)
