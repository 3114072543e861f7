"""Author Submissions Page.

Lists the author's manuscripts with a status badge per submission and links
to the submission form.
"""

import asyncio
from dataclasses import dataclass, field
from typing import Any, Optional

import streamlit as st

from manuscript_hub_common import APIError, get_logger
from manuscript_hub_dashboard.api_client import LIST_SUBMISSIONS_FALLBACK, ManuscriptHubClient
from manuscript_hub_dashboard.lifecycle import PageLifecycle
from manuscript_hub_dashboard.models import Submission, format_submitted_date, parse_submissions
from manuscript_hub_dashboard.navigation import NAVIGATION_KEY, SUBMIT_PAGE
from manuscript_hub_dashboard.notifications import Notifier, error_toast, queue_toast

logger = get_logger(__name__)


STATUS_BADGE_VARIANTS = {
    "accepted": "default",
    "pending": "secondary",
    "rejected": "destructive",
}

# Streamlit badge colors for each variant
BADGE_COLORS = {
    "default": "blue",
    "secondary": "gray",
    "destructive": "red",
}


def run_async(coro) -> Any:
    """Run async function in Streamlit context."""
    return asyncio.run(coro)


def get_status_variant(status: str) -> str:
    """Badge variant for a submission status, ``secondary`` when unknown."""
    return STATUS_BADGE_VARIANTS.get(status, "secondary")


@dataclass
class SubmissionListState:
    submissions: list[Submission] = field(default_factory=list)
    loading: bool = True


async def load_submissions(
    state: SubmissionListState,
    notify: Notifier,
    lifecycle: Optional[PageLifecycle] = None,
) -> None:
    """Fetch submissions into ``state``.

    On failure a destructive toast is published and the list stays empty.
    A body that does not parse as a submission list counts as a failed fetch.
    Nothing is written once ``lifecycle`` has been cancelled.
    """
    client = ManuscriptHubClient()
    state.loading = True
    try:
        submissions = parse_submissions(await client.list_submissions())
        if lifecycle is None or lifecycle.active:
            state.submissions = submissions
            logger.info("submissions_loaded", count=len(submissions))
    except APIError as e:
        if lifecycle is None or lifecycle.active:
            notify(error_toast(e.message))
    except ValueError as e:
        logger.warning("submissions_unparsable", error=str(e))
        if lifecycle is None or lifecycle.active:
            notify(error_toast(LIST_SUBMISSIONS_FALLBACK))
    finally:
        state.loading = False
        await client.close()


def _go_to_submit_form() -> None:
    st.session_state[NAVIGATION_KEY] = SUBMIT_PAGE


def _render_submission(submission: Submission) -> None:
    variant = get_status_variant(submission.status)
    with st.container(border=True):
        header, badge = st.columns([4, 1])
        with header:
            st.subheader(submission.title)
            st.caption(
                f"{submission.category} • Submitted {format_submitted_date(submission.created_at)}"
            )
        with badge:
            st.badge(submission.status, color=BADGE_COLORS[variant])
        st.markdown("**Synopsis**")
        st.write(submission.synopsis)


def author_submissions_page(
    notify: Notifier = queue_toast,
    lifecycle: Optional[PageLifecycle] = None,
) -> SubmissionListState:
    """Render the author's submission list."""
    st.header("📄 My Submissions")
    st.markdown("Track the status of your manuscript submissions")
    st.button("New Submission", on_click=_go_to_submit_form, key="new_submission")

    state = SubmissionListState()
    with st.spinner("Loading submissions..."):
        run_async(load_submissions(state, notify, lifecycle))

    if not state.submissions:
        with st.container(border=True):
            st.info("No submissions yet")
            st.button(
                "Submit Your First Manuscript",
                on_click=_go_to_submit_form,
                key="first_submission",
            )
        return state

    for submission in state.submissions:
        _render_submission(submission)
    return state
