"""Publisher Submissions Inbox Page.

Fetches every submission once per page visit and splits the list client-side
into Pending / Accepted / Rejected tabs. Pending submissions can be accepted
or rejected; each action is followed by one refetch of the list.

The inbox state lives in ``st.session_state`` for the length of a visit, so a
click recorded by a button callback is visible to the next script run: that
run draws the acted-upon row disabled, performs the update and refetch, then
reruns to show the result.
"""

import asyncio
from dataclasses import dataclass, field
from typing import Any, Optional

import streamlit as st

from manuscript_hub_common import APIError, get_logger
from manuscript_hub_dashboard.api_client import LIST_SUBMISSIONS_FALLBACK, ManuscriptHubClient
from manuscript_hub_dashboard.lifecycle import PageLifecycle
from manuscript_hub_dashboard.models import (
    Submission,
    SubmissionStatus,
    format_submitted_date,
    parse_submissions,
)
from manuscript_hub_dashboard.notifications import Notifier, Toast, error_toast, queue_toast

logger = get_logger(__name__)

INBOX_STATE_KEY = "publisher_inbox"

INBOX_TABS = (
    SubmissionStatus.PENDING.value,
    SubmissionStatus.ACCEPTED.value,
    SubmissionStatus.REJECTED.value,
)

REVIEW_ACTIONS = (SubmissionStatus.ACCEPTED.value, SubmissionStatus.REJECTED.value)


def run_async(coro) -> Any:
    """Run async function in Streamlit context."""
    return asyncio.run(coro)


def partition_by_status(submissions: list[Submission]) -> dict[str, list[Submission]]:
    """Split submissions into the inbox tabs by exact status match.

    Submissions whose status is not one of the tabs (drafts) are left out.
    """
    buckets: dict[str, list[Submission]] = {status: [] for status in INBOX_TABS}
    for submission in submissions:
        bucket = buckets.get(submission.status)
        if bucket is None:
            logger.debug(
                "submission_outside_inbox",
                submission_id=submission.id,
                status=submission.status,
            )
            continue
        bucket.append(submission)
    return buckets


def format_word_count(word_count: Optional[int]) -> str:
    return "N/A" if word_count is None else f"{word_count:,}"


@dataclass
class InboxState:
    submissions: list[Submission] = field(default_factory=list)
    loading: bool = True
    action_in_flight: Optional[int] = None
    # (submission_id, status) clicked on the previous run, not yet sent
    requested_review: Optional[tuple[int, str]] = None
    lifecycle: Optional[PageLifecycle] = field(default=None, repr=False, compare=False)

    @property
    def tabs(self) -> dict[str, list[Submission]]:
        return partition_by_status(self.submissions)


async def load_inbox(
    client: ManuscriptHubClient,
    state: InboxState,
    notify: Notifier,
    lifecycle: Optional[PageLifecycle] = None,
    status: Optional[str] = None,
) -> None:
    """Fetch submissions into ``state``.

    The inbox itself always loads unfiltered; ``status`` passes through to the
    server-side filter of the list endpoint. A body that does not parse as a
    submission list counts as a failed fetch.
    """
    try:
        submissions = parse_submissions(await client.list_submissions(status=status))
        if lifecycle is None or lifecycle.active:
            state.submissions = submissions
            logger.info("inbox_loaded", count=len(submissions), status_filter=status)
    except APIError as e:
        if lifecycle is None or lifecycle.active:
            notify(error_toast(e.message))
    except ValueError as e:
        logger.warning("inbox_unparsable", error=str(e))
        if lifecycle is None or lifecycle.active:
            notify(error_toast(LIST_SUBMISSIONS_FALLBACK))
    finally:
        state.loading = False


async def review_submission(
    client: ManuscriptHubClient,
    state: InboxState,
    notify: Notifier,
    submission_id: int,
    status: str,
    lifecycle: Optional[PageLifecycle] = None,
) -> bool:
    """Accept or reject one submission, then refetch the whole list.

    Only ``submission_id`` is marked in flight while the update runs. On
    failure a toast is published and the list is left untouched.

    Returns:
        True when the status update succeeded
    """
    if status not in REVIEW_ACTIONS:
        raise ValueError(f"status must be one of {REVIEW_ACTIONS}, got {status!r}")

    state.action_in_flight = submission_id
    try:
        await client.update_submission_status(submission_id, status)
        logger.info("submission_status_updated", submission_id=submission_id, status=status)
        notify(
            Toast(
                title="Submission accepted" if status == "accepted" else "Submission rejected",
                description=f"The manuscript has been {status}.",
            )
        )
        await load_inbox(client, state, notify, lifecycle)
        return True
    except APIError as e:
        notify(error_toast(e.message))
        return False
    finally:
        state.action_in_flight = None


async def _load(state: InboxState, notify: Notifier, lifecycle: Optional[PageLifecycle]) -> None:
    client = ManuscriptHubClient()
    try:
        await load_inbox(client, state, notify, lifecycle)
    finally:
        await client.close()


async def _review(
    state: InboxState,
    notify: Notifier,
    submission_id: int,
    status: str,
    lifecycle: Optional[PageLifecycle],
) -> bool:
    client = ManuscriptHubClient()
    try:
        return await review_submission(client, state, notify, submission_id, status, lifecycle)
    finally:
        await client.close()


def get_inbox_state(lifecycle: Optional[PageLifecycle]) -> InboxState:
    """Inbox state for the current visit; a new visit starts unloaded."""
    state: Optional[InboxState] = st.session_state.get(INBOX_STATE_KEY)
    if state is None or state.lifecycle is not lifecycle:
        state = InboxState(lifecycle=lifecycle)
        st.session_state[INBOX_STATE_KEY] = state
    return state


def request_review(state: InboxState, submission_id: int, status: str) -> None:
    """Button callback: mark the row in flight and queue the action for this run."""
    if state.action_in_flight is not None:
        return
    state.action_in_flight = submission_id
    state.requested_review = (submission_id, status)


def _render_card(submission: Submission, state: InboxState, pending: bool) -> None:
    with st.container(border=True):
        st.subheader(submission.title)
        st.caption(f"by {submission.author_name or 'Unknown Author'} • {submission.category}")

        if pending:
            col1, col2 = st.columns(2)
            col1.metric("Submitted", format_submitted_date(submission.created_at))
            col2.metric("Word Count", format_word_count(submission.word_count))

        st.markdown("**Synopsis**")
        st.write(submission.synopsis)

        if pending:
            in_flight = state.action_in_flight == submission.id
            accept_col, reject_col = st.columns(2)
            with accept_col:
                st.button(
                    "✓ Accept",
                    key=f"accept_{submission.id}",
                    type="primary",
                    disabled=in_flight,
                    on_click=request_review,
                    args=(state, submission.id, SubmissionStatus.ACCEPTED.value),
                )
            with reject_col:
                st.button(
                    "✗ Reject",
                    key=f"reject_{submission.id}",
                    disabled=in_flight,
                    on_click=request_review,
                    args=(state, submission.id, SubmissionStatus.REJECTED.value),
                )


def publisher_inbox_page(
    notify: Notifier = queue_toast,
    lifecycle: Optional[PageLifecycle] = None,
) -> InboxState:
    """Render the publisher submissions inbox."""
    st.header("📥 Submissions Inbox")
    st.markdown("Review and manage manuscript submissions from authors")

    state = get_inbox_state(lifecycle)
    if state.loading:
        with st.spinner("Loading submissions..."):
            run_async(_load(state, notify, lifecycle))

    buckets = state.tabs
    labels = [f"{status.capitalize()} ({len(buckets[status])})" for status in INBOX_TABS]

    for tab, status in zip(st.tabs(labels), INBOX_TABS):
        with tab:
            if not buckets[status]:
                st.info(f"No {status} submissions")
                continue
            for submission in buckets[status]:
                _render_card(submission, state, pending=status == "pending")

    if state.requested_review is not None:
        submission_id, action = state.requested_review
        state.requested_review = None
        with st.spinner("Updating submission..."):
            run_async(_review(state, notify, submission_id, action, lifecycle))
        # The refetch already updated the session state; rerun only redraws
        st.rerun()

    return state
