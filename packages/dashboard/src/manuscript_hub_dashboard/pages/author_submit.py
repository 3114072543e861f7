"""Manuscript Submission Page.

Collects manuscript metadata and a file, checks the required fields locally
and uploads the manuscript as multipart form data, either as a draft or for
publisher review.

The buttons only record the request from their callback; the run that
follows draws them disabled and performs the upload.
"""

import asyncio
from dataclasses import dataclass, field
from typing import Any, Optional

import streamlit as st

from manuscript_hub_common import APIError, get_logger, get_settings
from manuscript_hub_dashboard.api_client import ManuscriptHubClient
from manuscript_hub_dashboard.lifecycle import PageLifecycle
from manuscript_hub_dashboard.models import (
    ManuscriptFile,
    ManuscriptFormState,
    SubmissionStatus,
    parse_word_count,
)
from manuscript_hub_dashboard.notifications import Notifier, Toast, error_toast, queue_toast

logger = get_logger(__name__)

FORM_STATE_KEY = "submit_page"

CATEGORIES = [
    "Fiction",
    "Technology",
    "Self-Help",
    "Philosophy",
    "Design",
    "Business",
    "Science",
]

ACCEPTED_FILE_TYPES = ["pdf", "docx", "txt"]

MISSING_FIELDS_TOAST = Toast(
    title="Missing fields",
    description="Please fill in all required fields and upload a manuscript file.",
    variant="destructive",
)


def run_async(coro) -> Any:
    """Run async function in Streamlit context."""
    return asyncio.run(coro)


@dataclass
class SubmitPageState:
    form: ManuscriptFormState = field(default_factory=ManuscriptFormState)
    loading: bool = False
    # Set by a button callback: True for a draft, False for review
    requested_draft: Optional[bool] = None


def request_submit(state: SubmitPageState, is_draft: bool) -> None:
    """Button callback: lock both buttons and queue the upload for this run."""
    if state.loading:
        return
    state.loading = True
    state.requested_draft = is_draft


async def submit_manuscript(
    state: SubmitPageState,
    notify: Notifier,
    is_draft: bool = False,
    lifecycle: Optional[PageLifecycle] = None,
) -> bool:
    """Validate the form and upload it.

    Args:
        state: Page state holding the form
        notify: Publishes the outcome toast
        is_draft: Save with status "draft" instead of "pending"
        lifecycle: Page visit token; the form is not reset once cancelled

    Returns:
        True when the server accepted the upload
    """
    form = state.form
    state.loading = True
    client: Optional[ManuscriptHubClient] = None
    try:
        missing = form.missing_required_fields()
        if missing:
            logger.info("submission_blocked", missing_fields=missing)
            notify(MISSING_FIELDS_TOAST)
            return False

        status = SubmissionStatus.DRAFT if is_draft else SubmissionStatus.PENDING
        client = ManuscriptHubClient()
        await client.submit_manuscript(
            manuscript=form.manuscript_file,
            title=form.title,
            category=form.category,
            synopsis=form.synopsis,
            word_count=parse_word_count(form.word_count),
            status=status.value,
            isbn=form.isbn or None,
        )
        logger.info("manuscript_submitted", title=form.title, status=status.value)

        if is_draft:
            notify(Toast("Draft saved", "Your draft has been saved successfully."))
        else:
            notify(Toast("Manuscript submitted", "Your manuscript has been submitted for review."))

        if lifecycle is None or lifecycle.active:
            form.reset()
        return True
    except APIError as e:
        notify(error_toast(e.message))
        return False
    finally:
        state.loading = False
        if client is not None:
            await client.close()


def _render_file_section(form: ManuscriptFormState, max_upload_mb: int) -> None:
    st.subheader("Manuscript Files")
    uploaded = st.file_uploader(
        "Upload Manuscript *",
        type=ACCEPTED_FILE_TYPES,
        key=f"manuscript_{form.generation}_{form.file_generation}",
        help=f"Supported formats: PDF, DOCX, TXT (Max {max_upload_mb}MB)",
    )
    if uploaded is None:
        form.manuscript_file = None
        return

    form.manuscript_file = ManuscriptFile(
        name=uploaded.name,
        content=uploaded.getvalue(),
        content_type=uploaded.type or "application/octet-stream",
    )
    info, remove = st.columns([4, 1])
    with info:
        st.caption(f"📄 {form.manuscript_file.name} · {form.manuscript_file.size_mb}")
    with remove:
        st.button("Remove", on_click=form.remove_file, key=f"remove_{form.generation}")


def _render_details_section(form: ManuscriptFormState) -> None:
    gen = form.generation
    st.subheader("Book Details")
    form.title = st.text_input("Title *", placeholder="Enter book title", key=f"title_{gen}")
    form.isbn = st.text_input(
        "ISBN (Optional)", placeholder="978-3-16-148410-0", key=f"isbn_{gen}"
    )
    form.category = (
        st.selectbox(
            "Category *",
            CATEGORIES,
            index=None,
            placeholder="Select category",
            key=f"category_{gen}",
        )
        or ""
    )
    form.synopsis = st.text_area(
        "Synopsis *",
        height=150,
        placeholder="Provide a compelling synopsis of your book...",
        key=f"synopsis_{gen}",
    )
    form.word_count = st.text_input("Word Count", placeholder="75000", key=f"word_count_{gen}")

    st.subheader("Publisher Agreement")
    form.assign_copyright = st.checkbox(
        "Assign copyright to a Publisher",
        key=f"assign_copyright_{gen}",
        help="By checking this box, you agree to transfer copyright ownership to the "
        "accepting publisher as per the publishing contract terms.",
    )


def author_submit_page(
    notify: Notifier = queue_toast,
    lifecycle: Optional[PageLifecycle] = None,
) -> SubmitPageState:
    """Render the manuscript submission form."""
    st.header("✍️ Submit Manuscript")
    st.markdown("Upload your manuscript and provide details for publisher review")

    state: SubmitPageState = st.session_state.setdefault(FORM_STATE_KEY, SubmitPageState())
    form = state.form

    _render_file_section(form, get_settings().max_upload_mb)
    _render_details_section(form)

    col1, col2 = st.columns(2)
    with col1:
        st.button(
            "Submit for Review",
            type="primary",
            disabled=state.loading,
            key="submit_review",
            on_click=request_submit,
            args=(state, False),
        )
    with col2:
        st.button(
            "Save as Draft",
            disabled=state.loading,
            key="save_draft",
            on_click=request_submit,
            args=(state, True),
        )

    if state.requested_draft is not None:
        is_draft = state.requested_draft
        state.requested_draft = None
        with st.spinner("Saving draft..." if is_draft else "Submitting manuscript..."):
            run_async(submit_manuscript(state, notify, is_draft=is_draft, lifecycle=lifecycle))
        # Rerun so a reset form renders with fresh widgets and queued toasts show
        st.rerun()

    return state
