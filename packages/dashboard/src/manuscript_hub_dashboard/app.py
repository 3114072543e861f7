"""Manuscript Hub Dashboard.

Main Streamlit application entry point. Run with:
    streamlit run packages/dashboard/src/manuscript_hub_dashboard/app.py

Requires the manuscript REST API to be reachable at API_URL
(default: http://localhost:5001/api).
"""

import streamlit as st

from manuscript_hub_common import configure_logging, get_logger, get_settings
from manuscript_hub_dashboard.lifecycle import enter_page
from manuscript_hub_dashboard.navigation import (
    AUTHOR_SUBMISSIONS_PAGE,
    NAVIGATION_KEY,
    PAGES,
    PUBLISHER_INBOX_PAGE,
    SUBMIT_PAGE,
)
from manuscript_hub_dashboard.notifications import flush_toasts, queue_toast

logger = get_logger(__name__)


def main():
    """Main dashboard entry point."""
    # Page config must be first Streamlit command
    st.set_page_config(
        page_title="Manuscript Hub",
        page_icon="📚",
        layout="wide",
        initial_sidebar_state="expanded",
    )
    configure_logging()

    st.title("📚 Manuscript Hub")

    with st.sidebar:
        st.header("Navigation")
        page = st.radio("Select View", PAGES, key=NAVIGATION_KEY)

        st.divider()
        st.caption(f"API: {get_settings().api_url}")

    lifecycle = enter_page(page)
    flush_toasts()
    logger.debug("page_rendered", page=page)

    if page == AUTHOR_SUBMISSIONS_PAGE:
        from manuscript_hub_dashboard.pages.author_submissions import author_submissions_page

        author_submissions_page(notify=queue_toast, lifecycle=lifecycle)
    elif page == SUBMIT_PAGE:
        from manuscript_hub_dashboard.pages.author_submit import author_submit_page

        author_submit_page(notify=queue_toast, lifecycle=lifecycle)
    elif page == PUBLISHER_INBOX_PAGE:
        from manuscript_hub_dashboard.pages.publisher_inbox import publisher_inbox_page

        publisher_inbox_page(notify=queue_toast, lifecycle=lifecycle)

    # Toasts published during this run (no rerun was triggered)
    flush_toasts()


if __name__ == "__main__":
    main()
