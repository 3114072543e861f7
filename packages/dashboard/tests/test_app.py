"""Tests for the dashboard entry point: navigation, lifecycle handover and toasts."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from manuscript_hub_dashboard.lifecycle import LIFECYCLE_KEY
from manuscript_hub_dashboard.navigation import (
    AUTHOR_SUBMISSIONS_PAGE,
    PUBLISHER_INBOX_PAGE,
    SUBMIT_PAGE,
)
from manuscript_hub_dashboard.notifications import TOAST_QUEUE_KEY, error_toast

pytestmark = pytest.mark.unit

PAGE_FUNCTIONS = {
    AUTHOR_SUBMISSIONS_PAGE: "manuscript_hub_dashboard.pages.author_submissions.author_submissions_page",
    SUBMIT_PAGE: "manuscript_hub_dashboard.pages.author_submit.author_submit_page",
    PUBLISHER_INBOX_PAGE: "manuscript_hub_dashboard.pages.publisher_inbox.publisher_inbox_page",
}


def _make_mock_st(page, session_state=None):
    mock_st = MagicMock()
    mock_st.session_state = {} if session_state is None else session_state
    mock_st.sidebar.__enter__ = MagicMock(return_value=mock_st.sidebar)
    mock_st.sidebar.__exit__ = MagicMock(return_value=False)
    mock_st.radio.return_value = page
    return mock_st


def _run_app(mock_st):
    from manuscript_hub_dashboard import app

    page_mocks = {page: MagicMock() for page in PAGE_FUNCTIONS}
    with (
        patch("manuscript_hub_dashboard.app.st", mock_st),
        patch("manuscript_hub_dashboard.lifecycle.st", mock_st),
        patch("manuscript_hub_dashboard.notifications.st", mock_st),
        patch("manuscript_hub_dashboard.app.configure_logging"),
        patch(PAGE_FUNCTIONS[AUTHOR_SUBMISSIONS_PAGE], page_mocks[AUTHOR_SUBMISSIONS_PAGE]),
        patch(PAGE_FUNCTIONS[SUBMIT_PAGE], page_mocks[SUBMIT_PAGE]),
        patch(PAGE_FUNCTIONS[PUBLISHER_INBOX_PAGE], page_mocks[PUBLISHER_INBOX_PAGE]),
    ):
        app.main()
    return page_mocks


class TestNavigation:
    @pytest.mark.parametrize("page", list(PAGE_FUNCTIONS))
    def test_selected_page_rendered(self, page):
        mock_st = _make_mock_st(page)

        page_mocks = _run_app(mock_st)

        page_mocks[page].assert_called_once()
        for other, mock in page_mocks.items():
            if other != page:
                mock.assert_not_called()

    def test_page_receives_lifecycle_and_notifier(self):
        mock_st = _make_mock_st(PUBLISHER_INBOX_PAGE)

        page_mocks = _run_app(mock_st)

        kwargs = page_mocks[PUBLISHER_INBOX_PAGE].call_args.kwargs
        assert kwargs["lifecycle"] is mock_st.session_state[LIFECYCLE_KEY]
        assert kwargs["lifecycle"].active
        assert callable(kwargs["notify"])

    def test_navigation_cancels_previous_page(self):
        session_state = {}
        _run_app(_make_mock_st(PUBLISHER_INBOX_PAGE, session_state))
        inbox_lifecycle = session_state[LIFECYCLE_KEY]

        _run_app(_make_mock_st(SUBMIT_PAGE, session_state))

        assert not inbox_lifecycle.active
        assert session_state[LIFECYCLE_KEY].page == SUBMIT_PAGE


class TestToastFlush:
    def test_queued_toasts_shown(self):
        mock_st = _make_mock_st(
            AUTHOR_SUBMISSIONS_PAGE,
            {TOAST_QUEUE_KEY: [error_toast("server error")]},
        )

        _run_app(mock_st)

        mock_st.toast.assert_called_once()
        assert "server error" in mock_st.toast.call_args.args[0]
        assert mock_st.session_state[TOAST_QUEUE_KEY] == []

    def test_page_config_set(self):
        mock_st = _make_mock_st(AUTHOR_SUBMISSIONS_PAGE)

        _run_app(mock_st)

        assert mock_st.set_page_config.call_args.kwargs["page_title"] == "Manuscript Hub"
