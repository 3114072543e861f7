"""Sidebar navigation labels shared by the app shell and the pages."""

NAVIGATION_KEY = "navigation"

AUTHOR_SUBMISSIONS_PAGE = "📄 My Submissions"
SUBMIT_PAGE = "✍️ Submit Manuscript"
PUBLISHER_INBOX_PAGE = "📥 Submissions Inbox"

PAGES = [AUTHOR_SUBMISSIONS_PAGE, SUBMIT_PAGE, PUBLISHER_INBOX_PAGE]
