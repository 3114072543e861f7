"""Pytest fixtures for dashboard tests.

Provides common fixtures for testing the dashboard package.
"""

from __future__ import annotations

import pytest

from manuscript_hub_common import get_settings


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    """Run every test against default settings, whatever the shell exports."""
    for var in ("API_URL", "API_TOKEN", "REQUEST_TIMEOUT", "MAX_UPLOAD_MB"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_submissions():
    """Submission list as returned by GET /publisher/submissions."""
    return [
        {
            "id": 1,
            "title": "The Lighthouse Keeper",
            "category": "Fiction",
            "synopsis": "A keeper on a remote island receives letters from the future.",
            "word_count": 82000,
            "status": "pending",
            "file_path": "uploads/lighthouse.pdf",
            "created_at": "2026-03-02T10:15:00Z",
            "author_name": "Ada Moreno",
        },
        {
            "id": 2,
            "title": "Designing Quiet Systems",
            "category": "Technology",
            "synopsis": "Operational calm for small engineering teams.",
            "word_count": None,
            "status": "pending",
            "file_path": "uploads/quiet.docx",
            "created_at": "2026-03-05T08:00:00Z",
        },
        {
            "id": 3,
            "title": "Small Habits, Long Years",
            "category": "Self-Help",
            "synopsis": "Compounding routines.",
            "word_count": 54000,
            "status": "accepted",
            "file_path": "uploads/habits.txt",
            "created_at": "2026-02-11T12:30:00Z",
            "author_name": "Jun Park",
        },
        {
            "id": 4,
            "title": "On Doubt",
            "category": "Philosophy",
            "synopsis": "Essays on certainty.",
            "word_count": 31000,
            "status": "rejected",
            "file_path": "uploads/doubt.pdf",
            "created_at": "2026-01-20T09:45:00Z",
            "author_name": "Sam Okafor",
        },
    ]
