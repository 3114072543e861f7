"""Tests for submission and form models."""

from __future__ import annotations

from datetime import datetime

import pytest
from pydantic import ValidationError

from manuscript_hub_dashboard.models import (
    ManuscriptFile,
    ManuscriptFormState,
    Submission,
    SubmissionStatus,
    format_submitted_date,
    parse_submissions,
    parse_word_count,
)

pytestmark = pytest.mark.unit


def _filled_form() -> ManuscriptFormState:
    return ManuscriptFormState(
        title="The Lighthouse Keeper",
        isbn="978-3-16-148410-0",
        category="Fiction",
        synopsis="Letters from the future.",
        word_count="82000",
        assign_copyright=True,
        manuscript_file=ManuscriptFile(name="lighthouse.pdf", content=b"pdf"),
    )


class TestSubmission:
    def test_parse_list(self, sample_submissions):
        submissions = parse_submissions(sample_submissions)

        assert [s.id for s in submissions] == [1, 2, 3, 4]
        assert submissions[0].author_name == "Ada Moreno"
        assert submissions[1].author_name is None
        assert submissions[1].word_count is None

    def test_parse_wrapped_list(self, sample_submissions):
        submissions = parse_submissions({"submissions": sample_submissions[:1]})

        assert len(submissions) == 1

    def test_parse_empty(self):
        assert parse_submissions(None) == []
        assert parse_submissions([]) == []

    def test_null_text_fields_become_empty(self):
        submission = Submission.model_validate(
            {"id": 1, "title": "T", "status": "pending", "category": None, "synopsis": None}
        )

        assert submission.category == ""
        assert submission.synopsis == ""

    @pytest.mark.parametrize("payload", ["oops", 42, {"submissions": {"id": 1}}])
    def test_non_list_body_raises(self, payload):
        with pytest.raises(ValueError):
            parse_submissions(payload)

    def test_extra_fields_ignored(self):
        submission = Submission.model_validate(
            {"id": 1, "title": "T", "status": "pending", "publisher_notes": "x"}
        )

        assert not hasattr(submission, "publisher_notes")

    def test_unknown_status_kept_verbatim(self):
        """The server's status is displayed, never inferred."""
        submission = Submission.model_validate({"id": 1, "title": "T", "status": "archived"})

        assert submission.status == "archived"

    def test_missing_required_field_raises(self):
        with pytest.raises(ValidationError):
            Submission.model_validate({"title": "No id", "status": "pending"})

    def test_status_enum_values(self):
        assert [s.value for s in SubmissionStatus] == ["draft", "pending", "accepted", "rejected"]


class TestFormatSubmittedDate:
    def test_iso_string(self):
        assert format_submitted_date("2026-03-02T10:15:00Z") == "Mar 02, 2026"

    def test_datetime(self):
        assert format_submitted_date(datetime(2025, 12, 1)) == "Dec 01, 2025"

    def test_missing(self):
        assert format_submitted_date(None) == "N/A"

    def test_unparsable_returned_as_is(self):
        assert format_submitted_date("last week") == "last week"


class TestParseWordCount:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("75000", 75000),
            ("  1200 ", 1200),
            ("12abc", 12),
            ("", 0),
            ("abc", 0),
        ],
    )
    def test_leading_integer(self, raw, expected):
        assert parse_word_count(raw) == expected


class TestManuscriptFile:
    def test_size(self):
        manuscript = ManuscriptFile(name="a.txt", content=b"x" * 2048)

        assert manuscript.size == 2048

    def test_size_mb(self):
        manuscript = ManuscriptFile(name="a.pdf", content=b"x" * (3 * 1024 * 1024 // 2))

        assert manuscript.size_mb == "1.50 MB"


class TestManuscriptFormState:
    def test_new_form_is_empty(self):
        form = ManuscriptFormState()

        assert form.is_empty()
        assert form.missing_required_fields() == [
            "title",
            "category",
            "synopsis",
            "manuscript_file",
        ]

    def test_filled_form_has_no_missing_fields(self):
        assert _filled_form().missing_required_fields() == []

    @pytest.mark.parametrize("name", ["title", "category", "synopsis"])
    def test_each_required_text_field(self, name):
        form = _filled_form()
        setattr(form, name, "")

        assert form.missing_required_fields() == [name]

    def test_isbn_and_word_count_optional(self):
        form = _filled_form()
        form.isbn = ""
        form.word_count = ""

        assert form.missing_required_fields() == []

    def test_reset_clears_everything(self):
        form = _filled_form()

        form.reset()

        assert form.is_empty()
        assert form.manuscript_file is None
        assert form.assign_copyright is False

    def test_reset_bumps_generations(self):
        form = _filled_form()

        form.reset()

        assert form.generation == 1
        assert form.file_generation == 1

    def test_remove_file_keeps_other_fields(self):
        form = _filled_form()

        form.remove_file()

        assert form.manuscript_file is None
        assert form.title == "The Lighthouse Keeper"
        assert form.missing_required_fields() == ["manuscript_file"]
        assert form.generation == 0
