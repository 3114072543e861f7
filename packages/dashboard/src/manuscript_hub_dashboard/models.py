"""Models for manuscript submissions and the transient submission form.

Submissions are read/display copies of server records; the form state only
lives while the author is filling it in.
"""

import re
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SubmissionStatus(str, Enum):
    """Review status reported by the server."""

    DRAFT = "draft"
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class Submission(BaseModel):
    """Manuscript record with a review status."""

    model_config = ConfigDict(extra="ignore")

    id: int = Field(description="Submission ID")
    title: str = Field(description="Book title")
    category: str = Field(default="", description="Category, e.g. Fiction")
    synopsis: str = Field(default="", description="Author-provided synopsis")
    word_count: Optional[int] = Field(default=None, description="Declared word count")
    status: str = Field(description="draft, pending, accepted or rejected")
    file_path: Optional[str] = Field(default=None, description="Server-side manuscript path")
    created_at: Optional[Union[datetime, str]] = Field(
        default=None, description="Submission timestamp"
    )
    author_name: Optional[str] = Field(default=None, description="Author display name")

    @field_validator("title", "category", "synopsis", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


def parse_submissions(payload: Any) -> list[Submission]:
    """Convert a list-endpoint response body into Submission models.

    Accepts a bare JSON list or an object wrapping it under "submissions".

    Raises:
        ValueError: If the body is not a list or a record does not validate
            (pydantic.ValidationError is a ValueError)
    """
    if isinstance(payload, dict):
        payload = payload.get("submissions")
    if payload is None:
        return []
    if not isinstance(payload, list):
        raise ValueError(f"expected a list of submissions, got {type(payload).__name__}")
    return [Submission.model_validate(item) for item in payload]


def format_submitted_date(created_at: Optional[Union[datetime, str]]) -> str:
    """Format a submission timestamp as a calendar date."""
    if created_at is None:
        return "N/A"
    if isinstance(created_at, str):
        try:
            created_at = datetime.fromisoformat(created_at.replace("Z", "+00:00"))
        except ValueError:
            return created_at
    return created_at.strftime("%b %d, %Y")


@dataclass
class ManuscriptFile:
    """Manuscript file selected for upload."""

    name: str
    content: bytes
    content_type: str = "application/octet-stream"

    @property
    def size(self) -> int:
        return len(self.content)

    @property
    def size_mb(self) -> str:
        return f"{self.size / 1024 / 1024:.2f} MB"


def parse_word_count(raw: str) -> int:
    """Leading integer of the word-count field, 0 when there is none."""
    match = re.match(r"\s*([+-]?\d+)", raw or "")
    return int(match.group(1)) if match else 0


@dataclass
class ManuscriptFormState:
    """Client-side draft of a not-yet-submitted manuscript.

    ``generation`` changes on every reset, and ``file_generation`` whenever
    the file is dropped, so that the page can hand fresh widget keys to
    Streamlit.
    """

    title: str = ""
    isbn: str = ""
    category: str = ""
    synopsis: str = ""
    word_count: str = ""
    assign_copyright: bool = False
    manuscript_file: Optional[ManuscriptFile] = None
    generation: int = field(default=0, compare=False)
    file_generation: int = field(default=0, compare=False)

    def remove_file(self) -> None:
        self.manuscript_file = None
        self.file_generation += 1

    def missing_required_fields(self) -> list[str]:
        """Names of required fields that are still empty."""
        missing = [
            name
            for name in ("title", "category", "synopsis")
            if not getattr(self, name)
        ]
        if self.manuscript_file is None:
            missing.append("manuscript_file")
        return missing

    def reset(self) -> None:
        """Return every field to its initial empty value and drop the file."""
        self.title = ""
        self.isbn = ""
        self.category = ""
        self.synopsis = ""
        self.word_count = ""
        self.assign_copyright = False
        self.generation += 1
        self.remove_file()

    def is_empty(self) -> bool:
        return self == ManuscriptFormState()
