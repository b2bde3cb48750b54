"""Lazily fetched assignment and submission pages."""

from __future__ import annotations

from functools import cached_property

from csc_teacher_helper.client import CscClient
from csc_teacher_helper.models import AssignmentRecord, Comment, SubmissionRecord
from csc_teacher_helper.parser import parse_assignment_page, parse_submission_page


class SubmissionPage:
    """Submission fetched and parsed on first field access."""

    def __init__(self, client: CscClient, url: str) -> None:
        self._client = client
        self.permalink = url

    @cached_property
    def record(self) -> SubmissionRecord:
        html = self._client.fetch_submission_page(self.permalink)
        return parse_submission_page(html, self.permalink)

    @property
    def author(self) -> str:
        return self.record.author

    @property
    def title(self) -> str:
        return self.record.title

    @property
    def comments(self) -> tuple[Comment, ...]:
        return self.record.comments

    @property
    def score(self) -> int:
        return self.record.score

    def __str__(self) -> str:
        return str(self.record)


class AssignmentPage:
    """Assignment listing fetched and parsed on first field access."""

    def __init__(self, client: CscClient, assignment_id: str) -> None:
        self._client = client
        self.assignment_id = assignment_id

    @cached_property
    def record(self) -> AssignmentRecord:
        html = self._client.fetch_assignment_page(self.assignment_id)
        return parse_assignment_page(html, self.assignment_id)

    @property
    def title(self) -> str:
        return self.record.title

    @cached_property
    def submissions(self) -> list[SubmissionPage]:
        """Submission pages in listing order, duplicates kept."""
        return [SubmissionPage(self._client, url) for url in self.record.submission_urls]
