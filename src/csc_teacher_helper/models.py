"""Project data models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Comment:
    """Submission comment."""

    author: str
    posted_at: str


@dataclass(frozen=True)
class SubmissionRecord:
    """One student's submission with its discussion thread."""

    permalink: str
    author: str
    title: str
    comments: tuple[Comment, ...] = ()
    score: int = 0

    @property
    def last_comment(self) -> Comment | None:
        return self.comments[-1] if self.comments else None

    def __str__(self) -> str:
        last = self.last_comment
        posted_at = last.posted_at if last is not None else "-"
        return f"{self.author} [{posted_at}] [score:{self.score}]: {self.permalink}"


@dataclass(frozen=True)
class AssignmentRecord:
    """Assignment listing."""

    assignment_id: str
    title: str
    submission_urls: tuple[str, ...] = ()
