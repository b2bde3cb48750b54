"""Submission classification predicates.

Every predicate takes a submission and the reviewer's display name ``me``.
Author names are compared literally.
"""

from __future__ import annotations

from csc_teacher_helper.models import SubmissionRecord


def has_comment_by(submission: SubmissionRecord, me: str) -> bool:
    return any(comment.author == me for comment in submission.comments)


def last_comment_by(submission: SubmissionRecord, me: str) -> bool:
    if not submission.comments:
        return False
    return submission.comments[-1].author == me


def need_my_reaction(submission: SubmissionRecord, me: str) -> bool:
    """Reviewer took part, but somebody else wrote last."""
    return has_comment_by(submission, me) and not last_comment_by(submission, me)


def need_student_reaction(submission: SubmissionRecord, me: str) -> bool:
    """Reviewer wrote last and nothing is graded yet."""
    return (
        has_comment_by(submission, me)
        and last_comment_by(submission, me)
        and submission.score == 0
    )


def need_student_solution(submission: SubmissionRecord, me: str) -> bool:
    """No discussion at all."""
    return len(submission.comments) == 0


def need_teacher_assignment(submission: SubmissionRecord, me: str) -> bool:
    """Only one person has ever commented."""
    return len({comment.author for comment in submission.comments}) == 1


def students_with_grade(submission: SubmissionRecord, me: str) -> bool:
    return has_comment_by(submission, me) and submission.score > 0
