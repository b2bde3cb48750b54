"""Plain-text report rendering."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from csc_teacher_helper import rules
from csc_teacher_helper.models import SubmissionRecord

SEPARATOR = "-" * 20

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Report:
    """Named submission filter."""

    header: str
    predicate: Callable[[SubmissionRecord, str], bool]


NEED_MY_REACTION = Report("Need my reaction:", rules.need_my_reaction)
NEED_STUDENT_REACTION = Report("Need student reaction:", rules.need_student_reaction)
NEED_TEACHER_ASSIGNMENT = Report("Need teacher assignment:", rules.need_teacher_assignment)
STUDENTS_WITH_GRADE = Report("Students with grade:", rules.students_with_grade)
NEED_STUDENT_SOLUTION = Report("Need student solution:", rules.need_student_solution)

# Output order.
REPORTS: tuple[Report, ...] = (
    NEED_MY_REACTION,
    NEED_STUDENT_REACTION,
    NEED_TEACHER_ASSIGNMENT,
    STUDENTS_WITH_GRADE,
    NEED_STUDENT_SOLUTION,
)


def select(
    report: Report, submissions: Sequence[SubmissionRecord], me: str
) -> list[SubmissionRecord]:
    """Return matching submissions in listing order."""
    return [s for s in submissions if report.predicate(s, me)]


def build_report(report: Report, submissions: Sequence[SubmissionRecord], me: str) -> str:
    """Render header followed by ``N. <submission>`` lines."""
    matched = select(report, submissions, me)
    logger.debug("%s %d of %d submissions", report.header, len(matched), len(submissions))
    lines = [f"{i}. {submission}" for i, submission in enumerate(matched, 1)]
    return "\n".join([report.header, *lines])


def render_reports(
    title: str,
    submissions: Sequence[SubmissionRecord],
    me: str,
    reports: Sequence[Report] = REPORTS,
) -> str:
    """Assignment title, then each report followed by a separator line."""
    blocks = [title]
    for report in reports:
        blocks.append(build_report(report, submissions, me))
        blocks.append(SEPARATOR)
    return "\n".join(blocks)
