"""csc_teacher_helper: Sort compscicenter assignment submissions for review."""

from csc_teacher_helper.client import CscClient, NetworkError, SessionExpiredError
from csc_teacher_helper.config import ConfigError, Settings, load_settings
from csc_teacher_helper.models import AssignmentRecord, Comment, SubmissionRecord
from csc_teacher_helper.pages import AssignmentPage, SubmissionPage
from csc_teacher_helper.parser import ParseError, parse_assignment_page, parse_submission_page
from csc_teacher_helper.reports import REPORTS, Report, build_report, render_reports

__all__ = [
    "REPORTS",
    "AssignmentPage",
    "AssignmentRecord",
    "Comment",
    "ConfigError",
    "CscClient",
    "NetworkError",
    "ParseError",
    "Report",
    "SessionExpiredError",
    "Settings",
    "SubmissionPage",
    "SubmissionRecord",
    "build_report",
    "load_settings",
    "parse_assignment_page",
    "parse_submission_page",
    "render_reports",
]
