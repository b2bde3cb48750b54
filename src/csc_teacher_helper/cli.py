"""CLI for csc-teacher-helper."""

from __future__ import annotations

import argparse
import logging
import sys

from rich.console import Console
from rich.markup import escape

from csc_teacher_helper._logging import setup_logging
from csc_teacher_helper.client import CscClient, NetworkError
from csc_teacher_helper.config import ConfigError, load_settings
from csc_teacher_helper.pages import AssignmentPage
from csc_teacher_helper.parser import ParseError
from csc_teacher_helper.reports import render_reports

console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="csc-teacher-helper",
        description="Sort assignment submissions into review buckets",
        add_help=False,
    )
    parser.add_argument("assignment", help="Assignment ID")
    return parser


def _run(assignment_id: str, client: CscClient, me: str) -> str:
    assignment = AssignmentPage(client, assignment_id)
    with err_console.status(f"[bold blue]Fetching assignment {assignment_id}..."):
        title = assignment.title
        submissions = assignment.submissions
    logger.debug("Assignment %s has %d submissions", assignment_id, len(submissions))

    with err_console.status(f"[bold blue]Fetching {len(submissions)} submissions..."):
        records = [submission.record for submission in submissions]

    return render_reports(title, records, me)


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings()
    except ConfigError as e:
        err_console.print(f"[bold red]Config error:[/bold red] {escape(str(e))}")
        sys.exit(1)

    setup_logging(level=settings.log_level, log_file=settings.log_file)

    try:
        with CscClient(settings.session_id) as client:
            output = _run(args.assignment, client, settings.me)
    except NetworkError as e:
        err_console.print(f"[bold red]Network error:[/bold red] {escape(str(e))}", highlight=False)
        sys.exit(1)
    except ParseError as e:
        err_console.print(f"[bold red]Parse error:[/bold red] {escape(str(e))}", highlight=False)
        sys.exit(1)

    console.print(output, markup=False, highlight=False, emoji=False, soft_wrap=True)


if __name__ == "__main__":
    main(sys.argv[1:])
