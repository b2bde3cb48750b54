"""Parsers for compscicenter teaching pages."""

from __future__ import annotations

import logging
import re

from bs4 import BeautifulSoup, Tag

from csc_teacher_helper.client import ASSIGNMENTS_URL
from csc_teacher_helper.models import AssignmentRecord, Comment, SubmissionRecord

logger = logging.getLogger(__name__)

# Submission page: <h2>Student Name <small>Problem title</small></h2>
SUBMISSION_HEADING = (
    "#student-submission-comments.container div.row div.col-xs-12.h2-and-buttons h2"
)
SUBMISSION_TITLE = (
    "div#student-submission-comments.container div.row"
    " div.col-xs-12.h2-and-buttons h2 small"
)
# One block per comment, oldest first.
COMMENT_BLOCK = "div.csc-well.assignment-comment"
COMMENT_AUTHOR = "h5.assignment"
COMMENT_POSTED_AT = "div.metainfo-holder span.metainfo.pull-right"
GRADE_INPUT = "input#id_score.input-grade.numberinput.form-control"

# Assignment page: course/assignment picker with the current one selected.
ASSIGNMENT_TITLE = "option[selected]"
SUBMISSION_LINK_PREFIX = f"{ASSIGNMENTS_URL}/submissions"

_SCORE_RE = re.compile(r"[+-]?[0-9]+")
_SCORE_MAX = 2**31 - 1


class ParseError(Exception):
    """Page did not have the expected structure."""


def _text(tag: Tag | None) -> str:
    """Element text with whitespace runs collapsed."""
    if tag is None:
        return ""
    return " ".join(tag.get_text().split())


def _select_required(soup: BeautifulSoup, selector: str, page: str) -> Tag:
    tag = soup.select_one(selector)
    if tag is None:
        raise ParseError(f"{page}: no element matches {selector!r}")
    return tag


def parse_submission_page(html: str, permalink: str) -> SubmissionRecord:
    """Parse submission page into ``SubmissionRecord``."""
    logger.debug("Parsing submission page %s", permalink)
    soup = BeautifulSoup(html, "lxml")

    title = _text(_select_required(soup, SUBMISSION_TITLE, permalink))
    heading = _text(_select_required(soup, SUBMISSION_HEADING, permalink))
    if title not in heading:
        raise ParseError(f"{permalink}: title {title!r} not found in heading {heading!r}")
    # The title is the trailing <small>; drop its last occurrence only.
    before, _, after = heading.rpartition(title) if title else (heading, "", "")
    author = " ".join(f"{before} {after}".split())

    comments = _parse_comments(soup)
    score = _parse_score(soup)
    logger.debug(
        "Parsed %s: author=%r, %d comments, score=%d", permalink, author, len(comments), score
    )

    return SubmissionRecord(
        permalink=permalink,
        author=author,
        title=title,
        comments=comments,
        score=score,
    )


def _parse_comments(soup: BeautifulSoup) -> tuple[Comment, ...]:
    return tuple(
        Comment(
            author=_text(block.select_one(COMMENT_AUTHOR)),
            posted_at=_text(block.select_one(COMMENT_POSTED_AT)),
        )
        for block in soup.select(COMMENT_BLOCK)
    )


def _parse_score(soup: BeautifulSoup) -> int:
    """Grade input value; missing or non-integer means ungraded."""
    grade_input = soup.select_one(GRADE_INPUT)
    if grade_input is None:
        return 0
    value = str(grade_input.get("value", ""))
    if _SCORE_RE.fullmatch(value) is None:
        return 0
    score = int(value)
    if score > _SCORE_MAX:
        return 0
    return max(score, 0)


def parse_assignment_page(html: str, assignment_id: str) -> AssignmentRecord:
    """Parse assignment listing into ``AssignmentRecord``."""
    logger.debug("Parsing assignment page %s", assignment_id)
    soup = BeautifulSoup(html, "lxml")

    title = _text(_select_required(soup, ASSIGNMENT_TITLE, f"assignment {assignment_id}"))
    submission_urls = tuple(
        href
        for href in (str(a["href"]) for a in soup.find_all("a", href=True))
        if href.startswith(SUBMISSION_LINK_PREFIX)
    )
    logger.debug(
        "Assignment %s (%s): %d submission links", assignment_id, title, len(submission_urls)
    )

    return AssignmentRecord(
        assignment_id=assignment_id,
        title=title,
        submission_urls=submission_urls,
    )
