from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from csc_teacher_helper.client import ASSIGNMENTS_URL, CscClient
from csc_teacher_helper.models import Comment, SubmissionRecord

ME = "Maria Teacher"


def submission_html(
    author: str,
    title: str,
    comments: list[tuple[str, str]] | None = None,
    score: str | None = None,
) -> str:
    blocks = "".join(
        f"""
        <div class="csc-well assignment-comment">
          <div class="metainfo-holder">
            <span class="metainfo pull-right">{posted_at}</span>
          </div>
          <h5 class="assignment">{comment_author}</h5>
          <div class="ubertext"><p>Some text</p></div>
        </div>"""
        for comment_author, posted_at in comments or []
    )
    grade = (
        ""
        if score is None
        else f'<input type="number" name="score" value="{score}" '
        f'class="input-grade numberinput form-control" id="id_score">'
    )
    return f"""<html><body>
    <div id="student-submission-comments" class="container">
      <div class="row">
        <div class="col-xs-12 h2-and-buttons">
          <h2>{author}
            <small>{title}</small>
          </h2>
        </div>
      </div>
      <div class="row"><div class="col-xs-9">{blocks}</div>
      <div class="col-xs-3"><form>{grade}</form></div></div>
    </div>
    </body></html>"""


def assignment_html(title: str, links: list[str]) -> str:
    anchors = "\n".join(f'<a href="{href}">link</a>' for href in links)
    return f"""<html><body>
    <a href="/static/app.css">css</a>
    <select name="assignment">
      <option value="1">Other assignment</option>
      <option value="42" selected>{title}</option>
    </select>
    <a href="https://my.compscicenter.ru/teaching/">Teaching</a>
    {anchors}
    </body></html>"""


def submission_url(n: int) -> str:
    return f"{ASSIGNMENTS_URL}/submissions/{n}/"


def make_record(
    comments: list[tuple[str, str]] | None = None,
    score: int = 0,
    author: str = "Ivan Student",
    permalink: str = "https://my.compscicenter.ru/teaching/assignments/submissions/1/",
) -> SubmissionRecord:
    return SubmissionRecord(
        permalink=permalink,
        author=author,
        title="Problem 1",
        comments=tuple(Comment(author=a, posted_at=t) for a, t in comments or []),
        score=score,
    )


class FakeSite:
    """In-memory pages served through ``httpx.MockTransport``."""

    def __init__(self, pages: dict[str, str] | None = None) -> None:
        self.pages: dict[str, str] = dict(pages or {})
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        html = self.pages.get(str(request.url))
        if html is None:
            return httpx.Response(404, text="not found")
        return httpx.Response(200, text=html)

    def client(self, session_id: str = "secret") -> CscClient:
        return CscClient(session_id, transport=httpx.MockTransport(self.handler))


@pytest.fixture
def fake_site() -> FakeSite:
    return FakeSite()


@pytest.fixture
def record_factory() -> Callable[..., SubmissionRecord]:
    return make_record
