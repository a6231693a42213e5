import asyncio

import pytest

from ghrest.comment_style import MULTI_LINE_COMMENTS_PREVIEW
from ghrest.errors import MixedCommentStyleError
from ghrest.models import (
    DraftReviewComment,
    PullRequestComment,
    PullRequestReview,
    PullRequestReviewDismissalRequest,
    PullRequestReviewRequest,
)
from ghrest.pagination import ListOptions
from ghrest.services.executor import HttpxExecutor, Response
from ghrest.services.pull_reviews import PullRequestReviewsService


def _patch_execute(monkeypatch, body=b'{"id":1}'):
    captured = []

    async def fake_execute(self, descriptor):
        captured.append(descriptor)
        return Response(body=body, status=200, headers={})

    monkeypatch.setattr(HttpxExecutor, "execute", fake_execute, raising=True)
    return captured


def test_list_reviews(monkeypatch):
    captured = _patch_execute(monkeypatch, body=b'[{"id":1},{"id":2}]')

    reviews = asyncio.run(
        PullRequestReviewsService().list_reviews("o", "r", 1, ListOptions(page=2))
    )
    assert reviews == [PullRequestReview(id=1), PullRequestReview(id=2)]
    assert captured[0].path == "/repos/o/r/pulls/1/reviews"
    assert captured[0].query_string() == "page=2"


def test_get_and_delete_pending_review(monkeypatch):
    captured = _patch_execute(monkeypatch)
    svc = PullRequestReviewsService()

    assert asyncio.run(svc.get_review("o", "r", 1, 1)) == PullRequestReview(id=1)
    assert asyncio.run(svc.delete_pending_review("o", "r", 1, 1)) == PullRequestReview(id=1)
    assert [(d.method, d.path) for d in captured] == [
        ("GET", "/repos/o/r/pulls/1/reviews/1"),
        ("DELETE", "/repos/o/r/pulls/1/reviews/1"),
    ]


def test_list_review_comments(monkeypatch):
    captured = _patch_execute(monkeypatch, body=b'[{"id":1},{"id":2}]')

    comments = asyncio.run(PullRequestReviewsService().list_review_comments("o", "r", 1, 1))
    assert comments == [PullRequestComment(id=1), PullRequestComment(id=2)]
    assert captured[0].path == "/repos/o/r/pulls/1/reviews/1/comments"


def test_list_review_comments_empty_page(monkeypatch):
    _patch_execute(monkeypatch, body=b"[]")

    comments = asyncio.run(
        PullRequestReviewsService().list_review_comments("o", "r", 1, 1, ListOptions(page=2))
    )
    assert comments == []


def test_create_review_without_comments(monkeypatch):
    captured = _patch_execute(monkeypatch)
    review = PullRequestReviewRequest(commit_id="commit_id", body="b", event="APPROVE")

    got = asyncio.run(PullRequestReviewsService().create_review("o", "r", 1, review))
    assert got == PullRequestReview(id=1)
    req = captured[0]
    assert req.method == "POST"
    assert req.json_body == {"commit_id": "commit_id", "body": "b", "event": "APPROVE"}
    assert req.headers == ()


def test_create_review_with_line_comments_sends_preview(monkeypatch):
    captured = _patch_execute(monkeypatch)
    review = PullRequestReviewRequest(
        body="b",
        event="COMMENT",
        comments=[DraftReviewComment(path="a.py", body="x", side="RIGHT", line=3)],
    )

    asyncio.run(PullRequestReviewsService().create_review("o", "r", 1, review))
    req = captured[0]
    assert ("Accept", MULTI_LINE_COMMENTS_PREVIEW) in req.headers
    assert req.json_body["comments"] == [
        {"path": "a.py", "body": "x", "side": "RIGHT", "line": 3}
    ]


def test_create_review_with_mixed_comments_never_sends(monkeypatch):
    captured = _patch_execute(monkeypatch)
    review = PullRequestReviewRequest(
        comments=[
            DraftReviewComment(path="a.py", body="x", position=1),
            DraftReviewComment(path="a.py", body="y", side="RIGHT", line=3),
        ],
    )

    with pytest.raises(MixedCommentStyleError):
        asyncio.run(PullRequestReviewsService().create_review("o", "r", 1, review))
    assert captured == []


def test_update_review(monkeypatch):
    captured = _patch_execute(monkeypatch)

    got = asyncio.run(PullRequestReviewsService().update_review("o", "r", 1, 1, "updated_body"))
    assert got == PullRequestReview(id=1)
    assert captured[0].method == "PUT"
    assert captured[0].json_body == {"body": "updated_body"}


def test_submit_review(monkeypatch):
    captured = _patch_execute(monkeypatch)
    review = PullRequestReviewRequest(body="b", event="APPROVE")

    asyncio.run(PullRequestReviewsService().submit_review("o", "r", 1, 1, review))
    assert captured[0].method == "POST"
    assert captured[0].path == "/repos/o/r/pulls/1/reviews/1/events"
    assert captured[0].json_body == {"body": "b", "event": "APPROVE"}


def test_dismiss_review(monkeypatch):
    captured = _patch_execute(monkeypatch)

    asyncio.run(
        PullRequestReviewsService().dismiss_review(
            "o", "r", 1, 1, PullRequestReviewDismissalRequest(message="m")
        )
    )
    assert captured[0].method == "PUT"
    assert captured[0].path == "/repos/o/r/pulls/1/reviews/1/dismissals"
    assert captured[0].json_body == {"message": "m"}
