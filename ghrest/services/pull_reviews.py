from dataclasses import dataclass
from typing import List, Optional

from loguru import logger

from ghrest.comment_style import preview_media_type
from ghrest.models import (
    PullRequestComment,
    PullRequestReview,
    PullRequestReviewDismissalRequest,
    PullRequestReviewRequest,
)
from ghrest.optional import Opt
from ghrest.pagination import ListOptions
from ghrest.records import STR, Record, opt_field
from ghrest.services.base import BaseService, repo_path


@dataclass(frozen=True)
class _ReviewBodyUpdate(Record):
    body: Opt[str] = opt_field(STR)


class PullRequestReviewsService(BaseService):
    """
    Pull request reviews: list/get/delete, review comments, and the
    create/submit/dismiss flow.
    """

    def _reviews_path(self, owner: str, repo: str, number: int) -> str:
        return f"{repo_path(owner, repo)}/pulls/{number}/reviews"

    async def list_reviews(
        self, owner: str, repo: str, number: int, options: Optional[ListOptions] = None
    ) -> List[PullRequestReview]:
        path = self._reviews_path(owner, repo, number)
        return await self._list(PullRequestReview, path, options)

    async def get_review(
        self, owner: str, repo: str, number: int, review_id: int
    ) -> PullRequestReview:
        path = f"{self._reviews_path(owner, repo, number)}/{review_id}"
        return await self._one(PullRequestReview, "GET", path)

    async def delete_pending_review(
        self, owner: str, repo: str, number: int, review_id: int
    ) -> PullRequestReview:
        path = f"{self._reviews_path(owner, repo, number)}/{review_id}"
        return await self._one(PullRequestReview, "DELETE", path)

    async def list_review_comments(
        self,
        owner: str,
        repo: str,
        number: int,
        review_id: int,
        options: Optional[ListOptions] = None,
    ) -> List[PullRequestComment]:
        path = f"{self._reviews_path(owner, repo, number)}/{review_id}/comments"
        return await self._list(PullRequestComment, path, options)

    async def create_review(
        self, owner: str, repo: str, number: int, review: PullRequestReviewRequest
    ) -> PullRequestReview:
        """
        POST /repos/{owner}/{repo}/pulls/{number}/reviews

        The comment batch is checked before anything is sent: mixing
        position and side/line comments raises MixedCommentStyleError.
        Side/line batches go out with the multi-line comments preview.
        """
        accept = preview_media_type(review.comments.get([]))
        if accept:
            logger.debug(f"review on {owner}/{repo}#{number} uses side/line comments")
        path = self._reviews_path(owner, repo, number)
        return await self._one(PullRequestReview, "POST", path, body=review, accept=accept)

    async def update_review(
        self, owner: str, repo: str, number: int, review_id: int, body: str
    ) -> PullRequestReview:
        path = f"{self._reviews_path(owner, repo, number)}/{review_id}"
        return await self._one(
            PullRequestReview, "PUT", path, body=_ReviewBodyUpdate(body=body)
        )

    async def submit_review(
        self,
        owner: str,
        repo: str,
        number: int,
        review_id: int,
        review: PullRequestReviewRequest,
    ) -> PullRequestReview:
        path = f"{self._reviews_path(owner, repo, number)}/{review_id}/events"
        return await self._one(PullRequestReview, "POST", path, body=review)

    async def dismiss_review(
        self,
        owner: str,
        repo: str,
        number: int,
        review_id: int,
        dismissal: PullRequestReviewDismissalRequest,
    ) -> PullRequestReview:
        path = f"{self._reviews_path(owner, repo, number)}/{review_id}/dismissals"
        return await self._one(PullRequestReview, "PUT", path, body=dismissal)
