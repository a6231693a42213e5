from typing import List, Optional

from ghrest.models import IssueComment
from ghrest.pagination import IssueListCommentsOptions
from ghrest.services.base import BaseService, repo_path

REACTIONS_PREVIEW = "application/vnd.github.squirrel-girl-preview"


class IssuesService(BaseService):
    """Issue comments. Pull requests are issues too, so this covers PR conversation comments."""

    async def list_comments(
        self,
        owner: str,
        repo: str,
        number: int,
        options: Optional[IssueListCommentsOptions] = None,
    ) -> List[IssueComment]:
        """
        GET /repos/{owner}/{repo}/issues/{number}/comments
        With number == 0, lists comments across every issue in the repository.
        """
        if number == 0:
            path = f"{repo_path(owner, repo)}/issues/comments"
        else:
            path = f"{repo_path(owner, repo)}/issues/{number}/comments"
        return await self._list(IssueComment, path, options, accept=REACTIONS_PREVIEW)

    async def get_comment(self, owner: str, repo: str, comment_id: int) -> IssueComment:
        path = f"{repo_path(owner, repo)}/issues/comments/{comment_id}"
        return await self._one(IssueComment, "GET", path, accept=REACTIONS_PREVIEW)

    async def create_comment(
        self, owner: str, repo: str, number: int, comment: IssueComment
    ) -> IssueComment:
        path = f"{repo_path(owner, repo)}/issues/{number}/comments"
        return await self._one(IssueComment, "POST", path, body=comment)

    async def edit_comment(
        self, owner: str, repo: str, comment_id: int, comment: IssueComment
    ) -> IssueComment:
        # PATCH: only fields present on `comment` are sent
        path = f"{repo_path(owner, repo)}/issues/comments/{comment_id}"
        return await self._one(IssueComment, "PATCH", path, body=comment)

    async def delete_comment(self, owner: str, repo: str, comment_id: int) -> int:
        path = f"{repo_path(owner, repo)}/issues/comments/{comment_id}"
        resp = await self._send("DELETE", path)
        return resp.status
