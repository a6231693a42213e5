from typing import List, Optional, Type, TypeVar
from urllib.parse import quote

from ghrest.pagination import RequestDescriptor, apply, decode_list
from ghrest.records import Record, decode_json, encode
from ghrest.services.executor import HttpxExecutor, RequestExecutor, Response

R = TypeVar("R")


def repo_path(owner: str, repo: str) -> str:
    return f"/repos/{quote(owner, safe='')}/{quote(repo, safe='')}"


class BaseService:
    """Shared plumbing: build a descriptor, run it, decode the body."""

    def __init__(self, executor: Optional[RequestExecutor] = None):
        self.executor = executor or HttpxExecutor()

    async def _list(
        self,
        record_cls: Type[R],
        path: str,
        options: Optional[Record] = None,
        accept: Optional[str] = None,
    ) -> List[R]:
        req = apply(RequestDescriptor("GET", path), options)
        if accept:
            req = req.with_header("Accept", accept)
        resp = await self.executor.execute(req)
        return decode_list(record_cls, resp.body)

    async def _one(
        self,
        record_cls: Type[R],
        method: str,
        path: str,
        body: Optional[Record] = None,
        accept: Optional[str] = None,
    ) -> R:
        req = RequestDescriptor(
            method, path, json_body=encode(body) if body is not None else None
        )
        if accept:
            req = req.with_header("Accept", accept)
        resp = await self.executor.execute(req)
        return decode_json(record_cls, resp.body)

    async def _send(self, method: str, path: str) -> Response:
        return await self.executor.execute(RequestDescriptor(method, path))
