from typing import Dict, Mapping, NamedTuple, Optional, Protocol

import httpx
from loguru import logger

from ghrest.pagination import RequestDescriptor
from ghrest.settings import settings


class Response(NamedTuple):
    body: bytes
    status: int
    headers: Mapping[str, str]


class RequestExecutor(Protocol):
    """What services need from a transport: send one descriptor, return the raw response."""

    async def execute(self, descriptor: RequestDescriptor) -> Response:
        ...


class HttpxExecutor:
    """
    Sends RequestDescriptors to the GitHub REST API.

    Non-success statuses surface as httpx.HTTPStatusError; nothing here
    retries or interprets them.
    """

    def __init__(
        self,
        token: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.token = settings.github_token if token is None else token
        self.base_url = (base_url or settings.github_api_url).rstrip("/")
        self.timeout = settings.request_timeout if timeout is None else timeout
        self.transport = transport

    def _headers(self) -> Dict[str, str]:
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": settings.github_api_version,
            "User-Agent": settings.user_agent,
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    async def execute(self, descriptor: RequestDescriptor) -> Response:
        url = f"{self.base_url}/{descriptor.path.lstrip('/')}"
        headers = self._headers()
        headers.update(dict(descriptor.headers))

        async with httpx.AsyncClient(
            timeout=self.timeout, transport=self.transport
        ) as client:
            r = await client.request(
                descriptor.method,
                url,
                params=list(descriptor.query) or None,
                headers=headers,
                json=descriptor.json_body,
            )
            logger.bind(query=descriptor.query_string()).debug(
                f"{descriptor.method} {descriptor.path} -> {r.status_code}"
            )
            r.raise_for_status()
            return Response(body=r.content, status=r.status_code, headers=dict(r.headers))
