from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, List, Optional, Tuple, Type, TypeVar, Union

import httpx

from ghrest.errors import InvalidOptionError
from ghrest.optional import Opt
from ghrest.records import INT, STR, TIMESTAMP, Record, decode_json_list, encode, opt_field

R = TypeVar("R")

LISTING_ROOT = "marketplace_listing"
STUBBED_SEGMENT = "stubbed"


@dataclass(frozen=True)
class RequestDescriptor:
    """Everything the executor needs to send one API request."""

    method: str
    path: str
    query: Tuple[Tuple[str, str], ...] = ()
    headers: Tuple[Tuple[str, str], ...] = ()
    json_body: Optional[Any] = None

    def with_query(self, params: List[Tuple[str, str]]) -> "RequestDescriptor":
        return replace(self, query=self.query + tuple(params))

    def with_header(self, name: str, value: str) -> "RequestDescriptor":
        kept = tuple((k, v) for k, v in self.headers if k.lower() != name.lower())
        return replace(self, headers=kept + ((name, value),))

    def query_string(self) -> str:
        return str(httpx.QueryParams(list(self.query)))


@dataclass(frozen=True)
class ListOptions(Record):
    """
    Page selection for list endpoints. Absent fields are left for the server
    to decide; nothing is defaulted here.
    """

    page: Opt[int] = opt_field(INT)
    per_page: Opt[int] = opt_field(INT)

    def __post_init__(self):
        super().__post_init__()
        for name in ("page", "per_page"):
            holder = getattr(self, name)
            if not holder.is_present():
                continue
            value = holder.value()
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise InvalidOptionError(f"{name} must be a positive integer, got {value!r}")


@dataclass(frozen=True)
class IssueListCommentsOptions(ListOptions):
    # "created" or "updated"
    sort: Opt[str] = opt_field(STR)
    # "asc" or "desc"
    direction: Opt[str] = opt_field(STR)
    since: Opt[datetime] = opt_field(TIMESTAMP)


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def apply(request: RequestDescriptor, options: Optional[Record]) -> RequestDescriptor:
    """
    Return a copy of `request` with one query parameter per present field of
    `options`. Absent fields produce no parameter at all.
    """
    if options is None:
        return request
    params = []
    for key, value in encode(options).items():
        if value is None:
            continue
        params.append((key, _query_value(value)))
    if not params:
        return request
    return request.with_query(params)


def resolve_path(base_path: str, stubbed: bool, root: str = LISTING_ROOT) -> str:
    """
    Map a listing path onto its stubbed variant when `stubbed` is set.

    The `stubbed` segment goes right after the listing root
    ("/marketplace_listing/plans" -> "/marketplace_listing/stubbed/plans").
    Paths without the root get it appended
    ("/user/marketplace_purchases" -> "/user/marketplace_purchases/stubbed").
    A path that is already stubbed is returned as is.
    """
    if not stubbed:
        return base_path

    leading = "/" if base_path.startswith("/") else ""
    segments = [s for s in base_path.strip("/").split("/") if s]

    if root in segments:
        at = segments.index(root) + 1
        if at < len(segments) and segments[at] == STUBBED_SEGMENT:
            return base_path
        segments.insert(at, STUBBED_SEGMENT)
    else:
        if segments and segments[-1] == STUBBED_SEGMENT:
            return base_path
        segments.append(STUBBED_SEGMENT)
    return leading + "/".join(segments)


def decode_list(record_cls: Type[R], raw: Union[bytes, str]) -> List[R]:
    """Decode a list response; the same record type serves full and stubbed listings."""
    return decode_json_list(record_cls, raw)
