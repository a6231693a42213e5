"""
Wire records for the endpoints the services cover.

Every field is an Opt: responses and stubbed listings are schema subsets, and
request bodies only carry what the caller set.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import List

from ghrest import comment_style
from ghrest.comment_style import LineStyle, PositionStyle, Side
from ghrest.optional import ABSENT, Opt, present
from ghrest.records import (
    BOOL,
    INT,
    STR,
    TIMESTAMP,
    EnumOf,
    ListOf,
    Nested,
    Record,
    opt_field,
)


@dataclass(frozen=True)
class User(Record):
    login: Opt[str] = opt_field(STR)
    id: Opt[int] = opt_field(INT)
    node_id: Opt[str] = opt_field(STR)
    avatar_url: Opt[str] = opt_field(STR)
    html_url: Opt[str] = opt_field(STR)
    gravatar_id: Opt[str] = opt_field(STR)
    name: Opt[str] = opt_field(STR)
    company: Opt[str] = opt_field(STR)
    blog: Opt[str] = opt_field(STR)
    location: Opt[str] = opt_field(STR)
    email: Opt[str] = opt_field(STR)
    hireable: Opt[bool] = opt_field(BOOL)
    public_repos: Opt[int] = opt_field(INT)
    followers: Opt[int] = opt_field(INT)
    following: Opt[int] = opt_field(INT)
    created_at: Opt[datetime] = opt_field(TIMESTAMP)
    updated_at: Opt[datetime] = opt_field(TIMESTAMP)
    type: Opt[str] = opt_field(STR)
    site_admin: Opt[bool] = opt_field(BOOL)
    url: Opt[str] = opt_field(STR)


@dataclass(frozen=True)
class Team(Record):
    id: Opt[int] = opt_field(INT)
    node_id: Opt[str] = opt_field(STR)
    name: Opt[str] = opt_field(STR)
    description: Opt[str] = opt_field(STR)
    url: Opt[str] = opt_field(STR)
    slug: Opt[str] = opt_field(STR)
    permission: Opt[str] = opt_field(STR)
    privacy: Opt[str] = opt_field(STR)
    members_count: Opt[int] = opt_field(INT)
    repos_count: Opt[int] = opt_field(INT)
    members_url: Opt[str] = opt_field(STR)
    repositories_url: Opt[str] = opt_field(STR)
    ldap_dn: Opt[str] = opt_field(STR)


@dataclass(frozen=True)
class Reviewers(Record):
    users: Opt[List[User]] = opt_field(ListOf(Nested(User)))
    teams: Opt[List[Team]] = opt_field(ListOf(Nested(Team)))


@dataclass(frozen=True)
class Reactions(Record):
    total_count: Opt[int] = opt_field(INT)
    plus_one: Opt[int] = opt_field(INT, "+1")
    minus_one: Opt[int] = opt_field(INT, "-1")
    laugh: Opt[int] = opt_field(INT)
    confused: Opt[int] = opt_field(INT)
    heart: Opt[int] = opt_field(INT)
    hooray: Opt[int] = opt_field(INT)
    rocket: Opt[int] = opt_field(INT)
    eyes: Opt[int] = opt_field(INT)
    url: Opt[str] = opt_field(STR)


# --- Issues -------------------------------------------------------------------


@dataclass(frozen=True)
class IssueComment(Record):
    id: Opt[int] = opt_field(INT)
    node_id: Opt[str] = opt_field(STR)
    body: Opt[str] = opt_field(STR)
    user: Opt[User] = opt_field(Nested(User))
    reactions: Opt[Reactions] = opt_field(Nested(Reactions))
    created_at: Opt[datetime] = opt_field(TIMESTAMP)
    updated_at: Opt[datetime] = opt_field(TIMESTAMP)
    author_association: Opt[str] = opt_field(STR)
    url: Opt[str] = opt_field(STR)
    html_url: Opt[str] = opt_field(STR)
    issue_url: Opt[str] = opt_field(STR)


# --- Pull request reviews -----------------------------------------------------


@dataclass(frozen=True)
class PullRequestReview(Record):
    id: Opt[int] = opt_field(INT)
    node_id: Opt[str] = opt_field(STR)
    user: Opt[User] = opt_field(Nested(User))
    body: Opt[str] = opt_field(STR)
    submitted_at: Opt[datetime] = opt_field(TIMESTAMP)
    commit_id: Opt[str] = opt_field(STR)
    html_url: Opt[str] = opt_field(STR)
    pull_request_url: Opt[str] = opt_field(STR)
    state: Opt[str] = opt_field(STR)
    author_association: Opt[str] = opt_field(STR)


@dataclass(frozen=True)
class PullRequestComment(Record):
    id: Opt[int] = opt_field(INT)
    node_id: Opt[str] = opt_field(STR)
    in_reply_to: Opt[int] = opt_field(INT, "in_reply_to_id")
    body: Opt[str] = opt_field(STR)
    path: Opt[str] = opt_field(STR)
    diff_hunk: Opt[str] = opt_field(STR)
    pull_request_review_id: Opt[int] = opt_field(INT)
    position: Opt[int] = opt_field(INT)
    original_position: Opt[int] = opt_field(INT)
    start_line: Opt[int] = opt_field(INT)
    line: Opt[int] = opt_field(INT)
    original_line: Opt[int] = opt_field(INT)
    original_start_line: Opt[int] = opt_field(INT)
    side: Opt[Side] = opt_field(EnumOf(Side))
    start_side: Opt[Side] = opt_field(EnumOf(Side))
    commit_id: Opt[str] = opt_field(STR)
    original_commit_id: Opt[str] = opt_field(STR)
    user: Opt[User] = opt_field(Nested(User))
    reactions: Opt[Reactions] = opt_field(Nested(Reactions))
    created_at: Opt[datetime] = opt_field(TIMESTAMP)
    updated_at: Opt[datetime] = opt_field(TIMESTAMP)
    author_association: Opt[str] = opt_field(STR)
    url: Opt[str] = opt_field(STR)
    html_url: Opt[str] = opt_field(STR)
    pull_request_url: Opt[str] = opt_field(STR)


@dataclass(frozen=True)
class DraftReviewComment(Record):
    """
    One inline comment in a review submission.

    Anchor it either by `position` (offset into the diff) or by `side` and
    `line` (plus `start_side`/`start_line` for a range). The type allows both;
    `uses_line_style` rejects a batch that does that.
    """

    path: Opt[str] = opt_field(STR)
    position: Opt[int] = opt_field(INT)
    body: Opt[str] = opt_field(STR)
    start_side: Opt[Side] = opt_field(EnumOf(Side))
    side: Opt[Side] = opt_field(EnumOf(Side))
    start_line: Opt[int] = opt_field(INT)
    line: Opt[int] = opt_field(INT)

    @property
    def position_style(self) -> Opt[PositionStyle]:
        if not self.position.is_present():
            return ABSENT
        return present(PositionStyle(self.position.value()))

    @property
    def line_style(self) -> Opt[LineStyle]:
        if not (self.side.is_present() or self.line.is_present()):
            return ABSENT
        return present(LineStyle(self.side.get(), self.line.get()))


@dataclass(frozen=True)
class PullRequestReviewRequest(Record):
    node_id: Opt[str] = opt_field(STR)
    commit_id: Opt[str] = opt_field(STR)
    body: Opt[str] = opt_field(STR)
    event: Opt[str] = opt_field(STR)
    comments: Opt[List[DraftReviewComment]] = opt_field(
        ListOf(Nested(DraftReviewComment))
    )

    def uses_line_style(self) -> bool:
        return comment_style.uses_line_style(self.comments.get([]))


@dataclass(frozen=True)
class PullRequestReviewDismissalRequest(Record):
    message: Opt[str] = opt_field(STR)


# --- Marketplace --------------------------------------------------------------


@dataclass(frozen=True)
class MarketplacePlan(Record):
    url: Opt[str] = opt_field(STR)
    accounts_url: Opt[str] = opt_field(STR)
    id: Opt[int] = opt_field(INT)
    number: Opt[int] = opt_field(INT)
    name: Opt[str] = opt_field(STR)
    description: Opt[str] = opt_field(STR)
    monthly_price_in_cents: Opt[int] = opt_field(INT)
    yearly_price_in_cents: Opt[int] = opt_field(INT)
    # "FREE", "FLAT_RATE" or "PER_UNIT"
    price_model: Opt[str] = opt_field(STR)
    unit_name: Opt[str] = opt_field(STR)
    bullets: Opt[List[str]] = opt_field(ListOf(STR))
    state: Opt[str] = opt_field(STR)
    has_free_trial: Opt[bool] = opt_field(BOOL)


@dataclass(frozen=True)
class MarketplacePurchase(Record):
    billing_cycle: Opt[str] = opt_field(STR)
    next_billing_date: Opt[datetime] = opt_field(TIMESTAMP)
    unit_count: Opt[int] = opt_field(INT)
    plan: Opt[MarketplacePlan] = opt_field(Nested(MarketplacePlan))
    on_free_trial: Opt[bool] = opt_field(BOOL)
    free_trial_ends_on: Opt[datetime] = opt_field(TIMESTAMP)
    updated_at: Opt[datetime] = opt_field(TIMESTAMP)


@dataclass(frozen=True)
class MarketplacePendingChange(Record):
    effective_date: Opt[datetime] = opt_field(TIMESTAMP)
    unit_count: Opt[int] = opt_field(INT)
    id: Opt[int] = opt_field(INT)
    plan: Opt[MarketplacePlan] = opt_field(Nested(MarketplacePlan))


@dataclass(frozen=True)
class MarketplacePlanAccount(Record):
    url: Opt[str] = opt_field(STR)
    type: Opt[str] = opt_field(STR)
    id: Opt[int] = opt_field(INT)
    node_id: Opt[str] = opt_field(STR)
    login: Opt[str] = opt_field(STR)
    email: Opt[str] = opt_field(STR)
    organization_billing_email: Opt[str] = opt_field(STR)
    marketplace_purchase: Opt[MarketplacePurchase] = opt_field(
        Nested(MarketplacePurchase)
    )
    marketplace_pending_change: Opt[MarketplacePendingChange] = opt_field(
        Nested(MarketplacePendingChange)
    )
