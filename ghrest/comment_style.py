"""
Classify review comment batches by how their comments are anchored.

Pull request reviews accept two addressing schemes for draft comments:

- position: an offset into the unified diff (the legacy scheme)
- side/line: which side of the diff plus an absolute line number, optionally
  with start_side/start_line for multi-line comments

A single review submission must stick to one scheme. Side/line batches also
need the multi-line comments preview media type on the request.
"""
from enum import Enum
from typing import Iterable, NamedTuple, Optional

from ghrest.errors import MixedCommentStyleError

MULTI_LINE_COMMENTS_PREVIEW = "application/vnd.github.comfort-fade-preview+json"

LINE_STYLE_FIELDS = ("side", "line", "start_side", "start_line")


class Side(str, Enum):
    LEFT = "LEFT"
    RIGHT = "RIGHT"


class PositionStyle(NamedTuple):
    position: int


class LineStyle(NamedTuple):
    side: Optional[Side]
    line: Optional[int]


class CommentStyle(Enum):
    NEITHER = "neither"
    POSITION = "position"
    LINE = "line"
    BOTH = "both"


class _Seen(Enum):
    UNSET = "unset"
    POSITION = "position"
    LINE = "line"


def classify(comment) -> CommentStyle:
    """Decide which addressing scheme a single draft comment uses."""
    has_position = comment.position.is_present()
    has_line = any(getattr(comment, name).is_present() for name in LINE_STYLE_FIELDS)
    if has_position and has_line:
        return CommentStyle.BOTH
    if has_position:
        return CommentStyle.POSITION
    if has_line:
        return CommentStyle.LINE
    return CommentStyle.NEITHER


def uses_line_style(comments: Optional[Iterable]) -> bool:
    """
    Return True when the batch is addressed by side/line, False when it is
    addressed by position or carries no positioning at all.

    Raises MixedCommentStyleError as soon as one comment sets both schemes
    or a comment disagrees with an earlier one.
    """
    seen = _Seen.UNSET
    for index, comment in enumerate(comments or ()):
        if comment is None:
            continue
        style = classify(comment)
        if style is CommentStyle.NEITHER:
            continue
        if style is CommentStyle.BOTH:
            raise MixedCommentStyleError(
                index,
                f"comment #{index} sets both position and side/line",
            )
        if style is CommentStyle.POSITION:
            if seen is _Seen.LINE:
                raise MixedCommentStyleError(index)
            seen = _Seen.POSITION
        else:
            if seen is _Seen.POSITION:
                raise MixedCommentStyleError(index)
            seen = _Seen.LINE
    return seen is _Seen.LINE


def preview_media_type(comments: Optional[Iterable]) -> Optional[str]:
    """Accept header a review submission needs for this batch, if any."""
    if uses_line_style(comments):
        return MULTI_LINE_COMMENTS_PREVIEW
    return None
