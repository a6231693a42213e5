import pytest

from ghrest.comment_style import (
    MULTI_LINE_COMMENTS_PREVIEW,
    CommentStyle,
    LineStyle,
    PositionStyle,
    Side,
    classify,
    preview_media_type,
    uses_line_style,
)
from ghrest.errors import MixedCommentStyleError, RecordDecodeError
from ghrest.models import DraftReviewComment, PullRequestReviewRequest
from ghrest.optional import absent, present
from ghrest.records import decode, encode

PATH = "path/to/file.py"
BODY = "this is a comment body"


def _pos(n):
    return DraftReviewComment(path=PATH, body=BODY, position=n)


def _line(side, n):
    return DraftReviewComment(path=PATH, body=BODY, side=side, line=n)


def test_classify_each_style():
    assert classify(_pos(1)) is CommentStyle.POSITION
    assert classify(_line("RIGHT", 11)) is CommentStyle.LINE
    assert classify(DraftReviewComment(path=PATH, body=BODY)) is CommentStyle.NEITHER
    both = DraftReviewComment(path=PATH, body=BODY, position=1, side="RIGHT", line=11)
    assert classify(both) is CommentStyle.BOTH


def test_start_fields_count_as_line_style():
    c = DraftReviewComment(path=PATH, body=BODY, start_line=3, start_side="LEFT")
    assert classify(c) is CommentStyle.LINE


def test_empty_review():
    assert PullRequestReviewRequest().uses_line_style() is False
    assert uses_line_style([]) is False
    assert uses_line_style(None) is False


def test_old_style_review():
    review = PullRequestReviewRequest(comments=[_pos(1), _pos(2), _pos(3)])
    assert review.uses_line_style() is False


def test_new_style_review():
    review = PullRequestReviewRequest(
        comments=[_line("RIGHT", 11), _line("LEFT", 22), _line("RIGHT", 33)]
    )
    assert review.uses_line_style() is True


def test_blended_comment():
    review = PullRequestReviewRequest(
        comments=[DraftReviewComment(path=PATH, body=BODY, position=1, side="RIGHT", line=1)]
    )
    with pytest.raises(MixedCommentStyleError) as exc:
        review.uses_line_style()
    assert exc.value.index == 0


def test_position_then_line():
    with pytest.raises(MixedCommentStyleError) as exc:
        uses_line_style([_pos(1), _line("RIGHT", 1)])
    assert exc.value.index == 1


def test_line_then_position():
    with pytest.raises(MixedCommentStyleError) as exc:
        uses_line_style([_line("RIGHT", 1), _pos(1)])
    assert exc.value.index == 1


def test_blended_comment_fails_regardless_of_neighbours():
    both = DraftReviewComment(path=PATH, body=BODY, position=2, line=2)
    with pytest.raises(MixedCommentStyleError):
        uses_line_style([_line("RIGHT", 1), _line("LEFT", 2), both])


def test_unpositioned_comments_are_skipped():
    bare = DraftReviewComment(path=PATH, body=BODY)
    assert uses_line_style([bare, bare]) is False
    assert uses_line_style([bare, _line("RIGHT", 1), bare]) is True
    assert uses_line_style([_pos(1), bare, _pos(2)]) is False


def test_zero_position_still_counts_as_position():
    with pytest.raises(MixedCommentStyleError):
        uses_line_style([_pos(0), _line("RIGHT", 1)])


def test_preview_media_type():
    assert preview_media_type([_line(Side.RIGHT, 1)]) == MULTI_LINE_COMMENTS_PREVIEW
    assert preview_media_type([_pos(1)]) is None
    assert preview_media_type([]) is None


def test_style_views():
    assert _pos(4).position_style == present(PositionStyle(4))
    assert _pos(4).line_style == absent()
    assert _line("LEFT", 9).line_style == present(LineStyle("LEFT", 9))
    assert _line("LEFT", 9).position_style == absent()


def test_side_enum_encodes_as_text():
    assert encode(_line(Side.LEFT, 2)) == {
        "path": PATH,
        "body": BODY,
        "side": "LEFT",
        "line": 2,
    }


def test_side_is_held_as_enum():
    c = _line("RIGHT", 3)
    assert c.side == present(Side.RIGHT)
    assert c.line_style.value().side is Side.RIGHT


def test_unknown_side_is_rejected():
    with pytest.raises(RecordDecodeError):
        _line("MIDDLE", 3)
    with pytest.raises(RecordDecodeError):
        decode(DraftReviewComment, {"side": "MIDDLE", "line": 3})


def test_decoded_side_is_enum():
    c = decode(DraftReviewComment, {"path": PATH, "side": "LEFT", "line": 1})
    assert c.side.value() is Side.LEFT
