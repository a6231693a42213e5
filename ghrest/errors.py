class GitHubCoreError(Exception):
    """Base class for errors raised by the client core."""


class ValueNotPresentError(GitHubCoreError, LookupError):
    """Raised when reading the value of an absent optional field."""


class MalformedTimestampError(GitHubCoreError, ValueError):
    """Raised when a timestamp field does not hold a valid date-time."""

    def __init__(self, raw):
        super().__init__(f"malformed timestamp: {raw!r}")
        self.raw = raw


class RecordDecodeError(GitHubCoreError, ValueError):
    """Raised when a JSON value has the wrong type for its field."""


class InvalidOptionError(GitHubCoreError, ValueError):
    """Raised when list options carry a value the API would reject."""


class MixedCommentStyleError(GitHubCoreError, ValueError):
    """
    Raised when a review comment batch mixes diff-position comments with
    side/line comments, or when one comment sets both.
    """

    def __init__(self, index: int, message: str = ""):
        super().__init__(
            message
            or f"review comments must all use position or side/line (comment #{index})"
        )
        self.index = index
