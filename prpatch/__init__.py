from .browser import PullRequestBrowser
from .diff_parser import (
    DiffAggregateParser,
    DiffIndex,
    DiffParseError,
    DuplicatePathError,
    FileChangeRecord,
    MalformedSectionError,
    parse_diff,
)
from .hosting import Comment, CommitComment, DiscussionEntry, parse_discussion_entries
from .local_source import LocalPullRequestSource

__all__ = [
    "DiffAggregateParser",
    "DiffIndex",
    "FileChangeRecord",
    "DiffParseError",
    "MalformedSectionError",
    "DuplicatePathError",
    "parse_diff",
    "Comment",
    "CommitComment",
    "DiscussionEntry",
    "parse_discussion_entries",
    "LocalPullRequestSource",
    "PullRequestBrowser",
]
