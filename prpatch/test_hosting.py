from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from .hosting import Comment, CommitComment, parse_discussion_entries


def test_parse_discussion_entries_dispatches_on_kind():
    entries = parse_discussion_entries(
        [
            {
                "kind": "comment",
                "author": "octocat",
                "created_at": "2024-03-01T10:00:00Z",
                "body": "Could you add a test?",
            },
            {
                "kind": "commit_comment",
                "author": "hubot",
                "created_at": "2024-03-01T11:30:00Z",
                "body": "Add test for empty diff",
                "sha": "9fceb02d0ae598e95dc970b74767f19372d61af8",
            },
        ]
    )

    assert isinstance(entries[0], Comment)
    assert isinstance(entries[1], CommitComment)
    assert entries[1].sha == "9fceb02d0ae598e95dc970b74767f19372d61af8"
    assert entries[0].created_at == datetime(2024, 3, 1, 10, 0, tzinfo=timezone.utc)


def test_parse_discussion_entries_empty():
    assert parse_discussion_entries([]) == []


@pytest.mark.parametrize(
    "entry",
    [
        {"author": "a", "created_at": "2024-03-01T10:00:00Z", "body": "no kind"},
        {"kind": "review", "author": "a", "created_at": "2024-03-01T10:00:00Z", "body": "x"},
        {"kind": "commit_comment", "author": "a", "created_at": "2024-03-01T10:00:00Z", "body": "x"},
    ],
)
def test_parse_discussion_entries_rejects_invalid(entry):
    with pytest.raises(ValidationError):
        parse_discussion_entries([entry])


def test_entry_kind_defaults():
    created = datetime(2024, 1, 1, tzinfo=timezone.utc)

    assert Comment(author="a", created_at=created, body="b").kind == "comment"
    assert (
        CommitComment(author="a", created_at=created, body="b", sha="abc").kind
        == "commit_comment"
    )
