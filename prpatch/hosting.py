"""Contracts for the code-hosting collaborators that supply pull requests.

Implementations fetch pull request metadata, raw diff text and discussion
threads. Only the shapes are defined here; transport lives with each
implementation.
"""

from datetime import datetime
from typing import Annotated, Any, Iterable, List, Literal, Protocol, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class Comment(BaseModel):
    """A plain discussion comment on a pull request"""

    model_config = ConfigDict(frozen=True)

    kind: Literal["comment"] = "comment"
    author: str
    created_at: datetime
    body: str


class CommitComment(BaseModel):
    """A discussion entry attached to a commit of the pull request"""

    model_config = ConfigDict(frozen=True)

    kind: Literal["commit_comment"] = "commit_comment"
    author: str
    created_at: datetime
    body: str
    sha: str


DiscussionEntry = Annotated[Union[Comment, CommitComment], Field(discriminator="kind")]

_entries_adapter = TypeAdapter(List[DiscussionEntry])


def parse_discussion_entries(payload: Iterable[Any]) -> List[DiscussionEntry]:
    """Validate JSON-style dicts into discussion entries, dispatching on ``kind``"""
    return _entries_adapter.validate_python(list(payload))


class Discussion(Protocol):
    @property
    def entries(self) -> List[DiscussionEntry]: ...

    def post(self, text: str) -> None: ...

    def force_reload(self) -> None: ...


class PullRequest(Protocol):
    id: str
    title: str
    owner: str
    created_at: datetime
    body: str

    @property
    def diff_text(self) -> str: ...

    @property
    def discussion(self) -> Discussion: ...

    def close(self) -> None: ...


class PullRequestSource(Protocol):
    def fetch(self) -> List[PullRequest]: ...
