"""Pull request source backed by branches of a local git repository.

Every local branch other than the base branch is presented as a pull request
against base. The repository is only read; no branch is created, fetched or
checked out.
"""

from datetime import datetime, timezone
from typing import List, Optional

import git
import structlog

from .hosting import Comment, CommitComment, DiscussionEntry

logger = structlog.get_logger(__name__)


class LocalDiscussion:
    """Commits of a branch as discussion entries, plus comments posted locally"""

    def __init__(self, repo: git.Repo, base: str, head: str):
        self.repo = repo
        self.base = base
        self.head = head
        self._posted: List[Comment] = []
        self._commit_entries = self._load_commit_entries()

    def _load_commit_entries(self) -> List[CommitComment]:
        commits = self.repo.iter_commits(f"{self.base}..{self.head}", reverse=True)
        return [
            CommitComment(
                author=commit.author.name,
                created_at=commit.committed_datetime,
                body=commit.message.strip(),
                sha=commit.hexsha,
            )
            for commit in commits
        ]

    @property
    def entries(self) -> List[DiscussionEntry]:
        return [*self._commit_entries, *self._posted]

    def post(self, text: str) -> None:
        if not text or not text.strip():
            raise ValueError("Cannot post an empty comment")
        author = git.Actor.committer(self.repo.config_reader()).name
        self._posted.append(
            Comment(
                author=author,
                created_at=datetime.now(timezone.utc),
                body=text,
            )
        )

    def force_reload(self) -> None:
        self._commit_entries = self._load_commit_entries()


class LocalPullRequest:
    """A local branch viewed as a pull request against a base branch"""

    def __init__(self, repo: git.Repo, base: str, head: str):
        self.repo = repo
        self.base = base
        self.head = head

        commit = repo.commit(head)
        self.id = head
        self.title = commit.summary
        self.owner = commit.author.name
        self.created_at = commit.committed_datetime
        self.body = commit.message
        self.closed = False

        self._diff_text: Optional[str] = None
        self._discussion: Optional[LocalDiscussion] = None

    @property
    def diff_text(self) -> str:
        """Diff of head against its merge base with base, as ``git diff`` prints it"""
        if self._diff_text is None:
            self._diff_text = self.repo.git(c="core.quotePath=false").diff(
                "--no-color",
                "--no-ext-diff",
                "--src-prefix=a/",
                "--dst-prefix=b/",
                f"{self.base}...{self.head}",
                strip_newline_in_stdout=False,
            )
        return self._diff_text

    @property
    def discussion(self) -> LocalDiscussion:
        if self._discussion is None:
            self._discussion = LocalDiscussion(self.repo, self.base, self.head)
        return self._discussion

    def close(self) -> None:
        self.closed = True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocalPullRequest):
            return NotImplemented
        return (self.repo.git_dir, self.base, self.head) == (
            other.repo.git_dir,
            other.base,
            other.head,
        )

    def __hash__(self) -> int:
        return hash((self.repo.git_dir, self.base, self.head))

    def __repr__(self) -> str:
        return f"LocalPullRequest(base={self.base!r}, head={self.head!r})"


class LocalPullRequestSource:
    """Lists local branches that differ from a base branch as pull requests"""

    def __init__(self, repo_path: str, base: Optional[str] = None):
        """Open the repository; base defaults to the checked-out branch"""
        self.repo = git.Repo(repo_path)
        self.base = base or self.repo.active_branch.name

    def fetch(self) -> List[LocalPullRequest]:
        base_commit = self.repo.commit(self.base)
        heads = sorted(self.repo.heads, key=lambda head: head.name)

        pull_requests = [
            LocalPullRequest(self.repo, self.base, head.name)
            for head in heads
            if head.name != self.base and head.commit != base_commit
        ]
        logger.info(
            "Fetched local pull requests",
            repo=self.repo.working_dir,
            base=self.base,
            count=len(pull_requests),
        )
        return pull_requests
