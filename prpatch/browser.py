from typing import List, Optional

import structlog

from .diff_parser import DiffAggregateParser, DiffIndex, DiffParseError
from .hosting import PullRequest

logger = structlog.get_logger(__name__)


class PullRequestBrowser:
    """Tracks the selected pull request and the diff index built for it.

    The index is replaced as a whole on every selection change and is never
    modified in place.
    """

    def __init__(self, parser: Optional[DiffAggregateParser] = None):
        self.parser = parser or DiffAggregateParser()
        self.current: Optional[PullRequest] = None
        self.index = DiffIndex.empty()

    def select(self, pull_request: Optional[PullRequest]) -> DiffIndex:
        """Select a pull request and index its diff.

        Reselecting the current pull request keeps the existing index. If the
        diff cannot be parsed the selection is cleared and the error raised.
        """
        if pull_request is None:
            self.clear()
            return self.index
        if self.current is not None and self.current == pull_request:
            return self.index

        try:
            index = DiffIndex.build(self.parser.parse(pull_request.diff_text))
        except DiffParseError as e:
            logger.warning(
                "Failed to parse pull request diff",
                pull_request=pull_request.id,
                error=str(e),
            )
            self.clear()
            raise

        self.current, self.index = pull_request, index
        logger.info("Selected pull request", pull_request=pull_request.id, files=len(index))
        return index

    def clear(self) -> None:
        self.current, self.index = None, DiffIndex.empty()

    def file_paths(self) -> List[str]:
        return self.index.paths

    def patch_for(self, path: str) -> Optional[str]:
        """Patch body for a file of the selected pull request, or None"""
        return self.index.lookup(path)
