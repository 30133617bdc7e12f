import re
from typing import List, Optional

from ..config import get_settings
from .errors import DuplicatePathError, MalformedSectionError
from .models import FileChangeRecord

# Each file section starts at a line beginning with "diff --git "
SECTION_BOUNDARY = re.compile(r"^diff --git ", re.MULTILINE)
SECTION_HEADER = re.compile(r"^a/([^\n]+) b/([^\n]+)\n?(.*)$", re.DOTALL)


class DiffAggregateParser:
    """Splits a multi-file unified diff into per-file patch records"""

    def __init__(
        self,
        min_fragment_length: Optional[int] = None,
        excerpt_length: Optional[int] = None,
    ):
        """Initialize the parser, falling back to settings for unset limits"""
        settings = get_settings()
        if min_fragment_length is None:
            min_fragment_length = settings.min_fragment_length
        if excerpt_length is None:
            excerpt_length = settings.excerpt_length
        self.min_fragment_length = min_fragment_length
        self.excerpt_length = excerpt_length

    def parse(self, blob: str) -> List[FileChangeRecord]:
        """Parse a diff blob into records ordered as they appear.

        Raises MalformedSectionError if any section lacks the two-path header
        and DuplicatePathError if two sections share a post-change path. No
        partial result is returned in either case.
        """
        records = []
        seen = set()

        for fragment in self._split(blob):
            record = self._parse_section(fragment)
            if record.path in seen:
                raise DuplicatePathError(record.path)
            seen.add(record.path)
            records.append(record)

        return records

    def _split(self, blob: str) -> List[str]:
        """Split a blob on section boundaries, dropping near-empty fragments"""
        return [
            fragment
            for fragment in SECTION_BOUNDARY.split(blob)
            if len(fragment.strip()) > self.min_fragment_length
        ]

    def _parse_section(self, fragment: str) -> FileChangeRecord:
        """Parse a single section that follows a ``diff --git `` marker"""
        match = SECTION_HEADER.match(fragment)
        if not match:
            raise MalformedSectionError(fragment, self.excerpt_length)

        old_path = match.group(1).strip()
        path = match.group(2).strip()
        if not path:
            raise MalformedSectionError(fragment, self.excerpt_length)

        body = match.group(3)
        header = _extended_header(body)

        return FileChangeRecord(
            path=path,
            patch_body=body,
            old_path=old_path,
            is_new=any(line.startswith("new file mode") for line in header),
            is_deleted=any(line.startswith("deleted file mode") for line in header),
            is_renamed=old_path != path
            or any(line.startswith(("rename from", "rename to")) for line in header),
            is_binary=any(
                line.startswith(("Binary files ", "GIT binary patch"))
                for line in header
            ),
        )


def _extended_header(body: str) -> List[str]:
    """Return the git extended header lines that precede the first hunk"""
    lines = []
    for line in body.splitlines():
        if line.startswith("@@"):
            break
        lines.append(line)
    return lines


def parse_diff(blob: str) -> List[FileChangeRecord]:
    """Parse a diff blob with the default parser settings"""
    return DiffAggregateParser().parse(blob)
