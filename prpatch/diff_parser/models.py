from types import MappingProxyType
from typing import TYPE_CHECKING, Iterable, Iterator, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict

from .errors import DuplicatePathError

if TYPE_CHECKING:
    from .parser import DiffAggregateParser


class FileChangeRecord(BaseModel):
    """Patch text for a single file of a multi-file diff"""

    model_config = ConfigDict(frozen=True)

    path: str
    patch_body: str
    old_path: Optional[str] = None  # Pre-change path, differs for renames
    is_new: bool = False
    is_deleted: bool = False
    is_renamed: bool = False
    is_binary: bool = False


class DiffIndex:
    """Read-only lookup of patch bodies by post-change path.

    Iteration follows the order the files appeared in the diff. An index is
    never updated in place; build a new one for every parsed diff.
    """

    def __init__(self, records: Iterable[FileChangeRecord] = ()):
        patches = {}
        ordered = []
        for record in records:
            if record.path in patches:
                raise DuplicatePathError(record.path)
            patches[record.path] = record.patch_body
            ordered.append(record)
        self._patches: Mapping[str, str] = MappingProxyType(patches)
        self._records = tuple(ordered)

    @classmethod
    def build(cls, records: Iterable[FileChangeRecord]) -> "DiffIndex":
        return cls(records)

    @classmethod
    def empty(cls) -> "DiffIndex":
        return cls()

    @classmethod
    def from_blob(
        cls, blob: str, parser: Optional["DiffAggregateParser"] = None
    ) -> "DiffIndex":
        """Parse a raw diff blob and index the result"""
        from .parser import DiffAggregateParser

        parser = parser or DiffAggregateParser()
        return cls(parser.parse(blob))

    def lookup(self, path: str) -> Optional[str]:
        """Return the patch body for ``path``, or None when it is not indexed"""
        return self._patches.get(path)

    @property
    def paths(self) -> List[str]:
        return list(self._patches)

    @property
    def records(self) -> List[FileChangeRecord]:
        return list(self._records)

    def as_mapping(self) -> Mapping[str, str]:
        return self._patches

    def __contains__(self, path: object) -> bool:
        return path in self._patches

    def __iter__(self) -> Iterator[str]:
        return iter(self._patches)

    def __len__(self) -> int:
        return len(self._patches)

    def __repr__(self) -> str:
        return f"DiffIndex(paths={self.paths!r})"
