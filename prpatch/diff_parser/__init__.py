from .errors import DiffParseError, DuplicatePathError, MalformedSectionError
from .models import DiffIndex, FileChangeRecord
from .parser import DiffAggregateParser, parse_diff

__all__ = [
    "DiffAggregateParser",
    "DiffIndex",
    "FileChangeRecord",
    "DiffParseError",
    "MalformedSectionError",
    "DuplicatePathError",
    "parse_diff",
]
