class DiffParseError(ValueError):
    """Base error for a diff blob that cannot be split into file patches"""


class MalformedSectionError(DiffParseError):
    """A file section does not start with an ``a/<path> b/<path>`` header"""

    def __init__(self, fragment: str, excerpt_length: int = 200):
        self.fragment = fragment
        if len(fragment) > excerpt_length:
            self.excerpt = fragment[:excerpt_length] + "..."
        else:
            self.excerpt = fragment
        super().__init__(f"Unable to understand patch section: {self.excerpt!r}")


class DuplicatePathError(DiffParseError):
    """Two file sections resolve to the same post-change path"""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Duplicate file path in diff: {path}")
