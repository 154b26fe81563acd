"""Hierarchical resource path - dot-delimited node identifiers."""

from dataclasses import dataclass

PATH_DELIMITER = "."


def path_segments(path: str) -> list[str]:
    """Split path into segments. Empty path has no segments."""
    if not path:
        return []
    return path.split(PATH_DELIMITER)


def ancestor_paths(path: str) -> list[str]:
    """Strict ancestors of path, ordered root to immediate parent.

    >>> ancestor_paths("root.child.grandchild")
    ['root', 'root.child']
    """
    parts = path_segments(path)
    return [PATH_DELIMITER.join(parts[:i]) for i in range(1, len(parts))]


def parent_path(path: str) -> str | None:
    """Path with the last segment removed, None for root-level paths."""
    parts = path_segments(path)
    if len(parts) <= 1:
        return None
    return PATH_DELIMITER.join(parts[:-1])


@dataclass(frozen=True)
class ResourcePath:
    """Path of a resource in the tree. Last segment identifies the resource itself."""

    value: str

    def chain(self) -> list[str]:
        """Ancestor paths followed by the path itself; empty for an empty path."""
        if not self.value:
            return []
        return [*ancestor_paths(self.value), self.value]

    def __str__(self) -> str:
        return self.value
