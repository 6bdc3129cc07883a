"""Commit graph access protocol."""

from typing import Iterable, Protocol

from semverdesc.types.graph import CommitNode, Marker


class CommitGraph(Protocol):
    """Read-only view of a repository's history used by the describer."""

    def resolve(self, commitish: str) -> str:
        """Resolve a commit-ish to a commit address."""
        ...

    def get_commit(self, address: str) -> CommitNode:
        """Load a single commit."""
        ...

    def iter_markers(self, all_refs: bool = False) -> Iterable[Marker]:
        """Yield every tag (or every ref with ``all_refs``) peeled to its commit."""
        ...

    def is_dirty(self) -> bool:
        """Check whether the working tree differs from the checked out commit."""
        ...
