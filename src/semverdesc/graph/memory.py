"""In-memory commit graph for history that does not live in a git repository."""

from typing import Dict, Iterable, Iterator, List

from semverdesc.errors import ObjectNotFoundError
from semverdesc.types.graph import CommitNode, Marker


class MemoryGraph:
    """A CommitGraph backed by plain Python objects."""

    def __init__(self, commits: Iterable[CommitNode], markers: Iterable[Marker] = (), dirty: bool = False):
        self.commits: Dict[str, CommitNode] = {commit.address: commit for commit in commits}
        self.markers: List[Marker] = list(markers)
        self.dirty = dirty

    def resolve(self, commitish: str) -> str:
        if commitish in self.commits:
            return commitish
        for marker in self.markers:
            if marker.name == commitish:
                return marker.target
        raise ObjectNotFoundError(f"Not a valid object name {commitish}", address=commitish)

    def get_commit(self, address: str) -> CommitNode:
        try:
            return self.commits[address]
        except KeyError:
            raise ObjectNotFoundError(f"Commit {address} not found", address=address) from None

    def iter_markers(self, all_refs: bool = False) -> Iterator[Marker]:
        # Every marker here is a tag; ``all_refs`` has no branches to add.
        return iter(self.markers)

    def is_dirty(self) -> bool:
        return self.dirty
