"""Commit graph types shared by the graph backends and the describer."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class CommitNode:
    """A single commit as seen by the describe walk."""

    address: str
    parents: Tuple[str, ...] = ()
    timestamp: int = 0  # committer time, seconds since epoch


@dataclass(frozen=True)
class Marker:
    """A name bound to a commit, either directly or through a tag object."""

    name: str
    target: str
    annotated: bool = False
