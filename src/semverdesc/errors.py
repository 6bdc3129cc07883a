"""Errors raised while describing a commit."""

from typing import Optional


class DescribeError(Exception):
    """Base class for every describe failure."""


class NoMarkersError(DescribeError):
    """The repository has no tag-like references to describe against."""

    def __init__(self, message: str = "No names found, cannot describe anything."):
        super().__init__(message)


class NoDescribableTagsError(DescribeError):
    """The walk finished without an acceptable candidate.

    ``unannotated_seen`` is set when lightweight tags were reachable but
    rejected, so the caller can suggest retrying with them enabled.
    """

    def __init__(self, address: str, unannotated_seen: bool = False, exact: bool = False):
        self.address = address
        self.unannotated_seen = unannotated_seen
        self.exact = exact
        if exact:
            message = f"no tag exactly matches '{address}'"
        elif unannotated_seen:
            message = (
                f"No annotated tags can describe '{address}'. "
                "However, there were unannotated tags: try --tags."
            )
        else:
            message = f"No tags can describe '{address}'."
        super().__init__(message)


class GraphAccessError(DescribeError):
    """Reading the commit graph failed."""

    def __init__(self, message: str, address: Optional[str] = None):
        self.address = address
        super().__init__(message)


class ObjectNotFoundError(GraphAccessError):
    """A commit, reference or repository could not be found."""


class CorruptObjectError(GraphAccessError):
    """An object exists but could not be read."""


class DirtyCommitishError(DescribeError):
    """The working tree can only be compared when describing HEAD."""

    def __init__(self, commitish: str):
        self.commitish = commitish
        super().__init__(f"Cannot check the working tree when describing {commitish}: only HEAD has a working tree.")
