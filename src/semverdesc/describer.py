"""Describe a commit in a repository on disk."""

from typing import Optional

from semverdesc.describe import describe
from semverdesc.errors import DirtyCommitishError
from semverdesc.graph.repository import RepositoryGraph
from semverdesc.models.options import DescribeOptions
from semverdesc.types.describe import DescribeResult


def describe_path(
    repo_path: str,
    commitish: str = "HEAD",
    options: Optional[DescribeOptions] = None,
    dirty: bool = False,
) -> DescribeResult:
    """Open the repository at ``repo_path`` and describe ``commitish``.

    With ``dirty`` set the working tree is compared against the index and HEAD
    and the result's ``dirty`` flag is filled in. That comparison only means
    something for HEAD, so any other commit-ish raises ``DirtyCommitishError``.
    """
    graph = RepositoryGraph(repo_path)
    start = graph.resolve(commitish)
    if dirty and start != graph.resolve("HEAD"):
        raise DirtyCommitishError(commitish)

    result = describe(graph, start, options)
    if dirty:
        result.dirty = graph.is_dirty()
    return result
