"""
Tag search over a commit ancestry graph, the engine behind describe.

The walk visits ancestors of the start commit newest first (by committer
time, ties broken by address) and stops once enough candidate tags have been
found or every known tag has been consumed. As with git itself the ordering
is a best-effort approximation of "most recent", not a topological guarantee.
"""

import heapq
from fnmatch import fnmatchcase
from typing import Dict, Iterable, List, Mapping, Optional, Set, Tuple

from loguru import logger

from semverdesc.errors import NoDescribableTagsError, NoMarkersError
from semverdesc.graph.base import CommitGraph
from semverdesc.models.options import DescribeOptions
from semverdesc.types.describe import Candidate, DescribeResult
from semverdesc.types.graph import CommitNode, Marker

MarkerSet = Dict[str, Marker]


def _name_allowed(name: str, match: List[str], exclude: List[str]) -> bool:
    """Apply the optional include/exclude glob filters to a marker name."""
    if match and not any(fnmatchcase(name, pattern) for pattern in match):
        return False
    return not any(fnmatchcase(name, pattern) for pattern in exclude)


def markers_to_set(markers: Iterable[Marker], options: Optional[DescribeOptions] = None) -> MarkerSet:
    """Index markers by the commit they point at.

    Lightweight markers are registered before annotated ones, each group in
    name order, and the last one registered for a commit wins. A commit with
    both kinds therefore keeps an annotated tag, and the mapping is the same
    for every build over the same refs.
    """
    options = options or DescribeOptions()
    marker_set: MarkerSet = {}
    for marker in sorted(markers, key=lambda m: (m.annotated, m.name)):
        if _name_allowed(marker.name, options.match, options.exclude):
            marker_set[marker.target] = marker

    if not marker_set:
        raise NoMarkersError()
    return marker_set


def build_marker_set(graph: CommitGraph, options: Optional[DescribeOptions] = None) -> MarkerSet:
    """Read every tag (or every ref) from the graph into a marker set."""
    options = options or DescribeOptions()
    return markers_to_set(graph.iter_markers(all_refs=options.all_refs), options)


class _CommitQueue:
    """Newest-first priority queue of commits that have not been visited yet."""

    def __init__(self, graph: CommitGraph):
        self.graph = graph
        self._heap: List[Tuple[int, str, CommitNode]] = []
        self._queued: Set[str] = set()

    def push(self, address: str) -> None:
        if address in self._queued:
            return
        self._queued.add(address)
        commit = self.graph.get_commit(address)
        heapq.heappush(self._heap, (-commit.timestamp, commit.address, commit))

    def pop(self) -> CommitNode:
        return heapq.heappop(self._heap)[2]

    def __bool__(self) -> bool:
        return bool(self._heap)


def _describe_exact(graph: CommitGraph, start: str, options: DescribeOptions, markers: MarkerSet) -> DescribeResult:
    """Handle ``max_candidates == 0``: only the start commit itself may match."""
    commit = graph.get_commit(start)
    marker = markers.get(commit.address)
    if marker is not None and (marker.annotated or options.accepts_lightweight):
        if options.debug:
            logger.debug(f"exact match for {start}: {marker.name}")
        return DescribeResult(address=start, tag=marker.name, distance=0)

    raise NoDescribableTagsError(
        start,
        unannotated_seen=marker is not None,
        exact=True,
    )


def _trace(candidates: List[Candidate], count: int, found: int, options: DescribeOptions, last: Optional[str]) -> None:
    for candidate in candidates:
        kind = "annotated" if candidate.annotated else "lightweight"
        logger.debug(f" {kind:<11} {candidate.distance:>8} {candidate.name}")
    logger.debug(f"traversed {count + 1} commits")
    if found > options.max_candidates:
        logger.debug(f"more than {options.max_candidates} tags found; listed {len(candidates)} most recent")
    if last is not None:
        logger.debug(f"gave up search at {last}")


def describe(
    graph: CommitGraph,
    start: str,
    options: Optional[DescribeOptions] = None,
    markers: Optional[Mapping[str, Marker]] = None,
) -> DescribeResult:
    """Find the nearest tag reachable from ``start``.

    Args:
        graph: Read access to commits and refs.
        start: Address of the commit to describe.
        options: Walk options; defaults apply when omitted.
        markers: A prebuilt marker set. It is copied before use, so one set
            can be shared between calls. Built from ``graph`` when omitted.

    Returns:
        The start address, the winning tag and its distance. ``dirty`` is left
        unset; the working tree is not this function's concern.

    Raises:
        NoMarkersError: There are no tags at all.
        NoDescribableTagsError: No acceptable tag is reachable from ``start``.
        GraphAccessError: A commit could not be read. Propagated unchanged.
    """
    options = options or DescribeOptions()
    if markers is None:
        remaining = build_marker_set(graph, options)
    else:
        if not markers:
            raise NoMarkersError()
        remaining = dict(markers)

    if options.debug:
        logger.debug(f"searching to describe {start}")

    if options.max_candidates == 0:
        return _describe_exact(graph, start, options, remaining)

    candidates: List[Candidate] = []
    candidates_found = 0
    unannotated_seen = False
    count = -1
    last_commit: Optional[str] = None

    queue = _CommitQueue(graph)
    queue.push(start)
    while queue:
        commit = queue.pop()
        count += 1
        last_commit = commit.address

        marker = remaining.pop(commit.address, None)
        if marker is not None:
            if marker.annotated or options.accepts_lightweight:
                if candidates_found < options.max_candidates:
                    candidates.append(Candidate(marker=marker, distance=count))
                candidates_found += 1
            else:
                unannotated_seen = True

            if candidates_found > options.max_candidates or not remaining:
                break

        parents = commit.parents[:1] if options.first_parent else commit.parents
        for parent in parents:
            queue.push(parent)

    if options.debug:
        _trace(candidates, count, candidates_found, options, last_commit)

    if not candidates:
        raise NoDescribableTagsError(start, unannotated_seen=unannotated_seen)

    winner = candidates[0]
    return DescribeResult(address=start, tag=winner.name, distance=winner.distance)
