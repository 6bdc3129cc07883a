"""
Dirty state node: compare the working tree against the described commit.
"""

from loguru import logger

from semverdesc.errors import DirtyCommitishError, GraphAccessError
from semverdesc.graph.repository import RepositoryGraph
from semverdesc.models.options import FormatOptions
from semverdesc.models.state import DescribeState


def _wants_dirty_check(state: DescribeState) -> bool:
    options = state.get("format_options") or FormatOptions()
    return bool(state.get("dirty_check") or options.dirty_mark or options.broken_mark)


def dirty_state_node(state: DescribeState) -> DescribeState:
    """Fill in the dirty flag when a dirty or broken mark is configured."""
    if state.get("errors") or state.get("address") is None or not _wants_dirty_check(state):
        return state

    logger.info("Executing Dirty State Node")

    options = state.get("format_options") or FormatOptions()
    dirty = None
    broken = False
    try:
        graph = RepositoryGraph(state["repo_path"])
        if graph.resolve("HEAD") != state["address"]:
            raise DirtyCommitishError(state.get("commitish") or state["address"])
        dirty = graph.is_dirty()
    except DirtyCommitishError as e:
        state.setdefault("errors", []).append({"node": "dirty_state_node", "error": str(e)})
        return state
    except GraphAccessError as e:
        if not options.broken_mark:
            state.setdefault("errors", []).append({"node": "dirty_state_node", "error": str(e)})
            return state
        logger.warning(f"Working tree state unknown: {e}")
        broken = True

    result = state.get("result")
    if result is not None:
        result.dirty = dirty
        result.broken = broken

    logger.debug(f"Working tree dirty: {dirty}, broken: {broken}")

    return {**state, "dirty": dirty, "broken": broken}
