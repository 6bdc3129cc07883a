"""
Describe node: find the nearest tag for the requested commit.
"""

from typing import Optional

from loguru import logger

from semverdesc.describe import describe
from semverdesc.errors import DescribeError, NoDescribableTagsError, NoMarkersError
from semverdesc.graph.repository import RepositoryGraph
from semverdesc.models.options import DescribeOptions
from semverdesc.models.state import DescribeState


def describe_node(state: DescribeState) -> DescribeState:
    """Resolve the commit-ish and run the tag search, recording the result in the state."""
    if "repo_path" not in state:
        raise ValueError("repo_path is required in DescribeState")

    logger.info("Executing Describe Node")

    options = state.get("describe_options") or DescribeOptions()
    commitish = state.get("commitish") or "HEAD"
    address: Optional[str] = None

    try:
        graph = RepositoryGraph(state["repo_path"])
        address = graph.resolve(commitish)
        result = describe(graph, address, options)
    except DescribeError as e:
        no_tag = isinstance(e, (NoMarkersError, NoDescribableTagsError))
        if no_tag and state.get("always") and address is not None:
            logger.info(f"{e} Falling back to the commit address")
        else:
            state.setdefault("errors", []).append({"node": "describe_node", "error": str(e)})
        return {**state, "address": address, "result": None}

    logger.info(f"Nearest tag for {commitish} is {result.tag}, {result.distance} commits away")

    return {**state, "address": address, "result": result}
