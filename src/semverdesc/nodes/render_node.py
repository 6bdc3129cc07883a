"""
Render node: turn the describe result into a descriptor string.
"""

from loguru import logger

from semverdesc.formatter import format_abbreviated, format_descriptor
from semverdesc.models.options import DescriptorStyle, FormatOptions
from semverdesc.models.state import DescribeState


def render_node(state: DescribeState) -> DescribeState:
    """Render the descriptor in the requested style."""
    if state.get("errors"):
        return state

    logger.info("Executing Render Node")

    options = state.get("format_options") or FormatOptions()
    style = state.get("style") or DescriptorStyle.SEMVER
    result = state.get("result")

    if result is not None:
        descriptor = format_descriptor(result, options, style)
    elif state.get("address"):
        descriptor = format_abbreviated(
            state["address"], options, dirty=bool(state.get("dirty")), broken=bool(state.get("broken"))
        )
    else:
        state.setdefault("errors", []).append({"node": "render_node", "error": "Nothing to render"})
        return state

    logger.debug(f"Rendered descriptor: {descriptor}")

    return {**state, "descriptor": descriptor}
