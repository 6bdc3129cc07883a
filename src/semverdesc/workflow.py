"""git-semver-describe workflow integration using LangGraph for orchestration."""

import argparse
import asyncio
import os
import sys
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv
from langgraph.graph import END, StateGraph
from loguru import logger

from semverdesc.config import cli_defaults
from semverdesc.models.options import DescribeOptions, DescriptorStyle, FormatOptions
from semverdesc.models.state import DescribeState
from semverdesc.nodes.describe_node import describe_node
from semverdesc.nodes.dirty_state_node import dirty_state_node
from semverdesc.nodes.render_node import render_node

FATAL_EXIT_CODE = 128


def create_workflow() -> StateGraph:
    """Create the describe workflow graph."""
    workflow = StateGraph(DescribeState)

    # Add nodes
    workflow.add_node("describe_node", describe_node)
    workflow.add_node("dirty_state_node", dirty_state_node)
    workflow.add_node("render_node", render_node)

    workflow.set_entry_point("describe_node")

    # Define edges
    workflow.add_edge("describe_node", "dirty_state_node")
    workflow.add_edge("dirty_state_node", "render_node")
    workflow.add_edge("render_node", END)

    return workflow.compile()


def initial_state(config: Dict[str, Any]) -> DescribeState:
    """Build the workflow input from a plain config dict."""
    return {
        "repo_path": config["repo_path"],
        "commitish": config.get("commitish", "HEAD"),
        "describe_options": config.get("describe_options") or DescribeOptions(),
        "format_options": config.get("format_options") or FormatOptions(),
        "style": config.get("style", DescriptorStyle.SEMVER),
        "always": config.get("always", False),
        "dirty_check": config.get("dirty_check", False),
        "errors": [],
    }


async def run_workflow_async(config: Dict[str, Any]) -> DescribeState:
    """Run the describe workflow asynchronously and return the final state."""
    app = create_workflow()
    final_state = None
    async for state in app.astream(initial_state(config)):
        final_state = list(state.values())[0]
        if final_state.get("errors"):
            logger.debug(f"Errors encountered: {final_state['errors']}")

    return final_state


def run_workflow(config: Dict[str, Any]) -> DescribeState:
    """Synchronous wrapper for the async workflow."""
    return asyncio.run(run_workflow_async(config))


def build_parser(defaults: Dict[str, Any]) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="git-semver-describe",
        description="Describe a commit relative to the nearest tag as a semver-compatible version",
    )
    parser.add_argument("commitish", nargs="?", default="HEAD", help="Commit-ish to describe (default: HEAD)")
    parser.add_argument("--path", type=str, default=".", help="Path to the Git repository")
    parser.add_argument(
        "--legacy",
        action="store_true",
        default=defaults["legacy"],
        help="Use the git describe format (tag-N-gHASH) instead of semver (tag+N.gHASH)",
    )

    search = parser.add_argument_group("search options")
    search.add_argument("--tags", action="store_true", default=defaults["tags"], help="Use lightweight tags too")
    search.add_argument("--all", action="store_true", help="Use any ref, branches and remotes included")
    search.add_argument(
        "--candidates",
        type=int,
        default=defaults["candidates"],
        metavar="N",
        help="Consider up to N most recent tags (default: %(default)s)",
    )
    search.add_argument("--exact-match", action="store_true", help="Only output exact matches (same as --candidates=0)")
    search.add_argument("--first-parent", action="store_true", help="Only follow the first parent of merge commits")
    search.add_argument(
        "--match", action="append", default=[], metavar="PATTERN", help="Only consider tags matching the glob PATTERN"
    )
    search.add_argument(
        "--exclude", action="append", default=[], metavar="PATTERN", help="Do not consider tags matching PATTERN"
    )
    search.add_argument("--debug", action="store_true", help="Trace the search strategy on stderr")

    output = parser.add_argument_group("output options")
    output.add_argument(
        "--abbrev",
        type=int,
        default=defaults["abbrev"],
        metavar="N",
        help="Use N hex digits of the commit; 0 shows only the tag (default: %(default)s)",
    )
    output.add_argument("--long", action="store_true", help="Always output the long format")
    output.add_argument(
        "--dirty",
        action="store_const",
        const="-dirty",
        default=defaults["dirty_mark"],
        help="Append -dirty when the working tree is dirty; --dirty=MARK appends MARK instead",
    )
    output.add_argument("--dirty-mark", dest="dirty", default=defaults["dirty_mark"], metavar="MARK", help=argparse.SUPPRESS)
    output.add_argument(
        "--broken",
        action="store_const",
        const="-broken",
        default=None,
        help="Append -broken when the working tree cannot be checked; --broken=MARK appends MARK instead",
    )
    output.add_argument("--broken-mark", dest="broken", default=None, metavar="MARK", help=argparse.SUPPRESS)
    output.add_argument("--always", action="store_true", help="Show the abbreviated commit when no tag fits")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    return parser


def config_from_args(args: argparse.Namespace) -> Dict[str, Any]:
    """Translate parsed CLI arguments into a workflow config."""
    if args.candidates < 0 or args.abbrev < 0:
        raise ValueError("--candidates and --abbrev must not be negative")

    describe_options = DescribeOptions(
        include_lightweight=args.tags,
        max_candidates=0 if args.exact_match else args.candidates,
        first_parent=args.first_parent,
        debug=args.debug,
        all_refs=args.all,
        match=args.match,
        exclude=args.exclude,
    )
    format_options = FormatOptions(
        abbrev=args.abbrev,
        long=args.long,
        dirty_mark=args.dirty or "",
        broken_mark=args.broken or "",
    )
    return {
        "repo_path": os.path.abspath(args.path),
        "commitish": args.commitish,
        "describe_options": describe_options,
        "format_options": format_options,
        "style": DescriptorStyle.LEGACY if args.legacy else DescriptorStyle.SEMVER,
        "always": args.always,
        "dirty_check": args.dirty is not None or args.broken is not None,
    }


def split_mark_options(argv: List[str]) -> List[str]:
    """Route ``--dirty=MARK`` and ``--broken=MARK`` to their mark options.

    The bare flags take no value, so a commit-ish after ``--dirty`` is never
    mistaken for a mark.
    """
    split = []
    for arg in argv:
        for flag in ("--dirty", "--broken"):
            if arg.startswith(f"{flag}="):
                arg = f"{flag}-mark={arg[len(flag) + 1:]}"
        split.append(arg)
    return split


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    try:
        defaults = cli_defaults()
    except ValueError as e:
        print(f"fatal: {e}", file=sys.stderr)
        return FATAL_EXIT_CODE

    parser = build_parser(defaults)
    args = parser.parse_args(split_mark_options(sys.argv[1:] if argv is None else argv))

    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if args.debug or args.verbose else "WARNING")

    try:
        config = config_from_args(args)
    except ValueError as e:
        parser.error(str(e))

    logger.info(f"Describing {config['commitish']} in {config['repo_path']}")
    final_state = run_workflow(config)

    if final_state.get("errors"):
        for error in final_state["errors"]:
            logger.debug(f"- {error['node']}: {error['error']}")
            print(f"fatal: {error['error']}", file=sys.stderr)
        return FATAL_EXIT_CODE

    print(final_state["descriptor"])
    return 0


if __name__ == "__main__":
    sys.exit(main())
