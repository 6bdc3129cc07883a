#!/usr/bin/env python3
"""
examples/describe_demo.py

Demonstrates describing a repository with git-semver-describe, printing the
semver and legacy descriptors side by side together with the search trace.
"""

import argparse
import os
import sys

from loguru import logger

from semverdesc.describer import describe_path
from semverdesc.errors import DescribeError
from semverdesc.formatter import format_descriptor
from semverdesc.models.options import DescribeOptions, DescriptorStyle, FormatOptions


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Demonstrate git-semver-describe on a repository")
    parser.add_argument(
        "--repo-path",
        type=str,
        default=os.getcwd(),
        help="Path to Git repository (default: current directory)",
    )
    parser.add_argument("--tags", action="store_true", help="Include lightweight tags")
    parser.add_argument("commitish", nargs="?", default="HEAD")
    return parser.parse_args()


def main():
    """Run the describe demo."""
    args = parse_args()

    logger.remove()
    logger.add(sys.stderr, level="DEBUG", format="{message}")

    print(f"Describing {args.commitish} in repository: {args.repo_path}")

    try:
        result = describe_path(
            args.repo_path,
            args.commitish,
            DescribeOptions(include_lightweight=args.tags, debug=True),
            dirty=True,
        )
    except DescribeError as e:
        print(f"Error describing repository: {str(e)}", file=sys.stderr)
        return 1

    options = FormatOptions(dirty_mark="-dirty")
    print(f"\nNearest tag: {result.tag} ({result.distance} commits ago)")
    print(f"Semver:      {format_descriptor(result, options, DescriptorStyle.SEMVER)}")
    print(f"Legacy:      {format_descriptor(result, options, DescriptorStyle.LEGACY)}")
    print(f"Long:        {format_descriptor(result, FormatOptions(long=True), DescriptorStyle.SEMVER)}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
