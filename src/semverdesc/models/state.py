"""
State container passed between the describe workflow nodes.
"""

from typing import Any, Dict, List, Optional, TypedDict

from semverdesc.models.options import DescribeOptions, DescriptorStyle, FormatOptions
from semverdesc.types.describe import DescribeResult


class DescribeState(TypedDict, total=False):
    """State for the describe workflow.

    Using TypedDict for LangGraph compatibility. total=False means all fields
    are optional.
    """

    # Input
    repo_path: str  # Path of the repository to describe
    commitish: str  # Starting point, HEAD when omitted
    describe_options: DescribeOptions
    format_options: FormatOptions
    style: DescriptorStyle
    always: bool  # Fall back to the abbreviated address when no tag describes it
    dirty_check: bool  # Compare the working tree against HEAD

    # Describe Node Output
    address: Optional[str]  # Resolved start commit
    result: Optional[DescribeResult]  # None when the always fallback kicked in

    # Dirty State Node Output
    dirty: Optional[bool]  # None when the working tree was not checked
    broken: bool  # The working tree check failed

    # Render Node Output
    descriptor: Optional[str]

    # Global State
    errors: List[Dict[str, Any]]
