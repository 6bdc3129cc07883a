"""
Option models for the describe walk and descriptor formatting.
"""

from enum import Enum
from typing import List

from pydantic import BaseModel, Field

DEFAULT_ABBREV = 7
DEFAULT_CANDIDATES = 10


class DescriptorStyle(str, Enum):
    """Output flavour of a rendered descriptor."""

    SEMVER = "semver"  # v1.2.0+3.gdeadbee
    LEGACY = "legacy"  # v1.2.0-3-gdeadbee, as git describe prints it


class DescribeOptions(BaseModel):
    """Options controlling how the ancestry walk picks a tag."""

    include_lightweight: bool = Field(
        default=False, description="Accept lightweight tags as well as annotated ones"
    )
    max_candidates: int = Field(
        default=DEFAULT_CANDIDATES,
        ge=0,
        description="Accepted candidates to collect before stopping; 0 only allows exact matches",
    )
    first_parent: bool = Field(default=False, description="Follow only the first parent of merge commits")
    debug: bool = Field(default=False, description="Trace the search strategy through the logger")
    all_refs: bool = Field(
        default=False, description="Use any ref under refs/ (branches, remotes, tags) as a marker"
    )
    match: List[str] = Field(default_factory=list, description="Glob patterns a marker name must match")
    exclude: List[str] = Field(default_factory=list, description="Glob patterns that reject a marker name")

    @property
    def accepts_lightweight(self) -> bool:
        return self.include_lightweight or self.all_refs


class FormatOptions(BaseModel):
    """Options controlling how a describe result is rendered."""

    abbrev: int = Field(
        default=DEFAULT_ABBREV,
        ge=0,
        description="Hex digits of the commit address to show; 0 suppresses the long format",
    )
    long: bool = Field(default=False, description="Always render the distance and address")
    dirty_mark: str = Field(default="", description="Suffix appended when the working tree is dirty")
    broken_mark: str = Field(default="", description="Suffix appended when dirtiness cannot be determined")
