"""Result types produced by the describe walk."""

from dataclasses import dataclass
from typing import Optional

from .graph import Marker


@dataclass
class Candidate:
    """A marker found during the walk and how far from the start it was."""

    marker: Marker
    distance: int

    @property
    def annotated(self) -> bool:
        return self.marker.annotated

    @property
    def name(self) -> str:
        return self.marker.name


@dataclass
class DescribeResult:
    """The nearest marker for a commit.

    ``dirty`` stays ``None`` until the working tree has been checked, and
    ``broken`` is set when that check could not be carried out.
    """

    address: str
    tag: str
    distance: int
    dirty: Optional[bool] = None
    broken: bool = False

    @property
    def exact_match(self) -> bool:
        return self.distance == 0
