"""Descriptor rendering for describe results."""

from typing import Optional

from semverdesc.models.options import DEFAULT_ABBREV, DescriptorStyle, FormatOptions
from semverdesc.types.describe import DescribeResult


def effective_abbrev(address: str, options: FormatOptions) -> int:
    """Number of address characters to show.

    Never more than the address holds, since callers may hand in short or
    foreign hashes. ``abbrev=0`` together with ``long`` falls back to the
    default width.
    """
    if len(address) < options.abbrev:
        return len(address)
    if options.abbrev == 0 and options.long:
        return DEFAULT_ABBREV
    return options.abbrev


def _suffix(options: FormatOptions, dirty: bool, broken: bool) -> str:
    if broken and options.broken_mark:
        return options.broken_mark
    if dirty and options.dirty_mark:
        return options.dirty_mark
    return ""


def format_descriptor(
    result: DescribeResult,
    options: Optional[FormatOptions] = None,
    style: DescriptorStyle = DescriptorStyle.SEMVER,
) -> str:
    """Render a describe result.

    Semver style gives ``v0.2.1+15.gd71dd50``, legacy style the familiar
    ``v0.2.1-15-gd71dd50``. An exact match (or ``abbrev=0``) renders only the
    tag unless ``long`` is set.
    """
    options = options or FormatOptions()
    suffix = _suffix(options, bool(result.dirty), result.broken)

    if (result.distance == 0 or options.abbrev == 0) and not options.long:
        return f"{result.tag}{suffix}"

    short = result.address[: effective_abbrev(result.address, options)]
    if style == DescriptorStyle.LEGACY:
        return f"{result.tag}-{result.distance}-g{short}{suffix}"
    return f"{result.tag}+{result.distance}.g{short}{suffix}"


def format_abbreviated(
    address: str, options: Optional[FormatOptions] = None, dirty: bool = False, broken: bool = False
) -> str:
    """Render just the abbreviated address, used when no tag describes a commit."""
    options = options or FormatOptions()
    width = options.abbrev or DEFAULT_ABBREV
    return f"{address[:width]}{_suffix(options, dirty, broken)}"
