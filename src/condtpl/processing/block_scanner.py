"""
block_scanner – Locate innermost conditional blocks.

An innermost block is an opening marker followed by the nearest closing
marker with no "/*if:" text anywhere between them. A candidate whose
nearest close would straddle a nested opening is rejected at that
position; the scan then retries from the nested opening, which is how the
leftmost genuinely innermost pair is reached.

Matches are non-overlapping and reported left-to-right, so every block
returned for one template state can be substituted in a single pass.
"""

import re
from typing import List

from condtpl.constants import CLOSE_MARKER, CONDITION_PATTERN, MARKER_SUFFIX, OPEN_PREFIX
from condtpl.core.models import ConditionalBlock

_OPEN = re.escape(OPEN_PREFIX)

BLOCK_RX = re.compile(
    rf'{_OPEN}({CONDITION_PATTERN}){re.escape(MARKER_SUFFIX)}'
    rf'((?:(?!{_OPEN})[\s\S])*?)'
    rf'{re.escape(CLOSE_MARKER)}'
)


def _to_block(match: 're.Match[str]') -> ConditionalBlock:
    return ConditionalBlock(
        condition=match.group(1),
        content=match.group(2),
        content_span=match.span(2),
        block_span=match.span(0),
    )


def scan_innermost(template: str) -> List[ConditionalBlock]:
    """Return the innermost blocks of *template* in left-to-right order."""
    return [_to_block(m) for m in BLOCK_RX.finditer(template)]


def has_markers(template: str) -> bool:
    """Cheap pre-check: True when *template* may contain a block."""
    return OPEN_PREFIX in template and CLOSE_MARKER in template
