from __future__ import annotations

"""Project-wide constants used across modules.

Marker syntax is fixed and not configurable:

    /*if:<condition>*/ ... /*endif*/

where <condition> is an optional "!" followed by ASCII letters, digits,
underscores and dots.
"""

OPEN_PREFIX: str = '/*if:'
MARKER_SUFFIX: str = '*/'
CLOSE_MARKER: str = '/*endif*/'

NEGATION: str = '!'
PATH_SEPARATOR: str = '.'

# Condition grammar, shared by the block scanner and the evaluator.
CONDITION_PATTERN: str = r'!?[A-Za-z0-9_.]+'

# Ceiling on rewrite passes. Each pass strips one nesting layer, so any
# realistic template reaches its fixed point long before this.
DEFAULT_MAX_PASSES: int = 64
