from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from condtpl.constants import NEGATION


class _Absent:
    """Marker for a condition path that does not resolve."""

    _instance = None

    def __new__(cls) -> '_Absent':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return 'ABSENT'

    def __reduce__(self) -> str:
        return 'ABSENT'


ABSENT = _Absent()


class Outcome(Enum):
    KEPT = 'kept'
    DROPPED = 'dropped'


class RewriteState(Enum):
    """Lifecycle of one rewrite call; the last two are terminal."""
    SCANNING = 'scanning'
    INNERMOST_FOUND = 'innermost-found'
    SUBSTITUTING = 'substituting'
    FIXED_POINT = 'fixed-point'
    BOUND_EXCEEDED = 'bound-exceeded'

    @property
    def is_terminal(self) -> bool:
        return self in (RewriteState.FIXED_POINT, RewriteState.BOUND_EXCEEDED)


@dataclass(frozen=True)
class ConditionalBlock:
    """An innermost block located in one template state.

    Spans are ``(start, end)`` offsets into the scanned text; ``block_span``
    covers both markers, ``content_span`` only the text between them.
    """
    condition: str
    content: str
    content_span: Tuple[int, int]
    block_span: Tuple[int, int]

    @property
    def negated(self) -> bool:
        return self.condition.startswith(NEGATION)

    @property
    def path(self) -> str:
        return self.condition[len(NEGATION):] if self.negated else self.condition


@dataclass(frozen=True)
class PassResult:
    template: str
    changed: bool
    blocks: Tuple[ConditionalBlock, ...] = ()
    kept: int = 0
    dropped: int = 0


@dataclass(frozen=True)
class RewriteReport:
    """Summary of a full rewrite: final text, passes run and terminal state."""
    result: str
    passes: int
    state: RewriteState
    kept: int = 0
    dropped: int = 0
