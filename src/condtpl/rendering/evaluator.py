"""
evaluator – Decide whether a conditional block is kept or dropped.

Truthiness is permissive and fixed, independent of Python's
own ``bool()``:

  • falsy  → False, numeric zero, NaN, "", None and ABSENT
  • truthy → everything else, including [], {}, () and set()
"""

import numbers
from typing import Any, Mapping, Optional, Tuple

from condtpl.constants import NEGATION
from condtpl.core.interfaces.logging import LoggerLikeProtocol
from condtpl.core.interfaces.resolver import BlockEvaluatorProtocol, PathResolverProtocol
from condtpl.core.models import ABSENT, Outcome
from condtpl.logging.helpers import get_logger
from condtpl.rendering.path_resolver import KeyPathResolver


def is_truthy(value: Any) -> bool:
    """Classify *value* with the fixed falsy set."""
    if value is None or value is ABSENT or value is False:
        return False
    if isinstance(value, str):
        return value != ""
    if isinstance(value, numbers.Number):
        # NaN is the only number unequal to itself.
        return bool(value != 0 and value == value)
    return True


def split_condition(condition: str) -> Tuple[bool, str]:
    """Return ``(negated, path)`` for a raw condition string."""
    if condition.startswith(NEGATION):
        return True, condition[len(NEGATION):]
    return False, condition


def decide(truthy: bool, negated: bool) -> Outcome:
    return Outcome.KEPT if truthy != negated else Outcome.DROPPED


class BlockEvaluator(BlockEvaluatorProtocol):
    """Resolve a block condition against data and return its outcome."""

    def __init__(
        self,
        *,
        resolver: Optional[PathResolverProtocol] = None,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._resolver = resolver or KeyPathResolver()
        self._log = logger or get_logger("evaluator")

    def evaluate(self, condition: str, data: Optional[Mapping[str, Any]]) -> Outcome:  # type: ignore[override]
        negated, path = split_condition(condition)
        value = self._resolver.resolve(data, path)
        outcome = decide(is_truthy(value), negated)
        self._log.debug("condition %r → %s", condition, outcome.value)
        return outcome


_DEFAULT_EVALUATOR = BlockEvaluator()


def evaluate(condition: str, data: Optional[Mapping[str, Any]]) -> Outcome:
    """Module-level shortcut over a default :class:`BlockEvaluator`."""
    return _DEFAULT_EVALUATOR.evaluate(condition, data)
