from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, runtime_checkable

from condtpl.core.models import Outcome


@runtime_checkable
class PathResolverProtocol(Protocol):
    """Looks up a dotted key path inside caller-supplied data."""

    def resolve(self, data: Optional[Mapping[str, Any]], path: str) -> Any:
        """Return the value at *path* or ``ABSENT``."""
        ...


@runtime_checkable
class BlockEvaluatorProtocol(Protocol):
    """Decides whether a conditional block is kept or dropped."""

    def evaluate(self, condition: str, data: Optional[Mapping[str, Any]]) -> Outcome:
        ...
