from __future__ import annotations

"""Public surface for condtpl.core.

Stable import location for protocol types and data models:

    from condtpl.core import ABSENT, Outcome, TemplateEngineProtocol, ...
"""

from condtpl.core.interfaces import (
    BlockEvaluatorProtocol,
    LoggerFactoryProtocol,
    LoggerLikeProtocol,
    PathResolverProtocol,
    TemplateEngineProtocol,
)
from condtpl.core.models import (
    ABSENT,
    ConditionalBlock,
    Outcome,
    PassResult,
    RewriteReport,
    RewriteState,
)

__all__ = [
    # Protocols
    "BlockEvaluatorProtocol",
    "LoggerFactoryProtocol",
    "LoggerLikeProtocol",
    "PathResolverProtocol",
    "TemplateEngineProtocol",
    # Models
    "ABSENT",
    "ConditionalBlock",
    "Outcome",
    "PassResult",
    "RewriteReport",
    "RewriteState",
]
