from __future__ import annotations

from typing import Any, Mapping, Optional

from condtpl.constants import CLOSE_MARKER, DEFAULT_MAX_PASSES, OPEN_PREFIX
from condtpl.core.interfaces.logging import LoggerFactoryProtocol, LoggerLikeProtocol
from condtpl.core.interfaces.templating import TemplateEngineProtocol
from condtpl.core.models import (
    ABSENT,
    ConditionalBlock,
    Outcome,
    PassResult,
    RewriteReport,
    RewriteState,
)
from condtpl.logging.factory import DefaultLoggerFactory
from condtpl.logging.helpers import setup_base_logger
from condtpl.processing.block_scanner import scan_innermost
from condtpl.processing.rewriter import TemplateRewriter
from condtpl.rendering.evaluator import BlockEvaluator, evaluate, is_truthy
from condtpl.rendering.factory_config import RewriterConfig
from condtpl.rendering.path_resolver import DefaultPathResolver, KeyPathResolver, resolve
from condtpl.rendering.template_engine import ConditionalTemplateEngine

__version__ = '0.1.0'

_DEFAULT_REWRITER = TemplateRewriter()


def process(template: str, data: Optional[Mapping[str, Any]]) -> str:
    """Resolve every /*if:…*/…/*endif*/ block of *template* against *data*."""
    return _DEFAULT_REWRITER.process(template, data)


def process_with_report(template: str, data: Optional[Mapping[str, Any]]) -> RewriteReport:
    """Like :func:`process` but return the full :class:`RewriteReport`."""
    return _DEFAULT_REWRITER.rewrite(template, data)


def template_engine_factory(
    *,
    max_passes: int = DEFAULT_MAX_PASSES,
    logger: Optional[LoggerLikeProtocol] = None,
    logger_factory: Optional[LoggerFactoryProtocol] = None,
) -> ConditionalTemplateEngine:
    """Factory helper that returns a configured ConditionalTemplateEngine.

    *logger* is shared by every component; *logger_factory* (e.g.
    :class:`DefaultLoggerFactory`) hands out one scoped logger each.
    """
    cfg = RewriterConfig(max_passes=max_passes)
    return ConditionalTemplateEngine(config=cfg, logger=logger, logger_factory=logger_factory)


__all__ = [
    'ABSENT',
    'CLOSE_MARKER',
    'OPEN_PREFIX',
    'BlockEvaluator',
    'ConditionalBlock',
    'ConditionalTemplateEngine',
    'DefaultLoggerFactory',
    'DefaultPathResolver',
    'KeyPathResolver',
    'Outcome',
    'PassResult',
    'RewriteReport',
    'RewriteState',
    'RewriterConfig',
    'TemplateEngineProtocol',
    'TemplateRewriter',
    'evaluate',
    'is_truthy',
    'process',
    'process_with_report',
    'resolve',
    'scan_innermost',
    'setup_base_logger',
    'template_engine_factory',
]
