"""
template_engine – Concrete TemplateEngineProtocol implementation for condtpl.

Wires the path resolver, the block evaluator and the fixed-point rewriter
behind the small Protocol surface used by callers that accept any
template engine.
"""

from typing import Any, Mapping, Optional

from condtpl.core.interfaces.logging import LoggerFactoryProtocol, LoggerLikeProtocol
from condtpl.core.interfaces.resolver import BlockEvaluatorProtocol, PathResolverProtocol
from condtpl.core.interfaces.templating import TemplateEngineProtocol
from condtpl.core.models import RewriteReport
from condtpl.logging.helpers import get_logger
from condtpl.processing.rewriter import TemplateRewriter, check_inputs
from condtpl.rendering.evaluator import BlockEvaluator
from condtpl.rendering.factory_config import RewriterConfig


class ConditionalTemplateEngine(TemplateEngineProtocol):
    """Conditional-block template engine using :class:`TemplateRewriter`.

    Rules:
      • /*if:flag*/…/*endif*/       → kept when data["flag"] is truthy
      • /*if:!flag*/…/*endif*/      → kept when it is falsy or missing
      • /*if:user.isAdmin*/…        → dotted lookup into nested mappings
      • unmatched markers           → left verbatim

    Logging: a single *logger* is shared by the engine, the rewriter and the
    evaluator it builds. Otherwise *logger_factory* supplies one scoped
    logger per component ("templates", "rewriter", "evaluator").

    A prebuilt *rewriter* already carries its evaluator and config, so it
    cannot be combined with *resolver*, *evaluator* or *config*.
    """

    def __init__(
        self,
        *,
        resolver: Optional[PathResolverProtocol] = None,
        evaluator: Optional[BlockEvaluatorProtocol] = None,
        rewriter: Optional[TemplateRewriter] = None,
        config: Optional[RewriterConfig] = None,
        logger: Optional[LoggerLikeProtocol] = None,
        logger_factory: Optional[LoggerFactoryProtocol] = None,
    ) -> None:
        self._logger = logger
        self._factory = logger_factory
        self._log = self._scoped("templates")
        if rewriter is not None:
            clashing = [n for n, v in (("resolver", resolver), ("evaluator", evaluator), ("config", config))
                        if v is not None]
            if clashing:
                raise TypeError(f"rewriter cannot be combined with {', '.join(clashing)}")
        else:
            ev = evaluator or BlockEvaluator(resolver=resolver, logger=self._scoped("evaluator"))
            rewriter = TemplateRewriter(evaluator=ev, config=config, logger=self._scoped("rewriter"))
        self._rewriter = rewriter

    def _scoped(self, name: str) -> LoggerLikeProtocol:
        if self._logger is not None:
            return self._logger
        if self._factory is not None:
            return self._factory.get_logger(name)
        return get_logger(name)

    def report(self, template: str, variables: Optional[Mapping[str, Any]]) -> RewriteReport:
        """Rewrite *template* and return the full :class:`RewriteReport`."""
        return self._rewriter.rewrite(template, variables)

    def render(self, template: str, variables: Optional[Mapping[str, Any]]) -> str:  # type: ignore[override]
        """Render *template* resolving every conditional block via *variables*."""
        check_inputs(template, variables)
        try:
            return self._rewriter.process(template, variables)
        except Exception as exc:  # noqa: BLE001
            # Templating must never crash the caller; fall back to the input.
            self._log.error("template rendering failed: %s", exc)
            return template
