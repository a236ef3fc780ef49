"""
rewriter – Fixed-point rewriting of conditional blocks.

Each pass scans the current template state for innermost blocks, evaluates
every one of them and substitutes them left-to-right in one sweep:

  • kept    → the block is replaced by its content
  • dropped → the block is replaced by ""

Passes repeat until one changes nothing. Every pass strips one nesting
layer, so depth N converges in N + 1 passes. The pass count is capped by
``RewriterConfig.max_passes``; reaching the cap returns the partially
processed text and logs a warning.
"""

from collections.abc import Mapping
from typing import Any, List, Optional

from condtpl.core.interfaces.logging import LoggerLikeProtocol
from condtpl.core.interfaces.resolver import BlockEvaluatorProtocol
from condtpl.core.models import Outcome, PassResult, RewriteReport, RewriteState
from condtpl.logging.helpers import get_logger, trace
from condtpl.processing.block_scanner import has_markers, scan_innermost
from condtpl.rendering.evaluator import BlockEvaluator
from condtpl.rendering.factory_config import RewriterConfig


def check_inputs(template: Any, data: Any) -> None:
    """Raise TypeError unless *template* is a str and *data* a Mapping or None."""
    if not isinstance(template, str):
        raise TypeError(f'template must be a str, not {type(template).__name__}')
    if data is not None and not isinstance(data, Mapping):
        raise TypeError(f'data must be a Mapping or None, not {type(data).__name__}')


class TemplateRewriter:
    """Innermost-first rewriter driving a :class:`BlockEvaluatorProtocol`."""

    def __init__(
        self,
        *,
        evaluator: Optional[BlockEvaluatorProtocol] = None,
        config: Optional[RewriterConfig] = None,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._eval = evaluator or BlockEvaluator()
        self._cfg = config or RewriterConfig()
        self._log = logger or get_logger('rewriter')

    @property
    def max_passes(self) -> int:
        return self._cfg.max_passes

    def rewrite_pass(self, template: str, data: Optional[Mapping[str, Any]]) -> PassResult:
        """Run one scan-and-substitute pass over *template*.

        Pure: returns the new text together with a ``changed`` flag instead
        of mutating shared state.
        """
        blocks = tuple(scan_innermost(template)) if has_markers(template) else ()
        if not blocks:
            trace(self._log, 'no innermost block', state=RewriteState.SCANNING.value)
            return PassResult(template=template, changed=False)

        trace(self._log, 'innermost blocks found',
              state=RewriteState.INNERMOST_FOUND.value, count=len(blocks))

        out: List[str] = []
        pos = 0
        kept = dropped = 0
        for blk in blocks:
            start, end = blk.block_span
            out.append(template[pos:start])
            if self._eval.evaluate(blk.condition, data) is Outcome.KEPT:
                out.append(blk.content)
                kept += 1
            else:
                dropped += 1
            pos = end
        out.append(template[pos:])

        trace(self._log, 'blocks substituted',
              state=RewriteState.SUBSTITUTING.value, kept=kept, dropped=dropped)
        return PassResult(
            template=''.join(out),
            changed=True,
            blocks=blocks,
            kept=kept,
            dropped=dropped,
        )

    def rewrite(self, template: str, data: Optional[Mapping[str, Any]]) -> RewriteReport:
        """Rewrite *template* to its fixed point (or the pass cap)."""
        check_inputs(template, data)

        current = template
        passes = kept = dropped = 0
        while passes < self._cfg.max_passes:
            step = self.rewrite_pass(current, data)
            passes += 1
            if not step.changed:
                return RewriteReport(current, passes, RewriteState.FIXED_POINT, kept, dropped)
            current = step.template
            kept += step.kept
            dropped += step.dropped

        if has_markers(current) and scan_innermost(current):
            self._log.warning(
                '⚠  rewrite stopped after %d passes with blocks left; returning partial result',
                passes,
            )
            return RewriteReport(current, passes, RewriteState.BOUND_EXCEEDED, kept, dropped)
        return RewriteReport(current, passes, RewriteState.FIXED_POINT, kept, dropped)

    def process(self, template: str, data: Optional[Mapping[str, Any]]) -> str:
        """Return *template* with every conditional block resolved."""
        return self.rewrite(template, data).result
