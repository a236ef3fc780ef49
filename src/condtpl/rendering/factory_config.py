# src/condtpl/rendering/factory_config.py
from __future__ import annotations

"""Typed configuration dataclasses for the rewrite engine.

Optional for callers: every factory falls back to the defaults below.
"""

from dataclasses import dataclass

from condtpl.constants import DEFAULT_MAX_PASSES


@dataclass(frozen=True)
class RewriterConfig:
    """Configuration for building a TemplateRewriter.

    max_passes caps the number of rewrite passes; hitting it returns the
    partially processed template instead of failing.
    """
    max_passes: int = DEFAULT_MAX_PASSES

    def __post_init__(self) -> None:
        if isinstance(self.max_passes, bool) or not isinstance(self.max_passes, int):
            raise ValueError(f'max_passes must be an integer (got {self.max_passes!r})')
        if self.max_passes < 1:
            raise ValueError(f'max_passes must be >= 1 (got {self.max_passes})')
