"""Public API surface for condtpl.processing."""
__all__ = [
    "block_scanner",
    "rewriter",
]
