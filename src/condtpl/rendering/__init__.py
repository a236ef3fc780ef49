"""Public API surface for condtpl.rendering."""
__all__ = [
    "evaluator",
    "factory_config",
    "path_resolver",
    "template_engine",
]
