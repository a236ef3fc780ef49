def test_can_import_all_protocols():
    # Import must succeed and expose the expected names
    import condtpl.core.interfaces as I

    assert hasattr(I, "BlockEvaluatorProtocol")
    assert hasattr(I, "LoggerFactoryProtocol")
    assert hasattr(I, "LoggerLikeProtocol")
    assert hasattr(I, "PathResolverProtocol")
    assert hasattr(I, "TemplateEngineProtocol")


def test_core_reexports_models():
    import condtpl.core as C

    for name in ("ABSENT", "ConditionalBlock", "Outcome", "PassResult", "RewriteReport", "RewriteState"):
        assert hasattr(C, name), name


def test_default_implementations_satisfy_protocols():
    from condtpl import BlockEvaluator, ConditionalTemplateEngine, KeyPathResolver
    from condtpl.core.interfaces import (
        BlockEvaluatorProtocol,
        LoggerFactoryProtocol,
        PathResolverProtocol,
        TemplateEngineProtocol,
    )
    from condtpl.logging import DefaultLoggerFactory

    assert isinstance(KeyPathResolver(), PathResolverProtocol)
    assert isinstance(BlockEvaluator(), BlockEvaluatorProtocol)
    assert isinstance(ConditionalTemplateEngine(), TemplateEngineProtocol)
    assert isinstance(DefaultLoggerFactory(), LoggerFactoryProtocol)
