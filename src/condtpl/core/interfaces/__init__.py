from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .resolver import BlockEvaluatorProtocol, PathResolverProtocol
from .templating import TemplateEngineProtocol

__all__ = [
    'BlockEvaluatorProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'PathResolverProtocol',
    'TemplateEngineProtocol',
]
