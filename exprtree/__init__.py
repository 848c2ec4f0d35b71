from exprtree.errors import ExpressionError, ParserError, EvaluationError, ConfigError
from exprtree.tree import No, ExpressionTree, evaluate
from exprtree.parser import ExpressionParser, build_tree

__all__ = [
    'ExpressionError',
    'ParserError',
    'EvaluationError',
    'ConfigError',
    'No',
    'ExpressionTree',
    'evaluate',
    'ExpressionParser',
    'build_tree',
]
