# Python

"""infix_algebra

Parse infix arithmetic into binary expression trees, simplify them by
collecting like terms and factors, differentiate them, and print them back
as fully parenthesized text.
"""

from .expression_tree import (
  Expression, add, subtract, multiply, divide, Node, LeafNode, BinaryOpNode,
  parse, simplify, derivative, print_tree,
  ExpressionError, DerivativeUnsupportedError, ExpressionSyntaxError,
  EmptyExpressionError, UnboundSymbolError,
  ExpressionValidator, SymPyConverter
)
from .logging_system import LogLevel, configure_logging, set_log_level, get_logger


__version__ = "0.1.0"
__all__ = [
  "Expression", "Node", "LeafNode", "BinaryOpNode",
  "parse", "simplify", "derivative", "print_tree",
  "add", "subtract", "multiply", "divide",
  "ExpressionError", "DerivativeUnsupportedError", "ExpressionSyntaxError",
  "EmptyExpressionError", "UnboundSymbolError",
  "ExpressionValidator", "SymPyConverter",
  "LogLevel", "configure_logging", "set_log_level", "get_logger"
]
