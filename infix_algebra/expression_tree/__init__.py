"""Expression Tree Module

Node model, parser, simplifier and differentiator for infix expressions.
"""

from .expression import Expression, combine, add, subtract, multiply, divide
from .core.node import Node, LeafNode, BinaryOpNode
from .core.operators import (
  NodeType, OPERATORS, ZERO_TOLERANCE,
  is_numeric, parse_number, format_number, evaluate_binary_op
)
from .exceptions import (
  ExpressionError, DerivativeUnsupportedError, ExpressionSyntaxError,
  EmptyExpressionError, UnboundSymbolError
)
from .utils import (
  parse, simplify, derivative, print_tree,
  ExpressionSimplifier, ExpressionDifferentiator, ExpressionValidator, SymPyConverter
)

__all__ = [
  "Expression", "combine", "add", "subtract", "multiply", "divide",
  "Node", "LeafNode", "BinaryOpNode",
  "NodeType", "OPERATORS", "ZERO_TOLERANCE",
  "is_numeric", "parse_number", "format_number", "evaluate_binary_op",
  "ExpressionError", "DerivativeUnsupportedError", "ExpressionSyntaxError",
  "EmptyExpressionError", "UnboundSymbolError",
  "parse", "simplify", "derivative", "print_tree",
  "ExpressionSimplifier", "ExpressionDifferentiator", "ExpressionValidator", "SymPyConverter"
]
