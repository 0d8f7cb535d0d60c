import sympy as sp
from typing import Dict, Any
from ..core.node import Node, LeafNode, BinaryOpNode
from ..core.operators import format_number
from ...logging_system import LogLevel, is_enabled, log_info


class SymPyConverter:
  """Bridge between expression trees and SymPy.

  ``canonical_simplify`` is a mathematically sound alternative to the
  textual simplifier; nothing in the package calls it implicitly.
  """

  def __init__(self):
    self.simplification_strategies = [
      'simplify',
      'expand',
      'factor',
    ]

  @staticmethod
  def to_sympy(node: Node) -> sp.Expr:
    if isinstance(node, LeafNode):
      value = node.value
      if value is None:
        return sp.Symbol(node.token)
      if value.is_integer():
        return sp.Integer(int(value))
      return sp.Float(value)

    left = SymPyConverter.to_sympy(node.left)
    right = SymPyConverter.to_sympy(node.right)
    if node.operator == '+':
      return sp.Add(left, right)
    elif node.operator == '-':
      return sp.Add(left, sp.Mul(-1, right))
    elif node.operator == '*':
      return sp.Mul(left, right)
    elif node.operator == '/':
      return sp.Mul(left, sp.Pow(right, -1))
    elif node.operator == '^':
      return sp.Pow(left, right)
    raise ValueError(f"to_sympy reached unexpected operator {node.operator!r}")

  @staticmethod
  def from_sympy(sympy_expr: sp.Expr) -> Node:
    """Convert a SymPy expression into a tree of binary nodes"""
    if sympy_expr.is_Symbol:
      return LeafNode(str(sympy_expr))

    if sympy_expr.is_Number:
      return LeafNode(format_number(float(sympy_expr)))

    if isinstance(sympy_expr, sp.Pow):
      base = SymPyConverter.from_sympy(sympy_expr.args[0])
      exponent = SymPyConverter.from_sympy(sympy_expr.args[1])
      return BinaryOpNode('^', base, exponent)

    if isinstance(sympy_expr, (sp.Add, sp.Mul)):
      operator = '+' if isinstance(sympy_expr, sp.Add) else '*'
      # Multiple operands - build left-associative tree
      result = SymPyConverter.from_sympy(sympy_expr.args[0])
      for arg in sympy_expr.args[1:]:
        result = BinaryOpNode(operator, result, SymPyConverter.from_sympy(arg))
      return result

    raise ValueError(f"Cannot convert {type(sympy_expr).__name__} to an expression tree")

  @staticmethod
  def are_equivalent(first: Node, second: Node) -> bool:
    """True when the two trees are mathematically equal"""
    difference = SymPyConverter.to_sympy(first) - SymPyConverter.to_sympy(second)
    return sp.simplify(difference) == 0

  def canonical_simplify(self, node: Node) -> Dict[str, Any]:
    """
    Simplify with several SymPy strategies and keep the least complex result

    Returns:
        Dict with the simplified tree and metadata
    """
    sympy_expr = self.to_sympy(node)
    original_complexity = self._calculate_complexity(sympy_expr)

    best_simplified = sympy_expr
    best_complexity = original_complexity
    best_strategy = 'none'

    for strategy in self.simplification_strategies:
      simplified = getattr(sp, strategy)(sympy_expr)
      complexity = self._calculate_complexity(simplified)
      if complexity < best_complexity:
        best_simplified = simplified
        best_complexity = complexity
        best_strategy = strategy

    if is_enabled(LogLevel.DETAILED):
      log_info(f"canonical simplify {node.to_string()} -> {best_simplified} via {best_strategy}",
               LogLevel.DETAILED)
    return {
      'simplified': self.from_sympy(best_simplified),
      'strategy_used': best_strategy,
      'complexity_reduction': original_complexity - best_complexity,
      'original_complexity': original_complexity,
      'simplified_complexity': best_complexity
    }

  def _calculate_complexity(self, expr: sp.Expr) -> int:
    return len(expr.free_symbols) + expr.count_ops()

  @staticmethod
  def latex_representation(node: Node) -> str:
    return sp.latex(SymPyConverter.to_sympy(node))
