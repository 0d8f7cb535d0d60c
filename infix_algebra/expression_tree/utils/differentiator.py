from ..core.node import Node, LeafNode, BinaryOpNode
from ..core.operators import format_number
from ..exceptions import DerivativeUnsupportedError
from .simplifier import simplify
from ...logging_system import LogLevel, is_enabled, log_debug


class ExpressionDifferentiator:
  """Rule-based symbolic differentiation over expression trees"""

  @staticmethod
  def derivative(node: Node, variable: str) -> Node:
    """
    Differentiate a tree with respect to ``variable`` and simplify the result.

    Raises:
        DerivativeUnsupportedError: a division node, or a power node that is
            not ``variable ^ number``, was reached
    """
    raw = ExpressionDifferentiator._derive(node, variable)
    result = simplify(raw)
    if is_enabled(LogLevel.VERBOSE):
      log_debug(f"d/d{variable} {node.to_string()} -> {raw.to_string()} -> {result.to_string()}")
    return result

  @staticmethod
  def _derive(node: Node, variable: str) -> Node:
    if isinstance(node, LeafNode):
      return LeafNode('1' if node.token == variable else '0')

    left, right = node.left, node.right

    if node.operator in ('+', '-'):
      return BinaryOpNode(
        node.operator,
        ExpressionDifferentiator._derive(left, variable),
        ExpressionDifferentiator._derive(right, variable)
      )

    if node.operator == '*':
      # variable * c -> c, trusting c to be free of the variable
      if _is_variable(left, variable) and not right.is_numeric:
        return right.copy()
      if _is_variable(right, variable) and not left.is_numeric:
        return left.copy()
      return BinaryOpNode(
        '+',
        BinaryOpNode('*', ExpressionDifferentiator._derive(left, variable), right.copy()),
        BinaryOpNode('*', left.copy(), ExpressionDifferentiator._derive(right, variable))
      )

    if node.operator == '^' and _is_variable(left, variable) and right.is_numeric:
      return BinaryOpNode(
        '*',
        right.copy(),
        BinaryOpNode('^', LeafNode(variable), LeafNode(format_number(right.value - 1)))
      )

    raise DerivativeUnsupportedError(node.to_string(), variable)


def _is_variable(node: Node, variable: str) -> bool:
  return isinstance(node, LeafNode) and node.token == variable


def derivative(node: Node, variable: str) -> Node:
  return ExpressionDifferentiator.derivative(node, variable)
