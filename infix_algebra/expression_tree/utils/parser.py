"""
Infix Parser

Turns an infix string into a binary expression tree by splitting on the last
operator found at parenthesis depth zero. There is no precedence table:
``"5*x+2*x"`` splits on the final ``*``, giving ``(((5*x)+2)*x)``.
"""

from ..core.node import Node, LeafNode, BinaryOpNode
from ..core.operators import is_operator
from ..exceptions import ExpressionSyntaxError
from ...logging_system import LogLevel, is_enabled, log_debug


def parse(text: str, strict: bool = False) -> Node:
  """
  Parse infix text into a tree.

  Args:
      text: Source expression
      strict: Reject malformed input instead of building a best-effort tree

  Returns:
      Root node of the parsed tree

  Raises:
      ExpressionSyntaxError: strict parsing found problems in ``text``
  """
  if strict:
    from .validator import ExpressionValidator
    issues = ExpressionValidator.find_issues(text)
    if issues:
      raise ExpressionSyntaxError(text, issues)

  root = _parse_recursive(text)
  if is_enabled(LogLevel.VERBOSE):
    log_debug(f"parsed {text!r} -> {root.to_string()}")
  return root


def find_split_index(expression: str) -> int:
  """Index of the last operator outside parentheses, or -1"""
  depth = 0
  for i in range(len(expression) - 1, -1, -1):
    char = expression[i]
    if char == ')':
      depth += 1
    elif char == '(':
      depth -= 1
    elif depth == 0 and is_operator(char):
      return i
  return -1


def _parse_recursive(expression: str) -> Node:
  expression = expression.strip()

  # One layer only, whether or not the two parentheses actually pair up
  if expression.startswith('(') and expression.endswith(')'):
    expression = expression[1:-1]

  split = find_split_index(expression)
  if split == -1:
    return LeafNode(expression)

  return BinaryOpNode(
    expression[split],
    _parse_recursive(expression[:split]),
    _parse_recursive(expression[split + 1:])
  )
