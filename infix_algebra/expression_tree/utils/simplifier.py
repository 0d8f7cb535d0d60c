from functools import reduce
from typing import Dict, List, Tuple, Union
from ..core.node import Node, LeafNode, BinaryOpNode
from ..core.operators import ZERO_TOLERANCE, format_number, is_close, numeric_power
from ...logging_system import LogLevel, is_enabled, log_debug, log_warning


class _ConstantKey:
  """Bucket for numeric contributions, kept apart from every textual key"""

  def __repr__(self) -> str:
    return 'constant'


CONSTANT = _ConstantKey()

# key -> [accumulated value, node to re-emit for the key]
Bucket = Dict[Union[str, _ConstantKey], List]


class ExpressionSimplifier:
  """Collects like terms and like factors using their printed text as keys.

  Keys are never canonicalised: ``x*y`` and ``y*x`` stay different terms.
  Numeric factors of a product are summed rather than multiplied, so
  ``2*3`` becomes ``5`` and ``x*0`` becomes ``x``.
  """

  @staticmethod
  def simplify(node: Node) -> Node:
    result = ExpressionSimplifier._simplify_recursive(node)
    if is_enabled(LogLevel.VERBOSE):
      log_debug(f"simplified {node.to_string()} -> {result.to_string()}")
    return result

  @staticmethod
  def _simplify_recursive(node: Node) -> Node:
    if not isinstance(node, BinaryOpNode):
      return node.copy()

    left = ExpressionSimplifier._simplify_recursive(node.left)
    right = ExpressionSimplifier._simplify_recursive(node.right)

    if node.operator in ('+', '-'):
      return ExpressionSimplifier._simplify_sum(BinaryOpNode(node.operator, left, right))
    if node.operator == '*':
      return ExpressionSimplifier._simplify_product(BinaryOpNode('*', left, right))
    if node.operator == '^':
      return ExpressionSimplifier._simplify_power(left, right)
    return BinaryOpNode(node.operator, left, right)

  # Sums

  @staticmethod
  def _simplify_sum(node: BinaryOpNode) -> Node:
    terms: Bucket = {}
    ExpressionSimplifier._collect_terms(node, 1.0, terms)

    parts = []
    for key, (coefficient, term) in terms.items():
      if abs(coefficient) < ZERO_TOLERANCE:
        continue
      if key is CONSTANT:
        parts.append(LeafNode(format_number(coefficient)))
      elif is_close(coefficient, 1.0):
        parts.append(term.copy())
      elif is_close(coefficient, -1.0):
        parts.append(BinaryOpNode('-', LeafNode('0'), term.copy()))
      else:
        parts.append(BinaryOpNode('*', LeafNode(format_number(coefficient)), term.copy()))

    if not parts:
      return LeafNode('0')
    return reduce(lambda acc, part: BinaryOpNode('+', acc, part), parts)

  @staticmethod
  def _collect_terms(node: Node, sign: float, terms: Bucket):
    if isinstance(node, BinaryOpNode) and node.operator in ('+', '-'):
      ExpressionSimplifier._collect_terms(node.left, sign, terms)
      right_sign = -sign if node.operator == '-' else sign
      ExpressionSimplifier._collect_terms(node.right, right_sign, terms)

    elif isinstance(node, BinaryOpNode) and node.operator == '*':
      coefficient, term = ExpressionSimplifier._split_coefficient(node)
      if coefficient is None:
        key = f"{node.left.to_string()}*{node.right.to_string()}"
        _accumulate(terms, key, sign, LeafNode(key))
      else:
        key = term.to_string()
        if isinstance(term, BinaryOpNode) and term.operator in ('+', '-'):
          # a nested sum stays opaque so later passes cannot expand it
          term = LeafNode(key)
        _accumulate(terms, key, sign * coefficient, term)

    elif node.is_numeric:
      # zeros never claim a position in the term order
      if node.value != 0:
        _accumulate(terms, CONSTANT, sign * node.value, node)

    else:
      _accumulate(terms, node.to_string(), sign, node)

  @staticmethod
  def _split_coefficient(node: BinaryOpNode) -> Tuple:
    """(coefficient, term) when exactly one side is numeric, else (None, None)"""
    if node.left.is_numeric and not node.right.is_numeric:
      return node.left.value, node.right
    if node.right.is_numeric and not node.left.is_numeric:
      return node.right.value, node.left
    return None, None

  # Products

  @staticmethod
  def _simplify_product(node: BinaryOpNode) -> Node:
    factors: Bucket = {}
    ExpressionSimplifier._collect_factors(node, factors)

    parts = []
    for key, (amount, factor) in factors.items():
      if abs(amount) < ZERO_TOLERANCE:
        if key is CONSTANT:
          log_warning(f"numeric factors of {node.to_string()} sum to zero and were dropped")
        continue
      if key is CONSTANT:
        if not is_close(amount, 1.0):
          parts.insert(0, LeafNode(format_number(amount)))
      elif is_close(amount, 1.0):
        parts.append(factor.copy())
      else:
        parts.append(BinaryOpNode('^', factor.copy(), LeafNode(format_number(amount))))

    if not parts:
      return LeafNode('1')
    result = reduce(lambda acc, part: BinaryOpNode('*', acc, part), parts)

    # a raised factor can print like another factor, e.g. x*x next to (x^2)
    texts = [part.to_string() for part in parts]
    if len(set(texts)) < len(texts):
      return ExpressionSimplifier._simplify_product(result)
    return result

  @staticmethod
  def _collect_factors(node: Node, factors: Bucket):
    if isinstance(node, BinaryOpNode) and node.operator == '*':
      ExpressionSimplifier._collect_factors(node.left, factors)
      ExpressionSimplifier._collect_factors(node.right, factors)
    elif node.is_numeric:
      _accumulate(factors, CONSTANT, node.value, node)
    else:
      _accumulate(factors, node.to_string(), 1.0, node)

  # Powers

  @staticmethod
  def _simplify_power(base: Node, exponent: Node) -> Node:
    if exponent.to_string() == '1':
      return base
    if exponent.to_string() == '0':
      return LeafNode('1')
    if base.to_string() == '0':
      return LeafNode('0')
    if base.to_string() == '1':
      return LeafNode('1')
    if base.is_numeric and exponent.is_numeric:
      return LeafNode(format_number(numeric_power(base.value, exponent.value)))
    return BinaryOpNode('^', base, exponent)


def _accumulate(bucket: Bucket, key, amount: float, node: Node):
  if key in bucket:
    bucket[key][0] += amount
  else:
    bucket[key] = [amount, node]


def simplify(node: Node) -> Node:
  """Simplify a tree without touching the input; returns a new tree"""
  return ExpressionSimplifier.simplify(node)
