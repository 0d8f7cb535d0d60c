import numbers
import numpy as np
import sympy as sp
from typing import Optional, Union, Mapping, Any, List
from .core.node import Node, LeafNode, BinaryOpNode
from .core.operators import format_number
from .exceptions import EmptyExpressionError
from .utils.parser import parse
from .utils.simplifier import simplify
from .utils.differentiator import derivative
from .utils.sympy_utils import SymPyConverter
from .utils.tree_utils import print_tree, calculate_tree_depth, get_variables, clone_tree

Operand = Union['Expression', Node, str, numbers.Real]


class Expression:
  """Wrapper around an optional expression tree.

  An Expression starts empty and is populated by ``parse_expression``, or is
  returned already simplified by ``simplify``, ``derivative`` and the
  arithmetic combinators. Those operations never modify the receiver.
  """

  __slots__ = ('_root', '_string_cache')

  def __init__(self, root: Optional[Node] = None):
    self._root = root
    self._string_cache: Optional[str] = None

  @property
  def root(self) -> Optional[Node]:
    return self._root

  @root.setter
  def root(self, node: Optional[Node]):
    self._root = node
    self.clear_cache()

  @classmethod
  def from_string(cls, text: str, strict: bool = False) -> 'Expression':
    expression = cls()
    expression.parse_expression(text, strict=strict)
    return expression

  @classmethod
  def from_sympy(cls, sympy_expr: sp.Expr) -> 'Expression':
    return cls(SymPyConverter.from_sympy(sympy_expr))

  def parse_expression(self, text: str, strict: bool = False):
    """Replace this expression's tree with the parse of ``text``"""
    self.root = parse(text, strict=strict)

  def is_empty(self) -> bool:
    return self.root is None

  def to_string(self) -> str:
    if self._string_cache is None:
      self._string_cache = print_tree(self.root)
    return self._string_cache

  def clear_cache(self):
    self._string_cache = None

  def copy(self) -> 'Expression':
    return Expression(clone_tree(self.root))

  def _require_root(self) -> Node:
    if self.root is None:
      raise EmptyExpressionError("Expression has no tree; parse a string first")
    return self.root

  def simplify(self) -> 'Expression':
    return Expression(simplify(self._require_root()))

  def derivative(self, variable: str) -> 'Expression':
    return Expression(derivative(self._require_root(), variable))

  # Arithmetic combinators

  def _combine(self, operator: str, other: Operand, reflected: bool = False) -> 'Expression':
    if reflected:
      return Expression(combine(operator, other, self))
    return Expression(combine(operator, self, other))

  def add(self, other: Operand) -> 'Expression':
    return self._combine('+', other)

  def subtract(self, other: Operand) -> 'Expression':
    return self._combine('-', other)

  def multiply(self, other: Operand) -> 'Expression':
    return self._combine('*', other)

  def divide(self, other: Operand) -> 'Expression':
    return self._combine('/', other)

  def __add__(self, other):
    return self.add(other)

  def __sub__(self, other):
    return self.subtract(other)

  def __mul__(self, other):
    return self.multiply(other)

  def __truediv__(self, other):
    return self.divide(other)

  def __radd__(self, other):
    return self._combine('+', other, reflected=True)

  def __rsub__(self, other):
    return self._combine('-', other, reflected=True)

  def __rmul__(self, other):
    return self._combine('*', other, reflected=True)

  def __rtruediv__(self, other):
    return self._combine('/', other, reflected=True)

  # Inspection

  def evaluate(self, bindings: Optional[Mapping[str, Any]] = None, **kwargs) -> np.ndarray:
    """Evaluate numerically; symbols are looked up in ``bindings`` and ``kwargs``"""
    values = dict(bindings or {})
    values.update(kwargs)
    return self._require_root().evaluate(values)

  def size(self) -> int:
    return 0 if self.root is None else self.root.size()

  def depth(self) -> int:
    return 0 if self.root is None else calculate_tree_depth(self.root)

  def variables(self) -> List[str]:
    return [] if self.root is None else get_variables(self.root)

  def to_sympy(self) -> sp.Expr:
    return SymPyConverter.to_sympy(self._require_root())

  def latex(self) -> str:
    return SymPyConverter.latex_representation(self._require_root())

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    return f"Expression({self.to_string()!r})"

  def __hash__(self) -> int:
    return hash(self.root)

  def __eq__(self, other) -> bool:
    if not isinstance(other, Expression):
      return NotImplemented
    return self.root == other.root


def _as_node(operand: Operand) -> Node:
  """Deep copy of an operand's tree, building one for strings and numbers"""
  if isinstance(operand, Expression):
    return operand._require_root().copy()
  if isinstance(operand, Node):
    return operand.copy()
  if isinstance(operand, str):
    return parse(operand)
  if isinstance(operand, numbers.Real):
    return LeafNode(format_number(operand))
  raise TypeError(f"Cannot combine an Expression with {type(operand).__name__}")


def combine(operator: str, first: Operand, second: Operand) -> Node:
  """Simplified ``first operator second`` built over copies of both operands"""
  return simplify(BinaryOpNode(operator, _as_node(first), _as_node(second)))


def add(first: Operand, second: Operand) -> Node:
  return combine('+', first, second)


def subtract(first: Operand, second: Operand) -> Node:
  return combine('-', first, second)


def multiply(first: Operand, second: Operand) -> Node:
  return combine('*', first, second)


def divide(first: Operand, second: Operand) -> Node:
  return combine('/', first, second)
