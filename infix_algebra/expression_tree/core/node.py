import numpy as np
from abc import ABC, abstractmethod
from typing import Optional, Any, Mapping
from .operators import NodeType, OPERATORS, parse_number, evaluate_binary_op
from ..exceptions import UnboundSymbolError


class Node(ABC):
  """Base node class with size and hash caching.

  Nodes are never mutated once built; every operation that reuses a subtree
  takes a ``copy()`` of it so no two live trees share nodes.
  """

  __slots__ = ('_hash_cache', '_size_cache')

  def __init__(self):
    self._hash_cache: Optional[int] = None
    self._size_cache: Optional[int] = None

  @abstractmethod
  def evaluate(self, bindings: Mapping[str, Any]) -> np.ndarray:
    pass

  @abstractmethod
  def to_string(self) -> str:
    pass

  @abstractmethod
  def copy(self) -> 'Node':
    pass

  @property
  def is_numeric(self) -> bool:
    return False

  @property
  def is_leaf(self) -> bool:
    return False

  def size(self) -> int:
    """Node count"""
    if self._size_cache is None:
      self._size_cache = self._compute_size()
    return self._size_cache

  @abstractmethod
  def _compute_size(self) -> int:
    pass

  def __hash__(self) -> int:
    if self._hash_cache is None:
      self._hash_cache = self._compute_hash()
    return self._hash_cache

  @abstractmethod
  def _compute_hash(self) -> int:
    pass

  def __str__(self) -> str:
    return self.to_string()


class LeafNode(Node):
  """Childless node holding a numeric literal or a symbolic token verbatim"""

  __slots__ = ('token',)

  def __init__(self, token: str):
    super().__init__()
    if not isinstance(token, str):
      raise TypeError(f"Leaf token must be a string, got {type(token).__name__}")
    self.token = token

  @property
  def value(self) -> Optional[float]:
    return parse_number(self.token)

  @property
  def is_numeric(self) -> bool:
    return self.value is not None

  @property
  def is_leaf(self) -> bool:
    return True

  def evaluate(self, bindings: Mapping[str, Any]) -> np.ndarray:
    value = self.value
    if value is not None:
      return np.array([value], dtype=np.float64)
    if self.token not in bindings:
      raise UnboundSymbolError(self.token)
    return np.atleast_1d(np.asarray(bindings[self.token], dtype=np.float64))

  def to_string(self) -> str:
    return self.token

  def copy(self) -> 'LeafNode':
    return LeafNode(self.token)

  def _compute_size(self) -> int:
    return 1

  def _compute_hash(self) -> int:
    return hash((NodeType.LEAF, self.token))

  def __eq__(self, other) -> bool:
    if not isinstance(other, LeafNode):
      return NotImplemented
    return self.token == other.token

  __hash__ = Node.__hash__

  def __repr__(self) -> str:
    return f"LeafNode({self.token!r})"


class BinaryOpNode(Node):
  __slots__ = ('operator', 'left', 'right')

  def __init__(self, operator: str, left: Node, right: Node):
    super().__init__()
    if operator not in OPERATORS:
      raise ValueError(f"Unknown binary operator: {operator!r}")
    if not isinstance(left, Node) or not isinstance(right, Node):
      raise TypeError("Binary operator nodes need two child nodes")
    self.operator = operator
    self.left = left
    self.right = right

  def evaluate(self, bindings: Mapping[str, Any]) -> np.ndarray:
    left_val, right_val = np.broadcast_arrays(self.left.evaluate(bindings), self.right.evaluate(bindings))
    return evaluate_binary_op(
      np.ascontiguousarray(left_val, dtype=np.float64),
      np.ascontiguousarray(right_val, dtype=np.float64),
      self.operator
    )

  def to_string(self) -> str:
    return f"({self.left.to_string()}{self.operator}{self.right.to_string()})"

  def copy(self) -> 'BinaryOpNode':
    return BinaryOpNode(self.operator, self.left.copy(), self.right.copy())

  def _compute_size(self) -> int:
    return 1 + self.left.size() + self.right.size()

  def _compute_hash(self) -> int:
    return hash((NodeType.BINARY_OP, self.operator, hash(self.left), hash(self.right)))

  def __eq__(self, other) -> bool:
    if not isinstance(other, BinaryOpNode):
      return NotImplemented
    return (self.operator == other.operator and
            self.left == other.left and
            self.right == other.right)

  __hash__ = Node.__hash__

  def __repr__(self) -> str:
    return f"BinaryOpNode({self.operator!r}, {self.left!r}, {self.right!r})"
