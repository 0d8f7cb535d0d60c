import numpy as np
import pytest

from infix_algebra.expression_tree import LeafNode, BinaryOpNode, OPERATORS
from infix_algebra.logging_system import LogLevel, configure_logging

TREE_LEAVES = ('x', 'y', '0', '1', '2', '3')


@pytest.fixture(autouse=True)
def default_logging():
  configure_logging(LogLevel.MINIMAL)
  yield
  configure_logging(LogLevel.MINIMAL)


@pytest.fixture
def random_trees():
  """Seeded batches of random trees over a small alphabet of leaves"""
  def build(rng, depth):
    if depth == 0 or rng.random() < 0.25:
      return LeafNode(TREE_LEAVES[rng.integers(len(TREE_LEAVES))])
    operator = OPERATORS[rng.integers(len(OPERATORS))]
    return BinaryOpNode(operator, build(rng, depth - 1), build(rng, depth - 1))

  def generate(count, depth=4, seed=0):
    rng = np.random.default_rng(seed)
    return [build(rng, depth) for _ in range(count)]

  return generate
