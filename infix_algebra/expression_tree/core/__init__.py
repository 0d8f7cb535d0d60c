"""Core expression tree components."""

from .node import Node, LeafNode, BinaryOpNode
from .operators import (
    NodeType, OPERATORS, ZERO_TOLERANCE,
    is_operator, is_numeric, parse_number, format_number, evaluate_binary_op
)

__all__ = [
    'Node', 'LeafNode', 'BinaryOpNode',
    'NodeType', 'OPERATORS', 'ZERO_TOLERANCE',
    'is_operator', 'is_numeric', 'parse_number', 'format_number', 'evaluate_binary_op'
]
