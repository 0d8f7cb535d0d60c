"""Utilities for expression trees."""

from .parser import parse, find_split_index
from .simplifier import ExpressionSimplifier, simplify
from .differentiator import ExpressionDifferentiator, derivative
from .validator import ExpressionValidator
from .sympy_utils import SymPyConverter
from .tree_utils import (
    print_tree, get_all_nodes, calculate_tree_depth, find_nodes_by_operator,
    get_leaves, get_variables, get_constants, clone_tree, validate_tree_structure
)

__all__ = [
    'parse', 'find_split_index',
    'ExpressionSimplifier', 'simplify',
    'ExpressionDifferentiator', 'derivative',
    'ExpressionValidator', 'SymPyConverter',
    'print_tree', 'get_all_nodes', 'calculate_tree_depth', 'find_nodes_by_operator',
    'get_leaves', 'get_variables', 'get_constants', 'clone_tree',
    'validate_tree_structure'
]
