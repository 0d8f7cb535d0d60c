"""
Tree Utility Functions

Traversal and inspection helpers shared by the expression tree modules,
including the fully parenthesized printer.
"""

from typing import List, Optional

from ..core.node import Node, LeafNode, BinaryOpNode


def print_tree(node: Optional[Node]) -> str:
    """
    Render a tree as fully parenthesized infix text.

    Args:
        node: Root node, or None for an empty expression

    Returns:
        ``""`` for None, the token for a leaf, ``(left op right)`` otherwise
    """
    if node is None:
        return ""
    return node.to_string()


def get_all_nodes(node: Node, traversal_order: str = 'breadth_first') -> List[Node]:
    """
    Get all nodes in the tree using specified traversal order.

    Args:
        node: Root node of the tree
        traversal_order: 'breadth_first' (default) or 'depth_first'

    Returns:
        List of all nodes in the tree
    """
    if traversal_order == 'breadth_first':
        return _breadth_first_traversal(node)
    elif traversal_order == 'depth_first':
        return _depth_first_traversal(node)
    else:
        raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _breadth_first_traversal(node: Node) -> List[Node]:
    """Breadth-first traversal (iterative, non-recursive)"""
    nodes_to_visit = [node]
    all_nodes = []

    while nodes_to_visit:
        current_node = nodes_to_visit.pop(0)  # FIFO for breadth-first
        all_nodes.append(current_node)

        if isinstance(current_node, BinaryOpNode):
            nodes_to_visit.append(current_node.left)
            nodes_to_visit.append(current_node.right)

    return all_nodes


def _depth_first_traversal(node: Node) -> List[Node]:
    """Pre-order depth-first traversal (iterative)"""
    stack = [node]
    all_nodes = []

    while stack:
        current_node = stack.pop()
        all_nodes.append(current_node)

        if isinstance(current_node, BinaryOpNode):
            stack.append(current_node.right)
            stack.append(current_node.left)

    return all_nodes


def calculate_tree_depth(node: Node) -> int:
    """
    Calculate the maximum depth of the tree.

    Returns:
        Maximum depth (leaf nodes have depth 1)
    """
    if isinstance(node, BinaryOpNode):
        return 1 + max(calculate_tree_depth(node.left), calculate_tree_depth(node.right))
    return 1


def find_nodes_by_operator(node: Node, operator: str) -> List[BinaryOpNode]:
    return [n for n in get_all_nodes(node, 'depth_first')
            if isinstance(n, BinaryOpNode) and n.operator == operator]


def get_leaves(node: Node) -> List[LeafNode]:
    """Leaves in left-to-right order"""
    return [n for n in get_all_nodes(node, 'depth_first') if isinstance(n, LeafNode)]


def get_variables(node: Node) -> List[str]:
    """Distinct symbolic tokens, in order of first appearance"""
    seen = {}
    for leaf in get_leaves(node):
        if not leaf.is_numeric:
            seen.setdefault(leaf.token, None)
    return list(seen)


def get_constants(node: Node) -> List[float]:
    return [leaf.value for leaf in get_leaves(node) if leaf.is_numeric]


def clone_tree(node: Optional[Node]) -> Optional[Node]:
    """Deep copy that also accepts None"""
    if node is None:
        return None
    return node.copy()


def validate_tree_structure(node: Node) -> bool:
    """
    Validate that the tree structure is consistent and well-formed.

    A well-formed tree holds only LeafNode and BinaryOpNode instances with
    string tokens, and no node is reachable along two paths.

    Args:
        node: Root node of the tree

    Returns:
        True if tree structure is valid, False otherwise
    """
    seen = set()
    stack = [node]
    while stack:
        current = stack.pop()
        if id(current) in seen:
            return False
        seen.add(id(current))

        if isinstance(current, BinaryOpNode):
            stack.append(current.right)
            stack.append(current.left)
        elif not isinstance(current, LeafNode) or not isinstance(current.token, str):
            return False
    return True
