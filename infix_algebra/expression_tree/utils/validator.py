from typing import List
from ..core.node import Node, LeafNode, BinaryOpNode
from ..core.operators import OPERATORS, is_operator, is_numeric


class ExpressionValidator:
  """Checks that the permissive parser would not silently misread its input"""

  @staticmethod
  def is_valid_source(text: str) -> bool:
    return not ExpressionValidator.find_issues(text)

  @staticmethod
  def find_issues(text: str) -> List[str]:
    issues: List[str] = []
    if not text.strip():
      return ["expression is empty"]

    depth = 0
    for i, char in enumerate(text):
      if char == '(':
        depth += 1
      elif char == ')':
        depth -= 1
        if depth < 0:
          issues.append(f"unmatched ')' at position {i}")
          depth = 0
    if depth > 0:
      issues.append(f"{depth} unclosed '('")

    significant = [(i, c) for i, c in enumerate(text) if not c.isspace()]
    first_char = significant[0][1]
    last_char = significant[-1][1]
    if is_operator(first_char):
      issues.append(f"expression starts with operator '{first_char}'")
    if is_operator(last_char):
      issues.append(f"expression ends with operator '{last_char}'")

    for (i, prev), (_, curr) in zip(significant, significant[1:]):
      if is_operator(prev) and is_operator(curr):
        issues.append(f"adjacent operators '{prev}{curr}' at position {i}")
      elif prev == '(' and curr == ')':
        issues.append(f"empty parentheses at position {i}")
      elif prev == '(' and is_operator(curr):
        issues.append(f"operator '{curr}' directly after '(' at position {i}")
      elif is_operator(prev) and curr == ')':
        issues.append(f"operator '{prev}' directly before ')' at position {i}")
      elif prev == ')' and curr not in OPERATORS and curr != ')':
        issues.append(f"missing operator after ')' at position {i}")
      elif curr == '(' and prev not in OPERATORS and prev != '(':
        issues.append(f"missing operator before '(' at position {i}")

    for atom in ExpressionValidator._atoms(text):
      stripped = atom.strip()
      if not stripped:
        continue
      if any(c.isspace() for c in stripped):
        issues.append(f"atoms without an operator between them: '{stripped}'")
      elif stripped[0].isdigit() and not is_numeric(stripped):
        issues.append(f"malformed number or name: '{stripped}'")

    return issues

  @staticmethod
  def _atoms(text: str) -> List[str]:
    atoms = []
    current = []
    for char in text:
      if is_operator(char) or char in '()':
        atoms.append(''.join(current))
        current = []
      else:
        current.append(char)
    atoms.append(''.join(current))
    return atoms

  @staticmethod
  def is_structurally_valid(node: Node) -> bool:
    """Every operator known, every leaf non-empty"""
    if isinstance(node, LeafNode):
      return bool(node.token.strip())
    if isinstance(node, BinaryOpNode):
      return (node.operator in OPERATORS and
              ExpressionValidator.is_structurally_valid(node.left) and
              ExpressionValidator.is_structurally_valid(node.right))
    return False
