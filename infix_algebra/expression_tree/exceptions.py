"""Exceptions raised by the expression tree package."""

from typing import List, Optional, Sequence


class ExpressionError(Exception):
  """Base class for every error raised by infix_algebra"""


class DerivativeUnsupportedError(ExpressionError, NotImplementedError):
  """No differentiation rule matches a subtree.

  Raised for every division node and for power nodes whose base is not the
  differentiation variable or whose exponent is not a numeric literal.
  """

  def __init__(self, expression: str, variable: Optional[str] = None):
    self.expression = expression
    self.variable = variable
    message = f"Cannot differentiate {expression}"
    if variable is not None:
      message += f" with respect to {variable}"
    super().__init__(message)


class ExpressionSyntaxError(ExpressionError, ValueError):
  """Strict parsing found problems in the source text"""

  def __init__(self, source: str, issues: Sequence[str]):
    self.source = source
    self.issues: List[str] = list(issues)
    super().__init__(f"Invalid expression {source!r}: " + "; ".join(self.issues))


class EmptyExpressionError(ExpressionError, ValueError):
  """An Expression without a root was used where a tree is required"""


class UnboundSymbolError(ExpressionError, KeyError):
  """Numeric evaluation met a symbol with no bound value"""

  def __init__(self, symbol: str):
    self.symbol = symbol
    super().__init__(symbol)

  def __str__(self) -> str:
    return f"No value bound for symbol {self.symbol!r}"
