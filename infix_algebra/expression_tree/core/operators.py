import numpy as np
import numba
from enum import IntEnum
from typing import Optional

# Anything below this magnitude is treated as zero by the simplifier
ZERO_TOLERANCE = 1e-10

OPERATORS = ('+', '-', '*', '/', '^')
OPERATOR_CHARS = frozenset(OPERATORS)


class NodeType(IntEnum):
  LEAF = 0
  BINARY_OP = 1


def is_operator(char: str) -> bool:
  return char in OPERATOR_CHARS


def parse_number(token: str) -> Optional[float]:
  """Interpret a token as a float, returning None when it is not numeric"""
  try:
    return float(token)
  except (TypeError, ValueError):
    return None


def is_numeric(token: str) -> bool:
  return parse_number(token) is not None


def format_number(value: float) -> str:
  """Render a float the way numeric leaves are written: 7 rather than 7.0"""
  value = float(value)
  if value == 0:
    return "0"
  if value.is_integer() and abs(value) < 1e16:
    return str(int(value))
  return repr(value)


def is_close(value: float, target: float) -> bool:
  return abs(value - target) < ZERO_TOLERANCE


def numeric_power(base: float, exponent: float) -> float:
  # numpy keeps overflow and negative-base roots as inf/nan instead of raising
  with np.errstate(all='ignore'):
    return float(np.power(np.float64(base), np.float64(exponent)))


@numba.njit(cache=True, error_model='numpy')
def evaluate_binary_op(left_val, right_val, operator):
  if operator == '+':
    return left_val + right_val
  elif operator == '-':
    return left_val - right_val
  elif operator == '*':
    return left_val * right_val
  elif operator == '/':
    return left_val / right_val
  elif operator == '^':
    return np.power(left_val, right_val)
  raise ValueError("unknown binary operator")
