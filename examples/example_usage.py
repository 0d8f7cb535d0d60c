import sys
import os
# Add the project root to Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from infix_algebra import Expression, DerivativeUnsupportedError, LogLevel, configure_logging


def main():
  configure_logging(LogLevel.MINIMAL)

  expr1 = Expression()
  expr1.parse_expression("5*x + 2*x")
  print("5x + 2x = " + expr1.simplify().to_string())

  expr2 = Expression()
  expr2.parse_expression("5*x * 5*x")
  print("5x * 5x = " + expr2.simplify().to_string())

  square = Expression.from_string("x^2")
  print("d/dx x^2 = " + square.derivative("x").to_string())

  try:
    Expression.from_string("x/2").derivative("x")
  except DerivativeUnsupportedError as e:
    print(f"d/dx x/2 failed: {e}")


if __name__ == "__main__":
  main()
