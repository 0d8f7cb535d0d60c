import pytest

from infix_algebra import parse, simplify
from infix_algebra.expression_tree import LeafNode


def simplified(text):
  return simplify(parse(text)).to_string()


def test_additive_identity():
  assert simplified("0+x") == "x"
  assert simplified("x+0") == "x"


def test_coefficient_folding():
  assert simplified("((5*x)+(2*x))") == "(7*x)"
  assert simplified("x+x") == "(2*x)"
  assert simplified("((3*x)-(3*x))") == "0"


def test_last_operator_split_feeds_the_simplifier():
  # the root is the final '*', so only the left operand is a sum
  assert simplified("5*x+2*x") == "(((5*x)+2)*x)"


def test_constants_collect_into_one_term():
  assert simplified("x+2+3") == "(x+5)"
  assert simplified("2+x+3") == "(5+x)"
  assert simplified("1-1") == "0"


def test_negative_unit_coefficient_becomes_zero_minus_term():
  assert simplified("x-y") == "(x+(0-y))"
  assert simplified("0-x") == "(0-x)"
  assert simplified("((2*x)-(3*x))") == "(0-x)"


def test_term_keys_are_textual():
  assert simplified("((x*y)+(y*x))") == "(x*y+y*x)"
  assert simplified("((x*y)+(x*y))") == "(2*x*y)"


def test_zero_factor_is_dropped_not_absorbing(caplog):
  # known anomaly: x*0 keeps x
  assert simplified("x*0") == "x"
  assert any("sum to zero" in record.getMessage() for record in caplog.records)


def test_numeric_factors_are_summed():
  assert simplified("2*3") == "5"
  assert simplified("5*x * 5*x") == "(10*(x^2))"
  assert simplified("x*1") == "x"
  assert simplified("0.5*0.5") == "1"


def test_repeated_factors_raise_the_exponent():
  assert simplified("x*x") == "(x^2)"
  assert simplified("x*y*x") == "((x^2)*y)"
  assert simplified("((x+1)*(x+1))") == "((x+1)^2)"


@pytest.mark.parametrize("text, expected", [
  ("x^1", "x"),
  ("x^0", "1"),
  ("0^x", "0"),
  ("1^x", "1"),
  ("2^3", "8"),
  ("4^0.5", "2"),
  ("2^0.5", "1.4142135623730951"),
  ("x^y", "(x^y)"),
  ("(x+x)^2", "((2*x)^2)"),
])
def test_power_rules(text, expected):
  assert simplified(text) == expected


def test_division_is_left_alone():
  assert simplified("x/x") == "(x/x)"
  assert simplified("((2*3)/(x+x))") == "(5/(2*x))"


def test_leaf_is_returned_as_copy():
  leaf = LeafNode("x")
  result = simplify(leaf)
  assert result == leaf and result is not leaf


def test_input_tree_is_not_modified():
  tree = parse("((x+x)*(2*3))")
  before = tree.copy()
  simplify(tree)
  assert tree == before


@pytest.mark.parametrize("text", [
  "0+x",
  "((5*x)+(2*x))",
  "5*x+2*x",
  "x*0",
  "5*x * 5*x",
  "x-y",
  "(x-y)+5",
  "((2*x)-(3*x))",
  "((3*(x^2))+(2*x))",
  "((x*y)+(x*y))",
  "((x+1)*(x+1))",
  "((2*3)/(x+x))",
  "x+((x+y)*(1-2))",
  "x+((x+y)*3)",
  "(x^2)*x*x",
])
def test_simplify_is_a_fixed_point(text):
  once = simplify(parse(text))
  assert simplify(once) == once


def test_nested_sum_with_a_coefficient_stays_one_term():
  once = simplify(parse("x+((x+y)*(1-2))"))
  assert once.to_string() == "(x+(0-(x+y)))"
  assert isinstance(once.right.right, LeafNode)
  assert simplify(once).to_string() == "(x+(0-(x+y)))"


def test_raised_factor_merges_with_an_identical_factor():
  assert simplified("(x^2)*x*x") == "((x^2)^2)"


def test_random_trees_reach_a_fixed_point_in_one_pass(random_trees):
  for tree in random_trees(2000, seed=1234):
    once = simplify(tree)
    assert simplify(once) == once, tree.to_string()
