import sympy as sp

from infix_algebra import parse, simplify, SymPyConverter


def test_to_sympy_maps_every_operator():
  x, y = sp.symbols('x y')
  assert SymPyConverter.to_sympy(parse("x+y")) == x + y
  assert SymPyConverter.to_sympy(parse("x-y")) == x - y
  assert SymPyConverter.to_sympy(parse("x*y")) == x * y
  assert SymPyConverter.to_sympy(parse("x/y")) == x / y
  assert SymPyConverter.to_sympy(parse("x^y")) == x ** y
  assert SymPyConverter.to_sympy(parse("2.5")) == sp.Float(2.5)
  assert SymPyConverter.to_sympy(parse("3")) == sp.Integer(3)


def test_from_sympy_builds_binary_chains():
  x, y, z = sp.symbols('x y z')
  tree = SymPyConverter.from_sympy(x * y * z)
  assert tree.operator == '*'
  assert tree.size() == 5
  assert SymPyConverter.from_sympy(sp.Rational(1, 2)).to_string() == "0.5"


def test_equivalence():
  assert SymPyConverter.are_equivalent(parse("((x+1)*(x+1))"), parse("(((x^2)+(2*x))+1)"))
  assert not SymPyConverter.are_equivalent(parse("x*0"), simplify(parse("x*0")))


def test_canonical_simplify_is_a_sound_alternative():
  converter = SymPyConverter()
  result = converter.canonical_simplify(parse("x*0"))
  assert result['simplified'].to_string() == "0"

  result = converter.canonical_simplify(parse("((x+x)+x)"))
  assert result['simplified'].to_string() == "(3*x)"
  assert result['simplified_complexity'] <= result['original_complexity']


def test_latex_representation():
  assert SymPyConverter.latex_representation(parse("x^2")) == "x^{2}"
