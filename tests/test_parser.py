"""Unit tests for parser module."""

import unittest

from polysolver_pkg import config
from polysolver_pkg.ast_nodes import BinaryOperation, Number, Operator, Variable
from polysolver_pkg.formatting import node_tree
from polysolver_pkg.lexer import tokenize
from polysolver_pkg.parser import Parser, parse_equation, parse_number
from polysolver_pkg.types import ParseError


def left_side(text):
    return parse_equation(text).left


class TestGrammar(unittest.TestCase):
    """Test the shape of parsed trees."""

    def test_equation_has_two_sides(self):
        equation = parse_equation("x = 1")
        self.assertEqual(equation.left, Variable("x"))
        self.assertEqual(equation.right, Number(1.0))

    def test_precedence_multiply_over_add(self):
        node = left_side("1 + 2 * x = 0")
        self.assertEqual(
            node,
            BinaryOperation(
                Operator.PLUS,
                Number(1.0),
                BinaryOperation(Operator.MULTIPLY, Number(2.0), Variable("x")),
            ),
        )

    def test_power_binds_tighter_than_multiply(self):
        node = left_side("2 * x ^ 2 = 0")
        self.assertEqual(node.operator, Operator.MULTIPLY)
        self.assertEqual(node.right.operator, Operator.POWER)

    def test_subtraction_is_left_associative(self):
        node = left_side("5 - 3 - 1 = 0")
        self.assertEqual(node.operator, Operator.MINUS)
        self.assertEqual(node.right, Number(1.0))
        self.assertEqual(node.left.operator, Operator.MINUS)

    def test_power_is_left_associative(self):
        tree = node_tree(left_side("x^2^3 = 0"))
        self.assertEqual(
            tree,
            {
                "name": "^",
                "children": [
                    {"name": "^", "children": [{"name": "x"}, {"name": "2"}]},
                    {"name": "3"},
                ],
            },
        )

    def test_parentheses_group(self):
        node = left_side("2 * (x + 1) = 20")
        self.assertEqual(node.operator, Operator.MULTIPLY)
        self.assertEqual(node.right.operator, Operator.PLUS)

    def test_implicit_multiplication(self):
        self.assertEqual(
            left_side("2x = 0"),
            BinaryOperation(Operator.MULTIPLY, Number(2.0), Variable("x")),
        )
        self.assertEqual(left_side("3(x+1) = 0").operator, Operator.MULTIPLY)
        self.assertEqual(left_side("(x+1)(x-1) = 0").operator, Operator.MULTIPLY)

    def test_implicit_multiplication_binds_power_first(self):
        node = left_side("2x^2 = 0")
        self.assertEqual(node.operator, Operator.MULTIPLY)
        self.assertEqual(node.right.operator, Operator.POWER)

    def test_space_minus_is_subtraction(self):
        self.assertEqual(left_side("2 -x = 0").operator, Operator.MINUS)

    def test_unary_minus(self):
        self.assertEqual(
            left_side("-x = 0"),
            BinaryOperation(Operator.MINUS, Number(0.0), Variable("x")),
        )

    def test_unary_minus_below_power(self):
        node = left_side("-x^2 = 0")
        self.assertEqual(node.operator, Operator.MINUS)
        self.assertEqual(node.right.operator, Operator.POWER)

    def test_unary_plus_is_dropped(self):
        self.assertEqual(left_side("+x = 0"), Variable("x"))

    def test_signed_exponent(self):
        node = left_side("x^-1 = 0")
        self.assertEqual(node.operator, Operator.POWER)
        self.assertEqual(node.right, BinaryOperation(Operator.MINUS, Number(0.0), Number(1.0)))

    def test_division_is_accepted_syntactically(self):
        self.assertEqual(left_side("x / 2 = 1").operator, Operator.DIVIDE)


class TestSyntaxErrors(unittest.TestCase):
    """Test inputs that do not match the grammar."""

    def assertSyntaxError(self, text, code="SYNTAX_ERROR"):
        with self.assertRaises(ParseError) as ctx:
            parse_equation(text)
        self.assertEqual(ctx.exception.code, code)
        return ctx.exception

    def test_missing_equals(self):
        error = self.assertSyntaxError("2x + 4")
        self.assertIn("'='", str(error))
        self.assertIn("end of input", str(error))

    def test_second_equals(self):
        error = self.assertSyntaxError("x = 1 = 2")
        self.assertIn("position 6", str(error))

    def test_unbalanced_parentheses(self):
        self.assertSyntaxError("(x + 1 = 2")
        self.assertSyntaxError("x + 1) = 2")

    def test_empty_side(self):
        self.assertSyntaxError("= 5")
        self.assertSyntaxError("5 =")

    def test_dangling_operator(self):
        self.assertSyntaxError("x + = 1")
        self.assertSyntaxError("x ^ = 1")

    def test_malformed_numbers(self):
        self.assertSyntaxError("1.2.3x = 0", "INVALID_NUMBER")
        self.assertSyntaxError(". = 0", "INVALID_NUMBER")

    def test_nesting_limit(self):
        depth = config.MAX_EXPRESSION_DEPTH + 1
        self.assertSyntaxError("(" * depth + "x" + ")" * depth + " = 0", "TOO_DEEP")
        self.assertSyntaxError("-" * depth + "x = 0", "TOO_DEEP")

    def test_nesting_within_limit(self):
        depth = config.MAX_EXPRESSION_DEPTH
        equation = parse_equation("(" * depth + "x" + ")" * depth + " = 0")
        self.assertEqual(equation.left, Variable("x"))


class TestHelpers(unittest.TestCase):
    def test_parse_number(self):
        self.assertEqual(parse_number("12"), 12.0)
        self.assertEqual(parse_number(".5"), 0.5)
        self.assertEqual(parse_number("3."), 3.0)

    def test_parser_requires_end_token(self):
        tokens = tokenize("x=1")[:-1]
        with self.assertRaises(ValueError):
            Parser(tokens)


if __name__ == "__main__":
    unittest.main()
