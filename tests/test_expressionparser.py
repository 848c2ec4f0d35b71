import math
import logging
import unittest

from exprtree.errors import ParserError
from exprtree.parser import ExpressionParser, build_tree
from exprtree.tree import evaluate

# (expressao, esperado)
CASES = (
    ('42', 42.0),
    ('0', 0.0),
    ('2 + 3', 5.0),
    ('2 - 7', -5.0),
    ('5 * 7', 35.0),
    ('10 / 4', 2.5),
    ('2 ^ 10', 1024.0),
    ('8 / 4 / 2', 1.0),
    ('2 - 3 - 4', -5.0),
    ('100 / 10 * 2', 20.0),
    ('3 + 4 * 2', 11.0),
    ('3 * 4 + 2', 14.0),
    ('2 + 3 ^ 2', 11.0),
    ('2 * 3 ^ 2', 18.0),
    ('5 + 2 * 3 - 1', 10.0),
    ('2 * 3 - 4 * 5 + 6 / 3', -12.0),
    ('2 - 4 + 6 - 1 - 1 - 0 + 8', 10.0),
    ('1 - 1 + 2 - 2 + 4 - 4 + 6', 6.0),
    ('2 * 3 * 4 / 8 - 5 / 2 * 4 + 6 + 0 / 3', -1.0),
    ('5 + 2 * 3 - 1 + 7 * 8', 66.0),
    # ^ é associativo à esquerda: (2 ^ 3) ^ 2
    ('2 ^ 3 ^ 2', 64.0),
)

def calculate(expression):
    return ExpressionParser(expression).parse().evaluate()

class TestExpressionParser(unittest.TestCase):
    def test_cases(self):
        for expression, expected in CASES:
            with self.subTest(expression=expression):
                self.assertEqual(calculate(expression), expected)

    def test_binary_operations_match_direct_arithmetic(self):
        pairs = ((7, 3), (3, 7), (12, 4), (0, 5), (9, 1))

        for a, b in pairs:
            with self.subTest(a=a, b=b):
                self.assertEqual(calculate(f'{a} + {b}'), float(a + b))
                self.assertEqual(calculate(f'{a} - {b}'), float(a - b))
                self.assertEqual(calculate(f'{a} * {b}'), float(a * b))
                self.assertEqual(calculate(f'{a} / {b}'), a / b)
                self.assertEqual(calculate(f'{a} ^ {b}'), math.pow(a, b))

    def test_division_by_zero_is_infinity(self):
        self.assertEqual(calculate('5 / 0'), math.inf)
        self.assertTrue(math.isnan(calculate('0 / 0')))

    def test_large_power_overflows_to_infinity(self):
        self.assertEqual(calculate('10 ^ 400'), math.inf)

    def test_long_left_associative_chain(self):
        self.assertEqual(calculate('1' + ' + 1' * 5000), 5001.0)
        self.assertEqual(calculate('1' + ' * 1' * 5000), 1.0)

    def test_evaluate_twice_is_idempotent(self):
        tree = ExpressionParser('5 + 2 * 3 - 1').parse()

        self.assertEqual(tree.evaluate(), tree.evaluate())
        self.assertEqual(tree.head.value, '-')

    def test_rebuild_is_deterministic(self):
        tokens = '9 - 3 * 2 ^ 2 / 4 + 1'.split(' ')
        results = {evaluate(build_tree(tokens)) for _ in range(5)}

        self.assertEqual(results, {7.0})

    def test_tree_shape(self):
        root = build_tree(['3', '+', '4', '*', '2'])

        self.assertEqual(root.value, '+')
        self.assertEqual(root.left.value, '3')
        self.assertEqual(root.right.value, '*')
        self.assertEqual(root.right.left.value, '4')
        self.assertEqual(root.right.right.value, '2')

    def test_left_associative_shape(self):
        root = build_tree(['8', '/', '4', '/', '2'])

        self.assertEqual(root.value, '/')
        self.assertEqual(root.left.value, '/')
        self.assertEqual(root.right.value, '2')

    def test_unknown_tokens_are_ignored(self):
        self.assertEqual(calculate('3 + x 4'), 7.0)
        self.assertEqual(calculate('3 % + 4'), 7.0)
        self.assertEqual(calculate('4 + 3.5 1'), 5.0)

    def test_consecutive_spaces_produce_ignored_tokens(self):
        self.assertEqual(calculate('3  +  4'), 7.0)
        self.assertEqual(calculate(' 12 - 8 '), 4.0)

    def test_non_ascii_digits_are_not_numbers(self):
        # '٣' é um dígito unicode (árabe), não deve virar uma folha
        self.assertEqual(calculate('٣ 2 + 1'), 3.0)

    def test_leftover_operands_are_ignored(self):
        self.assertEqual(calculate('1 + 2 3'), 5.0)
        self.assertEqual(calculate('4 5'), 5.0)

    def test_too_many_operators_raises(self):
        for expression in ('+', '3 +', '+ 3', '3 + * 4', '3 + x'):
            with self.subTest(expression=expression):
                with self.assertRaises(ParserError):
                    calculate(expression)

    def test_empty_expression_raises(self):
        with self.assertRaises(ParserError):
            calculate('')

        with self.assertRaises(ParserError):
            build_tree([])

    def test_error_points_to_offending_token(self):
        p = ExpressionParser('3 * + 4')

        with self.assertRaises(ParserError) as ctx:
            p.parse()

        # '+' força a redução de '*', que só tem um operando
        self.assertEqual(ctx.exception.token_index, 2)
        self.assertEqual(p.index, 4)

    def test_error_at_end_of_expression(self):
        p = ExpressionParser('3 +')

        with self.assertRaises(ParserError) as ctx:
            p.parse()

        self.assertEqual(ctx.exception.token_index, 2)
        self.assertEqual(p.index, 3)

    def test_error_is_logged_with_caret(self):
        with self.assertLogs('exprtree.parser', level='ERROR') as logs:
            with self.assertRaises(ParserError):
                ExpressionParser('3 +').parse()

        self.assertTrue(logs.output[0].endswith('\n3 +: Erro de sintaxe, operador sem dois operandos.\n   ^'))

    def test_library_logs_through_module_loggers(self):
        root = logging.getLogger()
        handlers = list(root.handlers)

        with self.assertRaises(ParserError):
            ExpressionParser('+').parse()

        self.assertEqual(calculate('3 x + 4'), 7.0)
        self.assertEqual(root.handlers, handlers)

    def test_feed_reuses_parser(self):
        p = ExpressionParser('')

        p.feed('2 + 3')
        self.assertEqual(p.parse().evaluate(), 5.0)

        p.feed('2 * 3')
        self.assertEqual(p.parse().evaluate(), 6.0)
        self.assertEqual(p.index, len('2 * 3'))

    def test_tokenize_splits_on_single_space(self):
        self.assertEqual(ExpressionParser('1  + 2').tokenize(), ['1', '', '+', '2'])

if __name__ == '__main__':
    unittest.main()
