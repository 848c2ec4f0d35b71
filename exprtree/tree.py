import sys
import logging
import operator

from exprtree.errors import EvaluationError
from exprtree.util import ieee_div, ieee_pow

logger = logging.getLogger(__name__)

EXPR_ADD = '+'
EXPR_SUB = '-'
EXPR_MUL = '*'
EXPR_DIV = '/'
EXPR_POW = '^'

EXPR_OPERATORS = (
    EXPR_ADD,
    EXPR_SUB,
    EXPR_MUL,
    EXPR_DIV,
    EXPR_POW
)

EXPR_PRIORITY_MAP = {
    EXPR_ADD: 1,
    EXPR_SUB: 1,
    EXPR_MUL: 2,
    EXPR_DIV: 2,
    EXPR_POW: 3
}

EXPR_FUNCTIONS = {
    EXPR_ADD: operator.add,
    EXPR_SUB: operator.sub,
    EXPR_MUL: operator.mul,
    EXPR_DIV: ieee_div,
    EXPR_POW: ieee_pow
}

def precedence(op):
    return EXPR_PRIORITY_MAP.get(op, 0)

def is_operator(value):
    return value in EXPR_OPERATORS

class No:
    """Nó da árvore de expressão.

    Um nó folha guarda o texto do número (convertido somente durante a
    avaliação), um nó operador guarda o símbolo e seus dois filhos.
    """

    __slots__ = ('value', 'left', 'right')

    def __init__(self, value, left=None, right=None):
        self.value = value
        self.left = left
        self.right = right

    def __repr__(self):
        if self.is_value():
            return f'No({self.value!r})'

        return f'No({self.value!r}, {self.left!r}, {self.right!r})'

    def is_operator(self):
        return is_operator(self.value)

    def is_value(self):
        return not self.is_operator()

    def evaluate(self):
        return evaluate(self)

def evaluate_value(node):
    try:
        return float(node.value)
    except (TypeError, ValueError):
        raise EvaluationError(f'Não foi possível converter o valor `{node.value}` para float.')

def evaluate_operator(node, leftval, rightval):
    func = EXPR_FUNCTIONS.get(node.value, None)

    if not func:
        # Inalcançável para árvores montadas pelo build_tree
        logger.debug(f'Unknown operator {node.value!r}, evaluating to 0')
        return 0.0

    return float(func(leftval, rightval))

def evaluate(node):
    """Avalia a árvore em pós-ordem, sempre a esquerda antes da direita.

    Usa uma pilha explícita, cadeias longas como `1 + 1 + ... + 1` geram
    árvores tão profundas quanto o número de operadores.
    """
    values = []
    pending = [(node, False)]

    while pending:
        current, children_done = pending.pop()

        if current is None:
            values.append(0.0)
        elif current.is_value():
            values.append(evaluate_value(current))
        elif children_done:
            rightval = values.pop()
            leftval = values.pop()
            values.append(evaluate_operator(current, leftval, rightval))
        else:
            pending.append((current, True))
            pending.append((current.right, False))
            pending.append((current.left, False))

    return values.pop()

class ExpressionTree:
    def __init__(self, head=None):
        self.head = head

    def empty(self):
        return self.head is None

    def evaluate(self):
        if self.empty():
            return .0

        return evaluate(self.head)

    def size(self):
        if self.empty():
            return 0

        count = 0
        pending = [self.head]

        while pending:
            node = pending.pop()
            count += 1

            for child in (node.left, node.right):
                if child is not None:
                    pending.append(child)

        return count

    def depth(self):
        if self.empty():
            return 0

        deepest = 0
        pending = [(self.head, 1)]

        while pending:
            node, level = pending.pop()
            deepest = max(deepest, level)

            for child in (node.left, node.right):
                if child is not None:
                    pending.append((child, level + 1))

        return deepest

    def output(self, current, level=0, out=None):
        out = sys.stdout if out is None else out
        pending = [(current, level)]

        # Pré-ordem: nó, esquerda, direita
        while pending:
            node, level = pending.pop()

            if node is None:
                continue

            out.write(f'{level}:({node.value}) ')

            pending.append((node.right, level + 1))
            pending.append((node.left, level + 1))

    def show(self, out=None):
        out = sys.stdout if out is None else out

        self.output(self.head, out=out)
        out.write('\n')
