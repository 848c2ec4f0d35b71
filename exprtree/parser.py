import logging

from exprtree.errors import ParserError
from exprtree.tree import No, ExpressionTree, is_operator, precedence
from exprtree.util import is_digits

logger = logging.getLogger(__name__)

PARSER_WHITESPACE = ' '

def pop_operand(nodes, token_index):
    try:
        return nodes.pop()
    except IndexError:
        raise ParserError('Erro de sintaxe, operador sem dois operandos.', token_index)

def reduce_top(nodes, ops, token_index):
    # O operando mais recente é o filho da direita
    right = pop_operand(nodes, token_index)
    left = pop_operand(nodes, token_index)
    nodes.append(No(ops.pop(), left, right))

def build_tree(tokens):
    """Monta a árvore de expressão a partir de uma sequência de tokens infixos.

    Números e operadores (+, -, *, /, ^) são empilhados separadamente; antes
    de empilhar um operador, todo operador no topo com prioridade maior ou
    igual é reduzido a um nó, o que deixa operadores de mesma prioridade
    associativos à esquerda (inclusive ^). Tokens desconhecidos são ignorados.
    """
    nodes = []
    ops = []
    index = -1

    for index, token in enumerate(tokens):
        if is_digits(token):
            nodes.append(No(token))
        elif is_operator(token):
            while ops and precedence(ops[-1]) >= precedence(token):
                reduce_top(nodes, ops, index)

            ops.append(token)
        else:
            logger.debug(f'Ignoring unknown token {token!r} at position {index}')

    # Fim da expressão, erros daqui em diante apontam para depois do último token
    index += 1

    while ops:
        reduce_top(nodes, ops, index)

    if not nodes:
        raise ParserError('A expressão não possui nenhum valor.', index)

    if len(nodes) > 1:
        logger.debug(f'{len(nodes) - 1} operand(s) left unused on the stack')

    return nodes.pop()

class Parser:
    def __init__(self, inputstr):
        self.feed(inputstr)

    def feed(self, inputstr):
        self.inputstr = inputstr
        self.index = 0

    def parse(self):
        raise NotImplementedError()

class ExpressionParser(Parser):
    def tokenize(self):
        return self.inputstr.split(PARSER_WHITESPACE)

    def token_offset(self, tokens, token_index):
        # Erro percebido depois do último token, aponta para o fim da entrada
        if token_index is None or token_index >= len(tokens):
            return len(self.inputstr)

        # Cada token é separado por exatamente um espaço
        return sum(len(token) + 1 for token in tokens[:token_index])

    def parse(self):
        tokens = self.tokenize()

        try:
            head = build_tree(tokens)
        except ParserError as e:
            self.index = self.token_offset(tokens, e.token_index)
            logger.error(f"\n{self.inputstr}: {e}\n{self.index * ' '}^")
            raise e

        self.index = len(self.inputstr)

        return ExpressionTree(head)
