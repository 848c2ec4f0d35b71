# Errors module

# Base de todos os erros levantados pela biblioteca.
class ExpressionError(Exception):
    pass

# Utilizado quando o Parser encontra um erro, token_index aponta o token onde o erro foi percebido.
class ParserError(ExpressionError):
    def __init__(self, message, token_index=None):
        super().__init__(message)
        self.token_index = token_index

# Utilizado quando um nó da árvore não pode ser avaliado.
class EvaluationError(ExpressionError):
    pass

# Utilizado quando o arquivo de configurações não pode ser lido.
class ConfigError(ExpressionError):
    pass
