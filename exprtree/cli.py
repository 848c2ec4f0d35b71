import sys
import logging

from exprtree.config import Config, setup_logging
from exprtree.errors import ExpressionError, ConfigError
from exprtree.parser import ExpressionParser
from exprtree.util import char_in_range, number_string

logger = logging.getLogger(__name__)

USAGE = """Uso:

{prog} [--config=<arquivo>] [--show] [-v|--verbose] <expressao...>

Exemplo: {prog} 3 + 4 * 2"""

class CommandRequest:
    def __init__(self, cmd=''):
        self.cmd = cmd
        self.args = []
        self.flags = {}

    def add_argument(self, arg):
        if isinstance(arg, str):
            # Não permite começar com números Ex: -1
            if arg.startswith("--") and len(arg) > 2 and (char_in_range(arg[2], 'a', 'z') or char_in_range(arg[2], 'A', 'Z')):
                kv = arg.split("=")

                if len(kv) > 1:
                    self.flags[kv[0][2:]] = "=".join(kv[1:])
                    return
                else:
                    if len(kv[0][2:]) > 0:
                        self.flags[kv[0][2:]] = True
                        return
            elif arg.startswith("-") and len(arg) > 1 and (char_in_range(arg[1], 'a', 'z') or char_in_range(arg[1], 'A', 'Z')):
                self.flags[arg[1:]] = True
                return

        self.args.append(arg)

    @classmethod
    def from_argv(cls, argv):
        request = cls(argv[0] if argv else 'exprtree')

        for arg in argv[1:]:
            request.add_argument(arg)

        return request

FLAG_TRUE_VALUES = ('1', 'true', 'yes', 'on', 'sim')

def flag_enabled(value, default=False):
    # --flag vira True, --flag=valor chega como string
    if value is None:
        return default

    if isinstance(value, str):
        return value.strip().lower() in FLAG_TRUE_VALUES

    return bool(value)

def evaluate_expression(expression: str, out=None, show_tree: bool=False):
    out = sys.stdout if out is None else out

    p = ExpressionParser(expression)
    tree = p.parse()
    result = tree.evaluate()

    logger.info(f'Evaluated {expression!r} with {tree.size()} node(s), depth {tree.depth()}')

    out.write(f'Expression: {expression}\n')

    if show_tree:
        tree.show(out=out)

    out.write(f'Result: {number_string(result)}\n')

    return result

def main(argv=None):
    argv = sys.argv if argv is None else argv
    request = CommandRequest.from_argv(argv)

    if not request.args or flag_enabled(request.flags.get('help')) or flag_enabled(request.flags.get('h')):
        print(USAGE.format(prog=request.cmd))
        return 2

    try:
        configfile = request.flags.get('config', None)

        if configfile is True:
            raise ConfigError('É preciso informar o arquivo de configurações, Ex: --config=exprtree.json')

        config = Config(configfile)
        setup_logging(config, verbose=flag_enabled(request.flags.get('verbose')) or flag_enabled(request.flags.get('v')))

        evaluate_expression(
            ' '.join(request.args),
            show_tree=flag_enabled(request.flags.get('show'), default=flag_enabled(config.get('output.show_tree', False)))
        )
    except ExpressionError as e:
        sys.stderr.write(f'Error: {e}\n')
        return 1

    return 0

def run():
    sys.exit(main())
