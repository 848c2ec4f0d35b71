import json
import logging

from exprtree.errors import ConfigError

LOG_FORMAT = "[%(asctime)s] <%(levelname)s> %(message)s"
LOG_DATEFMT = "%d/%m/%Y %H:%M:%S"

class Config:
    def __init__(self, configfile: str=None):
        self.kvalues = {}
        self.path = configfile

        # Sem arquivo, ficamos somente com os valores padrão de cada get()
        if self.path:
            self.load()

    def load(self):
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                self.kvalues = json.loads(''.join(f.readlines()))
        except OSError as e:
            raise ConfigError(f'Não foi possível abrir o arquivo de configurações {self.path}: {e.strerror}')
        except ValueError as e:
            raise ConfigError(f'O arquivo de configurações {self.path} não é um JSON válido: {e}')

        if not isinstance(self.kvalues, dict):
            raise ConfigError(f'O arquivo de configurações {self.path} deve conter um objeto JSON.')

    def get(self, keystr: str, default=None):
        keys = keystr.split('.')
        curr = self.kvalues

        try:
            for i in keys:
                curr = curr[i]
        except (KeyError, TypeError):
            return default

        return curr

def setup_logging(config: Config, verbose: bool=False):
    enabled = config.get('logging.enabled', False) or verbose

    if not enabled:
        return False

    level = logging.DEBUG if verbose else config.get('logging.level', 'INFO')

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

        if not isinstance(level, int):
            raise ConfigError(f'Nível de log inválido: {config.get("logging.level")}')

    # Log básico, não queremos nada "fancy"
    logging.basicConfig(
        filename=config.get('logging.file', None),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        level=level
    )

    return True
