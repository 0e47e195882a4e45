"""Ponto de entrada do visualizador de logs.

Este módulo realiza a inicialização da aplicação: parsing de argumentos CLI,
configuração de logging e execução do comando pedido. Mantemos a lógica de
runtime em `core` para facilitar testes e reutilização.
"""

import logging as _logging
import sys

from .config.settings import load_settings
from .core.args import get_log_config, parse_args
from .core.core import run_command


def main(argv: list[str] | None = None) -> int:
    """Inicializa a aplicação e executa o comando.

    Args:
        argv: Lista de argumentos (usada em testes). Quando ``None`` a função
            utiliza os argumentos de linha de comando do processo.

    Returns:
        Código de saída do processo.

    """
    try:
        args = parse_args(argv)
    except ValueError as exc:
        print(f"logview: {exc}", file=sys.stderr)
        return 2

    settings = load_settings()
    log_conf = get_log_config(args, settings)

    level = getattr(_logging, log_conf.get("level", "WARNING"), _logging.WARNING)
    _logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    return run_command(args, settings=settings)


if __name__ == "__main__":
    sys.exit(main())
