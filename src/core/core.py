"""Core do visualizador de logs.

Resolve a localização do log a partir de argumentos e configurações e
executa os comandos da CLI (show, raw, path).
"""

import logging
import sys
from pathlib import Path
from typing import TextIO

from ..config.settings import load_settings
from ..system.logs import get_log_path, read_log, render_log

logger = logging.getLogger(__name__)

_NO_PATH_STR = "Caminho do log indisponível"


# ========================
# 1. Resolução de argumentos
# ========================


# Auxilia run_command; CLI > ambiente > .env > padrão
def _effective_settings(args, settings: dict | None = None) -> dict:
    """Combina os argumentos da CLI com ``load_settings()``.

    Argumentos ausentes (``None``) mantêm o valor das configurações.
    """
    effective = dict(settings if settings is not None else load_settings())
    if getattr(args, "log_dir", None):
        effective["log_dir"] = Path(args.log_dir).expanduser()
    if getattr(args, "log_file", None):
        effective["log_file"] = args.log_file
    if getattr(args, "max_bytes", None) is not None:
        effective["read_max_bytes"] = int(args.max_bytes)
    return effective


def resolve_log_path(args, settings: dict | None = None) -> Path | None:
    """Retorna o caminho do log que os argumentos apontam."""
    return get_log_path(_effective_settings(args, settings))


# ========================
# 2. Execução dos comandos
# ========================


# Função principal do módulo; executa o comando pedido e escreve em `out`
def run_command(args, out: TextIO | None = None, settings: dict | None = None) -> int:
    """Executa o comando da CLI e devolve o código de saída.

    Parâmetros:
        args: Namespace de ``parse_args``.
        out: stream de saída (stdout por omissão).
        settings: configurações já carregadas (testes); ``None`` carrega.

    Retorna 0 em sucesso e 1 quando o caminho do log não pode ser resolvido.
    """
    if out is None:
        out = sys.stdout

    effective = _effective_settings(args, settings)
    path = get_log_path(effective)
    if path is None:
        logger.error("run_command: %s", _NO_PATH_STR)
        print(_NO_PATH_STR, file=out)
        return 1

    command = getattr(args, "command", "show") or "show"
    logger.debug("run_command: %s em %s", command, path)

    if command == "path":
        print(path, file=out)
        return 0

    max_bytes = effective["read_max_bytes"]
    if command == "raw":
        text = read_log(path, max_bytes)
    else:
        text = render_log(path, max_bytes)

    if text:
        print(text, file=out)
    return 0
