"""Parser de argumentos do visualizador de logs.

Docstrings e mensagens em português.

Este módulo fornece um parser simples que expõe:
- comando (show / raw / path), padrão ``show``
- localização do log (--log-dir / --log-file)
- bytes lidos do final do ficheiro (--max-bytes), 0 = ficheiro inteiro
- verbosidade (-v)
- nível de logging (--log-level)

As funções retornam objetos compatíveis com argparse.Namespace para
serem consumidos por `src.main`.
"""

import argparse
import logging
import os
from typing import Sequence

COMMANDS = ("show", "raw", "path")

# ========================
# 0. Configuração do parser e argumentos padrão
# ========================


# Função principal do módulo; cria e retorna o ArgumentParser configurado
def configure_argparser() -> argparse.ArgumentParser:
    """Cria e retorna ArgumentParser configurado para o visualizador."""
    parser = argparse.ArgumentParser(
        prog="logview",
        description="Mostra o log do serviço com as linhas mais recentes primeiro",
    )

    parser.add_argument(
        "command",
        nargs="?",
        choices=COMMANDS,
        default="show",
        help="show: log formatado; raw: final do log sem formatação; path: caminho do ficheiro",
    )
    parser.add_argument(
        "--log-dir",
        dest="log_dir",
        type=str,
        default=None,
        help="Diretório do log (substitui LOGVIEW_LOG_DIR)",
    )
    parser.add_argument(
        "--log-file",
        dest="log_file",
        type=str,
        default=None,
        help="Nome do ficheiro de log (substitui LOGVIEW_LOG_FILE)",
    )
    parser.add_argument(
        "--max-bytes",
        dest="max_bytes",
        type=int,
        default=None,
        help="Bytes lidos do final do ficheiro (0 = ficheiro inteiro; substitui LOGVIEW_READ_MAX_BYTES)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Aumenta a verbosidade (-v, -vv)",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        type=str,
        default=None,
        help="Nível de logging (DEBUG/INFO/WARNING/ERROR). Se ausente, definido por -v",
    )

    return parser


# ========================
# 1. Funções auxiliares para análise e validação de argumentos
# ========================


# Auxilia src.main; criado para analisar argv e validar argumentos
def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Analisa argv e retorna Namespace validado para uso no programa."""
    parser = configure_argparser()
    ns = parser.parse_args(argv)
    # log_dir/log_file/max_bytes ficam None quando ausentes e são
    # resolvidos depois por load_settings() (que já lê ambiente e .env)
    env_map = {
        "verbose": "LOGVIEW_VERBOSE",
        "log_level": "LOGVIEW_LOG_LEVEL",
    }

    # Aplicar overrides via variáveis de ambiente SOMENTE quando o argumento
    # não foi fornecido pela linha de comando (CLI tem precedência).
    for arg, env_var in env_map.items():
        env_val = os.getenv(env_var)
        if env_val is None:
            continue
        default_val = parser.get_default(arg)
        current_val = getattr(ns, arg, None)
        if current_val is not None and current_val != default_val:
            continue
        try:
            if arg == "verbose":
                setattr(ns, arg, int(env_val))
            else:
                setattr(ns, arg, env_val)
        except ValueError as exc:
            logging.getLogger(__name__).warning(f"{env_var} inválido ('{env_val}'): {exc}. Usando valor do argumento.")
    validate_args(ns)
    return ns


# Auxilia parse_args; criado para garantir valores corretos e seguros
def validate_args(args: argparse.Namespace) -> None:
    """Valida e normaliza argumentos do visualizador de logs."""
    if getattr(args, "command", None) is None:
        args.command = "show"
    if args.command not in COMMANDS:
        raise ValueError(f"comando desconhecido: {args.command}")

    max_bytes = getattr(args, "max_bytes", None)
    if max_bytes is not None:
        try:
            args.max_bytes = int(max_bytes)
        except (TypeError, ValueError) as exc:
            raise ValueError("max-bytes deve ser um inteiro >= 0") from exc
        if args.max_bytes < 0:
            raise ValueError("max-bytes deve ser >= 0")


# ========================
# 2. Função auxiliar para configuração de logging
# ========================


# Auxilia src.main; criado para extrair configuração de logging dos argumentos
def get_log_config(args: argparse.Namespace, settings: dict | None = None) -> dict:
    """Retorna dict com configuração de logging ('level') para o visualizador.

    Ordem: --log-level, depois -v/-vv, depois ``settings['log_level']``.
    """
    v = getattr(args, "verbose", 0) or 0
    if getattr(args, "log_level", None):
        level = str(args.log_level).upper()
    elif v >= 2:
        level = "DEBUG"
    elif v == 1:
        level = "INFO"
    elif settings and settings.get("log_level"):
        level = str(settings["log_level"]).upper()
    else:
        level = "WARNING"

    return {"level": level}
