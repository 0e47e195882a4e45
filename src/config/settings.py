"""Configurações do visualizador de logs.

Este módulo centraliza a localização do ficheiro de log do serviço, o
limite de leitura e o nível de logging. Carrega valores a partir das
constantes ``DEFAULT_*`` e permite overrides via arquivo ``.env`` ou
variáveis de ambiente (prefixo ``LOGVIEW_*``).

A função pública principal é:

- ``load_settings()`` -> dicionário com chaves: "log_dir", "log_file",
  "read_max_bytes", "log_level".

Os limites de exibição (100 linhas, janelas de 50) são fixos e vivem em
``display.formatters``; não são configuráveis.
"""

import os
from pathlib import Path


# ========================
# Constantes e padrões globais
# ========================

DEFAULT_LOG_DIR_NAME = ".toy-servicerunner"
DEFAULT_LOG_FILE_NAME = "toy-service.log"
# O serviço devolve à UI apenas o final do ficheiro
DEFAULT_READ_MAX_BYTES = 2000
DEFAULT_LOG_LEVEL = "WARNING"

ENV_PREFIX = "LOGVIEW_"


# ========================
# 1. Carregamento das configurações
# ========================


# Função principal do módulo; carrega todas as configurações do ambiente
def load_settings() -> dict:
    """Carrega configurações combinando DEFAULTS + .env + ambiente.

    Retorna um dicionário com as chaves:

    - "log_dir": diretório do log (``None`` se a home não for resolvível)
    - "log_file": nome do ficheiro de log
    - "read_max_bytes": bytes lidos do final do ficheiro (0 = tudo)
    - "log_level": nível de log configurado

    As variáveis em ambiente sobrescrevem valores do arquivo `.env`.
    """
    import logging

    logger = logging.getLogger(__name__)

    project_root = Path(__file__).resolve().parents[2]
    env_path = Path(os.getenv("LOGVIEW_ENV_FILE", project_root / ".env"))

    env_items = _merge_env_items(env_path, logger)

    return {
        "log_dir": _resolve_log_dir(env_items, logger),
        "log_file": (env_items.get("LOGVIEW_LOG_FILE") or "").strip() or DEFAULT_LOG_FILE_NAME,
        "read_max_bytes": _parse_max_bytes(env_items, logger),
        "log_level": (env_items.get("LOGVIEW_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
    }


# ========================
# 2. Funções auxiliares para ambiente e overrides
# ========================


# Auxilia load_settings; criado para centralizar leitura do .env
def _read_env_file(path: Path | str) -> dict:
    """Lê um arquivo `.env` e devolve um dicionário chave->valor.

    Linhas vazias e comentários (começando com '#') são ignorados.
    """
    import logging

    logger = logging.getLogger(__name__)
    result: dict[str, str] = {}
    p = Path(path)
    if not p.exists():
        return result
    try:
        with p.open("r", encoding="utf-8") as fh:
            for line in fh:
                line = line.strip()
                if not line or line.startswith("#"):
                    continue
                if "=" not in line:
                    continue
                key, val = line.split("=", 1)
                key = key.strip()
                val = val.strip().strip('"').strip("'")
                result[key] = val
    except OSError as exc:
        logger.debug("Falha ao ler .env em %s: %s", p, exc)
        return {}
    return result


# Auxilia load_settings; criado para unir variáveis do ambiente e .env
def _merge_env_items(env_path: Path, logger) -> dict:
    """Retorna um mapeamento combinado de `.env` e env vars do processo.

    As variáveis do processo sobrescrevem o arquivo `.env`. Só chaves com
    prefixo ``LOGVIEW_`` são consideradas.
    """
    env_items = _read_env_file(env_path)
    if env_items == {} and env_path.exists():
        logger.warning("Erro ou ficheiro .env vazio em %s", env_path)
    env_items.update(os.environ)
    return {k: v for k, v in env_items.items() if k.startswith(ENV_PREFIX)}


# Auxilia load_settings; diretório explícito ou ~/.toy-servicerunner
def _resolve_log_dir(env_items: dict, logger) -> Path | None:
    raw = (env_items.get("LOGVIEW_LOG_DIR") or "").strip()
    if raw:
        return Path(raw).expanduser()
    try:
        return Path.home() / DEFAULT_LOG_DIR_NAME
    except RuntimeError as exc:
        logger.warning("Não foi possível determinar a home do utilizador: %s", exc)
        return None


# Auxilia load_settings; valores inválidos caem no padrão com warning
def _parse_max_bytes(env_items: dict, logger) -> int:
    raw = env_items.get("LOGVIEW_READ_MAX_BYTES")
    if raw is None or str(raw).strip() == "":
        return DEFAULT_READ_MAX_BYTES
    try:
        value = int(raw)
    except (TypeError, ValueError):
        logger.warning("LOGVIEW_READ_MAX_BYTES inválido: %s", raw)
        return DEFAULT_READ_MAX_BYTES
    if value < 0:
        logger.warning("LOGVIEW_READ_MAX_BYTES deve ser >= 0: %s", raw)
        return DEFAULT_READ_MAX_BYTES
    return value
