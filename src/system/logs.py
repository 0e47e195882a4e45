"""Subsistema de logs: localização, leitura e renderização.

Fornece helpers de nível superior para localizar o ficheiro de log do
serviço, ler o seu final e entregá-lo formatado para exibição.
"""

import logging
from pathlib import Path

from ..config.settings import load_settings
from ..display.formatters import build_log_for_display
from .log_helpers import decode_log_bytes, ensure_dir_writable, read_bytes_locked, tail_bytes

logger = logging.getLogger(__name__)

READ_ERROR_PREFIX = "Não foi possível ler o log"


# ========================
# 1. Diretórios e Paths
# ========================


def get_log_dir(settings: dict | None = None) -> Path | None:
    """Retorna o diretório de logs do serviço.

    ``None`` quando não for possível resolver a home do utilizador.
    """
    if settings is None:
        settings = load_settings()
    log_dir = settings.get("log_dir")
    return Path(log_dir) if log_dir else None


def get_log_path(settings: dict | None = None) -> Path | None:
    """Retorna o caminho completo do ficheiro de log do serviço."""
    if settings is None:
        settings = load_settings()
    log_dir = get_log_dir(settings)
    if log_dir is None:
        return None
    return log_dir / settings.get("log_file", "")


def ensure_log_dir(settings: dict | None = None) -> bool:
    """Cria o diretório de logs quando ausente e verifica se é gravável."""
    log_dir = get_log_dir(settings)
    if log_dir is None:
        logger.error("ensure_log_dir: diretório de logs indisponível")
        return False
    return ensure_dir_writable(log_dir)


# ========================
# 2. Leitura
# ========================


# Lê o final do ficheiro de log; consumido por render_log e pela CLI (raw)
def read_log(path: str | Path | None = None, max_bytes: int | None = None) -> str:
    """Lê o ficheiro de log e devolve no máximo os últimos `max_bytes` bytes.

    Sem argumentos usa o caminho e o limite de ``load_settings()``. Nunca
    lança: falhas de leitura são registadas e devolvidas como mensagem
    legível para a UI.
    """
    if path is None or max_bytes is None:
        settings = load_settings()
        if path is None:
            path = get_log_path(settings)
        if max_bytes is None:
            max_bytes = settings["read_max_bytes"]

    if path is None:
        logger.error("read_log: caminho do log indisponível")
        return f"{READ_ERROR_PREFIX}: caminho indisponível"

    try:
        data = read_bytes_locked(Path(path))
    except OSError as exc:
        logger.error("read_log: falhou em %s: %s", path, exc, exc_info=True)
        return f"{READ_ERROR_PREFIX}: {exc}"

    return decode_log_bytes(tail_bytes(data, int(max_bytes)))


def render_log(path: str | Path | None = None, max_bytes: int | None = None) -> str:
    """Lê o log e aplica a formatação de exibição (mais recentes primeiro)."""
    return build_log_for_display(read_log(path, max_bytes))
