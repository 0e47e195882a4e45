# vulture: ignore
"""Helpers de baixo nível para leitura do ficheiro de log.

Fornece leitura binária com lock partilhado, corte do final do conteúdo,
decodificação tolerante e verificação de diretórios.
"""

from pathlib import Path
import os
import logging

import portalocker

logger = logging.getLogger(__name__)


# -----------------------
# Leitura segura
# -----------------------
def read_bytes_locked(path: Path) -> bytes:
    """Leia o conteúdo binário de `path` sob lock partilhado.

    O serviço escreve no mesmo ficheiro enquanto a UI lê; o lock evita
    capturar uma linha a meio da escrita. Se o lock falhar a leitura segue
    em modo best-effort. Erros de abertura (`OSError`) propagam.
    """
    with Path(path).open("rb") as fh:
        locked = False
        try:
            try:
                portalocker.lock(fh, portalocker.LOCK_SH | portalocker.LOCK_NB)
                locked = True
            except portalocker.LockException as exc:
                logger.debug("read_bytes_locked: portalocker.lock falhou em %s: %s", path, exc)
            return fh.read()
        finally:
            if locked:
                try:
                    portalocker.unlock(fh)
                except portalocker.LockException as exc:
                    logger.debug("read_bytes_locked: portalocker.unlock falhou em %s: %s", path, exc)


# -----------------------
# Corte e decodificação
# -----------------------
def tail_bytes(data: bytes, max_bytes: int) -> bytes:
    """Retorna os últimos `max_bytes` bytes; `max_bytes <= 0` não corta."""
    if max_bytes <= 0 or len(data) <= max_bytes:
        return data
    return data[-max_bytes:]


def decode_log_bytes(data: bytes) -> str:
    """Decodifica UTF-8 substituindo sequências inválidas.

    O corte por bytes pode cair a meio de um carácter multibyte.
    """
    return data.decode("utf-8", errors="replace")


# -----------------------
# Diretórios / permissões
# -----------------------
def ensure_dir_writable(p: Path) -> bool:
    """Garante, em melhor esforço, que `p` existe e é gravável."""
    try:
        p.mkdir(parents=True, exist_ok=True)
        test = p / f".touch-{os.getpid()}"
        try:
            # open in append mode to minimize permission surprises
            with open(test, "a", encoding="utf-8") as f:
                f.write("ok")
                f.flush()
        except PermissionError as exc:
            logger.error("ensure_dir_writable: permission denied writing to %s: %s", p, exc, exc_info=True)
            return False
        except OSError as exc:
            logger.error("ensure_dir_writable: write test failed for %s: %s", p, exc, exc_info=True)
            return False
        finally:
            try:
                if test.exists():
                    test.unlink()
            except OSError as exc:
                logger.debug("ensure_dir_writable: cleanup failed for %s: %s", test, exc)
        return True
    except PermissionError as exc:
        logger.error("ensure_dir_writable: permission denied creating %s: %s", p, exc, exc_info=True)
        return False
    except OSError as exc:
        logger.error("ensure_dir_writable: failed for %s: %s", p, exc, exc_info=True)
        return False
