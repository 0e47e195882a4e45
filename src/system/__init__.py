"""Pacote system: localização e leitura do ficheiro de log do serviço.

Inclui helpers de leitura com lock, corte do final do ficheiro e
renderização para exibição.

Re-exports úteis para imports curtos.
"""

from .logs import get_log_path, read_log, render_log

__all__ = ["get_log_path", "read_log", "render_log"]
