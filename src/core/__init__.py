"""Pacote core: orquestração da CLI.

Contém o parsing de argumentos e a execução dos comandos.

Re-exports para imports curtos.
"""

from .core import resolve_log_path, run_command

__all__ = ["resolve_log_path", "run_command"]
