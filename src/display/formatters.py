"""Formatação de logs para exibição humana.

Inverte a ordem das linhas (mais recentes primeiro) e, em logs longos,
mantém apenas as linhas mais recentes e as mais antigas separadas por um
marcador.
"""


# ========================
# 0. Constantes de exibição
# ========================

DISPLAY_MAX_LINES = 100
DISPLAY_WINDOW_LINES = 50
ELLIPSIS_MARKER = "..."


# ========================
# 1. Função principal (API pública)
# ========================


def build_log_for_display(value: str | None) -> str:
    """Formata o texto bruto de um log para exibição.

    - linhas mais recentes (as últimas do texto) aparecem primeiro
    - com mais de 100 linhas mostra 50 recentes + "..." + 50 antigas

    Entrada ``None`` ou vazia devolve string vazia.
    """
    if not value:
        return ""

    lines = _split_lines(value)
    _drop_trailing_empty(lines)

    # newest first
    lines.reverse()

    if len(lines) > DISPLAY_MAX_LINES:
        lines = _truncate_middle(lines)

    return "\n".join(lines)


# ========================
# 2. Auxiliares
# ========================


# Auxilia build_log_for_display; CRLF e LF produzem a mesma divisão
def _split_lines(value: str) -> list[str]:
    return value.replace("\r\n", "\n").split("\n")


# Auxilia build_log_for_display; remove o artefacto do(s) newline(s) final(is)
def _drop_trailing_empty(lines: list[str]) -> None:
    """Remove entradas vazias do fim da lista, in-place.

    Linhas vazias interiores são preservadas.
    """
    while lines and lines[-1] == "":
        lines.pop()


def _truncate_middle(lines: list[str]) -> list[str]:
    """Mantém a janela inicial e a final, separadas pelo marcador."""
    head = lines[:DISPLAY_WINDOW_LINES]
    tail = lines[-DISPLAY_WINDOW_LINES:]
    return [*head, ELLIPSIS_MARKER, *tail]
