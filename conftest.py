# conftest.py
# Configuração global para pytest: adiciona a raiz do projeto ao sys.path para
# permitir imports `src.*` sem instalação, e isola as variáveis LOGVIEW_*.
import os
import sys
from pathlib import Path

import pytest

ROOT_PATH = Path(__file__).parent
if str(ROOT_PATH) not in sys.path:
    sys.path.insert(0, str(ROOT_PATH))


@pytest.fixture(autouse=True)
def _isolate_logview_env(monkeypatch, tmp_path):
    """Remove LOGVIEW_* herdadas e aponta o .env para um ficheiro inexistente."""
    for key in [k for k in list(os.environ) if k.startswith("LOGVIEW_")]:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("LOGVIEW_ENV_FILE", str(tmp_path / "missing.env"))


@pytest.fixture
def log_dir(monkeypatch, tmp_path):
    """Diretório de logs temporário exposto via LOGVIEW_LOG_DIR."""
    d = tmp_path / "logs"
    d.mkdir()
    monkeypatch.setenv("LOGVIEW_LOG_DIR", str(d))
    return d
