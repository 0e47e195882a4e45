from pathlib import Path

from src.system import logs


def test_get_log_path_uses_env_dir(log_dir):
    """get_log_path combina LOGVIEW_LOG_DIR com o nome padrão."""
    assert logs.get_log_path() == log_dir / "toy-service.log"


def test_get_log_path_defaults_to_home(monkeypatch, tmp_path):
    """Sem override o log fica em ~/.toy-servicerunner."""
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))
    assert logs.get_log_path() == tmp_path / ".toy-servicerunner" / "toy-service.log"


def test_get_log_path_none_without_dir():
    """Sem diretório resolvido o caminho é None."""
    assert logs.get_log_path({"log_dir": None, "log_file": "x.log"}) is None


def test_ensure_log_dir_creates_missing(monkeypatch, tmp_path):
    """ensure_log_dir cria o diretório configurado."""
    target = tmp_path / "new" / "logs"
    monkeypatch.setenv("LOGVIEW_LOG_DIR", str(target))
    assert logs.ensure_log_dir() is True
    assert target.is_dir()


def test_ensure_log_dir_without_dir_returns_false():
    """Sem diretório resolvido não há nada a criar."""
    assert logs.ensure_log_dir({"log_dir": None}) is False


def test_read_log_returns_tail(tmp_path):
    """read_log devolve apenas os últimos bytes pedidos."""
    p = tmp_path / "svc.log"
    p.write_text("a" * 10 + "END", encoding="utf-8")
    assert logs.read_log(p, 3) == "END"
    assert logs.read_log(p, 0) == "a" * 10 + "END"


def test_read_log_default_limit_is_2000(log_dir):
    """Sem argumentos aplica o limite padrão de 2000 bytes."""
    p = log_dir / "toy-service.log"
    p.write_text("x" * 2500, encoding="utf-8")
    assert len(logs.read_log()) == 2000


def test_read_log_limit_from_env(log_dir, monkeypatch):
    """LOGVIEW_READ_MAX_BYTES altera o limite de leitura."""
    monkeypatch.setenv("LOGVIEW_READ_MAX_BYTES", "5")
    (log_dir / "toy-service.log").write_text("0123456789", encoding="utf-8")
    assert logs.read_log() == "56789"


def test_read_log_missing_file_returns_message(tmp_path, caplog):
    """Erro de leitura vira mensagem e é registado."""
    out = logs.read_log(tmp_path / "missing.log", 2000)
    assert out.startswith(logs.READ_ERROR_PREFIX)
    assert any("read_log" in r.getMessage() for r in caplog.records)


def test_read_log_without_path(monkeypatch):
    """Sem caminho resolvível devolve mensagem em vez de lançar."""
    monkeypatch.setattr(logs, "get_log_path", lambda settings=None: None)
    out = logs.read_log()
    assert out.startswith(logs.READ_ERROR_PREFIX)


def test_render_log_newest_first(tmp_path):
    """render_log lê e formata: última linha primeiro, sem linha vazia inicial."""
    p = tmp_path / "svc.log"
    p.write_bytes(b"2024-01-01 00:00:00: Service started\r\n2024-01-01 00:00:10: I'm alive\r\n")
    assert logs.render_log(p, 2000) == "2024-01-01 00:00:10: I'm alive\n2024-01-01 00:00:00: Service started"


def test_render_log_truncates_long_logs(tmp_path):
    """Logs com mais de 100 linhas lidos por inteiro mostram o marcador."""
    p = tmp_path / "svc.log"
    p.write_text("".join(f"line {i}\n" for i in range(1, 201)), encoding="utf-8")
    out = logs.render_log(p, 0).split("\n")
    assert len(out) == 101
    assert out[0] == "line 200"
    assert out[50] == "..."
    assert out[-1] == "line 1"


def test_render_log_error_message_passes_through(tmp_path):
    """A mensagem de erro de leitura é exibida como linha única."""
    out = logs.render_log(tmp_path / "missing.log", 2000)
    assert out.startswith(logs.READ_ERROR_PREFIX)
    assert "\n" not in out
