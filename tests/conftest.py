import pytest


@pytest.fixture(autouse=True)
def temp_logger_env(monkeypatch, tmp_path):
    """Keep example log files out of the project directory."""
    monkeypatch.setattr("common.utils.project_root", str(tmp_path))
    logs_dir = tmp_path / "logs"
    logs_dir.mkdir(exist_ok=True)
    return logs_dir
