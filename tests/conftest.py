import pytest

from identicon.config.settings import settings


@pytest.fixture
def output_dir(tmp_path, monkeypatch):
    """Перенаправляет сохранение identicon во временную директорию."""
    path = tmp_path / "saved_identicons"
    monkeypatch.setattr(settings, "_output_path", str(path))
    return path
