from pathlib import Path

import pytest

from tests.infrastructure.file_utils import write, write_template


@pytest.fixture
def template_file(tmp_path: Path):
    """Фабрика файлов шаблонов во временной директории."""
    def _make(text: str, name: str = "template.xml") -> Path:
        return write_template(tmp_path / name, text)
    return _make


@pytest.fixture
def data_file(tmp_path: Path):
    """Фабрика файлов с данными (YAML/JSON) во временной директории."""
    def _make(text: str, name: str = "data.yaml") -> Path:
        return write(tmp_path / name, text)
    return _make
