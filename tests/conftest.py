import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from models.enums import LogLevel
from utils.logger import configure_logger


@pytest.fixture(autouse=True)
def reset_logger():
    """Tests may reconfigure the singleton logger; restore defaults afterwards."""
    yield
    configure_logger(LogLevel.INFO, use_colors=True, stream=None)


@pytest.fixture
def write_yaml(tmp_path):
    """Write a YAML document into tmp_path and return its path."""
    def _write(name: str, text: str) -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write
