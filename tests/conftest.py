"""Pytest configuration and fixtures."""

import pytest
import sys
from pathlib import Path

# Add src to path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


@pytest.fixture
def clean_settings(monkeypatch, tmp_path):
    """Fixture giving a settings cache isolated from the real environment."""
    from bytecodec.config import reset_settings

    for name in ("BYTECODEC_LOG_LEVEL", "BYTECODEC_LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture(scope="session")
def test_data():
    """Fixture providing test data."""
    return {
        "ascii": b"hello",
        "binary": bytes([0x00, 0xFF, 0x1A]),
        "all_bytes": bytes(range(256)),
        "utf8": "héllo ☃".encode("utf-8"),
        "malformed": b"ok\xff\xfe",
    }
