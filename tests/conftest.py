import os
import sys
import pytest
from click.testing import CliRunner

# Add project root to sys.path for local imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from utils.config.config_normalizer import ConfigNormalizer

SAMPLE_CONTENT = b"Hello, World!\nThis is a test file for hash calculation."

# ────────────────────────────────────────────────
# ENVIRONMENT FIXTURES
# ────────────────────────────────────────────────

@pytest.fixture(autouse=True)
def clear_hashculate_env(monkeypatch):
    """Remove HASHCULATE_* overrides so the host environment cannot leak into tests."""
    for env_var in ConfigNormalizer.ENV_VAR_MAPPING:
        monkeypatch.delenv(env_var, raising=False)


# ────────────────────────────────────────────────
# FILE FIXTURES
# ────────────────────────────────────────────────

@pytest.fixture
def sample_file(tmp_path):
    """57-byte text file used by the end-to-end scenarios."""
    path = tmp_path / "test_hash_calc.txt"
    path.write_bytes(SAMPLE_CONTENT)
    return path


@pytest.fixture
def empty_file(tmp_path):
    """Zero-byte file."""
    path = tmp_path / "empty.bin"
    path.write_bytes(b"")
    return path


@pytest.fixture
def binary_file(tmp_path):
    """Pseudo-random binary file a little over 3 KiB, not a multiple of common chunk sizes."""
    path = tmp_path / "payload.bin"
    path.write_bytes(bytes((i * 37 + 11) % 256 for i in range(3 * 1024 + 77)))
    return path


@pytest.fixture
def missing_config(tmp_path):
    """Path of a config file that does not exist, so only built-in defaults apply."""
    return str(tmp_path / "no_such_config.ini")


@pytest.fixture
def runner():
    """Fixture providing a Click CliRunner instance."""
    return CliRunner()
