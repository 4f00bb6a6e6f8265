"""Configure pytest."""

import json
import sys
from pathlib import Path
from typing import Any

import pytest

root_dir = Path(__file__).parent

# Add src directory to Python path
src_path = str(root_dir / "src")
if src_path not in sys.path:
    sys.path.insert(0, src_path)

FIXTURES_DIR = root_dir / "tests" / "fixtures"

_CREDENTIAL_VARS = (
    "MAL_CLIENT_ID",
    "MAL_CLIENT_SECRET",
    "MAL_REDIRECT_URL",
    "MAL_ACCESS_TOKEN",
    "MAL_REFRESH_TOKEN",
    "MAL_TOKEN_EXPIRES_AT",
)


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep tests away from real credentials and the user's config file."""
    for name in _CREDENTIAL_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.delenv("MALAPI_FEATURES_FORUM", raising=False)
    monkeypatch.delenv("MALAPI_FEATURES_USER", raising=False)
    monkeypatch.delenv("MALAPI_CLI_LIMIT", raising=False)

    from malapi.utils import config

    config_dir = tmp_path / "config" / "malapi"
    monkeypatch.setattr(config, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(config, "CONFIG_FILE", config_dir / "config.toml")
    return config_dir


@pytest.fixture()
def load_fixture():
    """Return a loader for JSON files under tests/fixtures."""

    def _load(name: str) -> Any:  # noqa: ANN401
        return json.loads((FIXTURES_DIR / name).read_text(encoding="utf-8"))

    return _load
