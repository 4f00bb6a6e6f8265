"""Tests for the .env.example credential template."""

from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent

REQUIRED_KEYS = [
    "MAL_CLIENT_ID",
    "MAL_CLIENT_SECRET",
    "MAL_REDIRECT_URL",
    "MAL_ACCESS_TOKEN",
    "MAL_REFRESH_TOKEN",
]


def test_env_example_exists() -> None:
    """Test that .env.example exists in the project root."""
    assert (ROOT / ".env.example").exists(), ".env.example does not exist"


def test_env_example_includes_required_keys() -> None:
    """Test that .env.example lists every credential variable."""
    content = (ROOT / ".env.example").read_text(encoding="utf-8")
    for key in REQUIRED_KEYS:
        assert key in content, f"{key} not found in .env.example"
