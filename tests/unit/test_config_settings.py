"""Unit tests for application settings configuration."""

from pathlib import Path

from jewelcrm.config import Settings


def test_settings_uses_project_env_file_independent_of_cwd():
    """Settings should always include the project .env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_project_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_project_env in normalized
    assert str(Path(".env")) in normalized


def test_api_base_url_from_next_public_env(monkeypatch):
    monkeypatch.setenv("NEXT_PUBLIC_API_URL", "https://crm.example.com/api")
    assert Settings(_env_file=None).api_base_url == "https://crm.example.com/api"


def test_api_base_url_default(monkeypatch):
    monkeypatch.delenv("NEXT_PUBLIC_API_URL", raising=False)
    monkeypatch.delenv("JEWELCRM_API_URL", raising=False)
    monkeypatch.delenv("API_BASE_URL", raising=False)
    assert Settings(_env_file=None).api_base_url == "http://localhost:8000/api"
