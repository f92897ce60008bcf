"""Unit tests for application settings configuration."""

from pathlib import Path

from bookkeeper.config import Settings


def test_settings_uses_backend_env_file_independent_of_cwd():
    """Settings should always include backend/.env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_backend_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_backend_env in normalized
    assert str(Path(".env")) in normalized


def test_default_seed_file_ships_with_package():
    assert Path(Settings().seed_file).is_file()


def test_store_url_from_environment(monkeypatch):
    monkeypatch.setenv("STORE_URL", "memory://")
    monkeypatch.setenv("SEED_DEMO_DATA", "false")
    settings = Settings()
    assert settings.store_url == "memory://"
    assert settings.seed_demo_data is False
