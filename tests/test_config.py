"""Environment parsing."""

import pytest

from paygate.config import load_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    # no stray .env file from the working directory
    monkeypatch.chdir(tmp_path)
    for name in ("STRIPE_SECRET_KEY", "PORT", "DEBUG", "CORS_ORIGINS"):
        # setenv first so whatever load_dotenv writes is undone at teardown
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


def test_defaults():
    s = load_settings()

    assert s.stripe_secret_key is None
    assert s.port == 8080
    assert s.debug is False
    assert s.cors_origins == []


def test_empty_secret_key_counts_as_unset(monkeypatch):
    monkeypatch.setenv("STRIPE_SECRET_KEY", "")

    assert load_settings().stripe_secret_key is None


def test_values_from_environment(monkeypatch):
    monkeypatch.setenv("STRIPE_SECRET_KEY", "sk_live_x")
    monkeypatch.setenv("PORT", "9090")
    monkeypatch.setenv("DEBUG", "yes")
    monkeypatch.setenv("CORS_ORIGINS", "https://shop.example.com, http://localhost:5173,")

    s = load_settings()

    assert s.stripe_secret_key == "sk_live_x"
    assert s.port == 9090
    assert s.debug is True
    assert s.cors_origins == ["https://shop.example.com", "http://localhost:5173"]


def test_env_file_does_not_override_environment(monkeypatch, tmp_path):
    (tmp_path / ".env").write_text("STRIPE_SECRET_KEY=sk_from_file\nPORT=7000\n")
    monkeypatch.setenv("STRIPE_SECRET_KEY", "sk_from_env")

    s = load_settings()

    assert s.stripe_secret_key == "sk_from_env"
    assert s.port == 7000
