"""
Tests for PlatformSettings
"""
import httpx
import pytest
from pydantic import ValidationError

from atrium.modules.settings import ENV_VARS, PlatformSettings
from atrium.modules.options import RequestOptions


@pytest.fixture
def clean_env(monkeypatch):
    """Unset every ATRIUM_* variable and restore whatever load_dotenv adds."""
    for env_var in ENV_VARS.values():
        # setenv first so teardown also removes values written by load_dotenv
        monkeypatch.setenv(env_var, "placeholder")
        monkeypatch.delenv(env_var)
    return monkeypatch


def test_defaults(clean_env, tmp_path):
    settings = PlatformSettings.from_env(str(tmp_path / "missing.env"))

    assert settings.base_url == "http://localhost:8080/platform"
    assert settings.api_path == "api/v1"
    assert settings.timeout == 30.0
    assert settings.username is None
    assert settings.auth is None


def test_from_env(clean_env, tmp_path):
    clean_env.setenv("ATRIUM_BASE_URL", "https://cms.example.com/platform/")
    clean_env.setenv("ATRIUM_USERNAME", "Administrator")
    clean_env.setenv("ATRIUM_PASSWORD", "Administrator")
    clean_env.setenv("ATRIUM_TIMEOUT", "5")
    clean_env.setenv("ATRIUM_REPOSITORY", "default")

    settings = PlatformSettings.from_env(str(tmp_path / "missing.env"))

    assert settings.api_url == "https://cms.example.com/platform/api/v1/"
    assert settings.timeout == 5.0
    assert isinstance(settings.auth, httpx.BasicAuth)
    assert settings.repository_name == "default"


def test_from_env_file(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("ATRIUM_BASE_URL=http://dotenv.test\nATRIUM_TOKEN=abc\n")

    settings = PlatformSettings.from_env(str(env_file))

    assert settings.base_url == "http://dotenv.test"
    assert settings.token == "abc"


def test_invalid_timeout(clean_env, tmp_path):
    clean_env.setenv("ATRIUM_TIMEOUT", "soon")

    with pytest.raises(ValidationError):
        PlatformSettings.from_env(str(tmp_path / "missing.env"))


def test_api_url_normalizes_slashes():
    settings = PlatformSettings(base_url="http://host/platform/", api_path="/api/v1/")
    assert settings.api_url == "http://host/platform/api/v1/"


def test_auth_needs_both_credentials():
    assert PlatformSettings(username="Administrator").auth is None


def test_base_options():
    settings = PlatformSettings(timeout=12.0, repository_name="default")
    assert settings.base_options() == RequestOptions(timeout=12.0, repository_name="default")
