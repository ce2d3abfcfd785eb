"""Bot configuration file and environment overrides."""

import json

import pytest

from skype_bot import BotConfig, ConfigError, load_config, save_config
from skype_bot.auth import DEFAULT_OAUTH_URL
from skype_bot.config import ENV_PREFIX


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in BotConfig.model_fields:
        monkeypatch.delenv(ENV_PREFIX + name.upper(), raising=False)


def test_defaults_when_file_is_missing(tmp_path):
    config = load_config(tmp_path / "missing.json")
    assert config.app_id is None
    assert config.request_timeout == 15.0
    assert config.oauth_url == DEFAULT_OAUTH_URL


def test_environment_overrides_file(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"app_id": "file-app", "bot_id": "28:bot"}))
    monkeypatch.setenv("SKYPE_BOT_APP_ID", "env-app")
    monkeypatch.setenv("SKYPE_BOT_REQUEST_TIMEOUT", "30")
    config = load_config(path)
    assert config.app_id == "env-app"
    assert config.bot_id == "28:bot"
    assert config.request_timeout == 30.0


def test_file_only(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"app_id": "file-app"}))
    monkeypatch.setenv("SKYPE_BOT_APP_ID", "env-app")
    monkeypatch.setenv("SKYPE_BOT_SERVER_URL", "https://env.example.com")
    config = load_config(path, use_env=False)
    assert config.app_id == "file-app"
    assert config.server_url is None


def test_unknown_file_keys_are_ignored(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"app_id": "app", "colour": "blue"}))
    assert load_config(path).model_dump()["app_id"] == "app"
    assert "colour" not in load_config(path).model_dump()


def test_invalid_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{broken")
    with pytest.raises(ConfigError) as exc:
        load_config(path)
    assert "is not valid JSON" in exc.value.message

    path.write_text("[]")
    with pytest.raises(ConfigError) as exc:
        load_config(path)
    assert "must contain a JSON object" in exc.value.message


def test_invalid_value(tmp_path, monkeypatch):
    monkeypatch.setenv("SKYPE_BOT_REQUEST_TIMEOUT", "soon")
    with pytest.raises(ConfigError) as exc:
        load_config(tmp_path / "missing.json")
    assert exc.value.message.startswith("Invalid configuration")


def test_require():
    config = BotConfig(app_id="app", app_secret="  ")
    config.require("app_id")
    with pytest.raises(ConfigError) as exc:
        config.require("app_id", "app_secret", "server_url")
    assert exc.value.message == "Missing configuration option(s): app_secret, server_url"


def test_masked():
    assert BotConfig(app_secret="s3cret").masked()["app_secret"] == "********"
    assert BotConfig().masked()["app_secret"] is None


def test_save_and_load(tmp_path):
    path = save_config(BotConfig(app_id="app", server_url="https://apis.example.com"), tmp_path / "dir" / "config.json")
    assert json.loads(path.read_text())["app_id"] == "app"
    assert load_config(path).server_url == "https://apis.example.com"
