"""
Bot configuration: a JSON file under the user's home, overridable from the environment.

``SKYPE_BOT_<OPTION>`` variables take precedence over the file.
"""

import json
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError
from pydantic_settings import (
    BaseSettings,
    JsonConfigSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from skype_bot.auth import DEFAULT_OAUTH_URL, DEFAULT_SCOPE
from skype_bot.errors import ConfigError

CONFIG_FILE = Path.home() / ".skype-bot" / "config.json"
ENV_PREFIX = "SKYPE_BOT_"


class _JsonFileSource(JsonConfigSettingsSource):
    def _read_file(self, file_path: Path) -> dict[str, Any]:
        try:
            data = super()._read_file(file_path)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Config file {file_path} is not valid JSON: {e}")
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {file_path} must contain a JSON object")
        return data


class BotConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        json_file_encoding="utf-8",
        extra="ignore",
    )

    bot_id: Optional[str] = None
    app_id: Optional[str] = None
    app_secret: Optional[str] = None
    server_url: Optional[str] = None
    callback_uri: Optional[str] = None
    request_timeout: float = 15.0
    oauth_url: str = DEFAULT_OAUTH_URL
    oauth_scope: str = DEFAULT_SCOPE

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # earlier sources win: keyword arguments, then environment, then the JSON file
        return init_settings, env_settings, _JsonFileSource(settings_cls)

    def require(self, *names: str) -> None:
        """Raise ``ConfigError`` naming every option in ``names`` that is unset or blank."""
        missing = [name for name in names if not str(getattr(self, name) or "").strip()]
        if missing:
            raise ConfigError(f"Missing configuration option(s): {', '.join(missing)}")

    def masked(self) -> dict[str, Any]:
        data = self.model_dump()
        if data.get("app_secret"):
            data["app_secret"] = "********"
        return data


def _settings_for(path: Path, use_env: bool) -> type[BotConfig]:
    class FileBotConfig(BotConfig):
        model_config = SettingsConfigDict(json_file=path)

        @classmethod
        def settings_customise_sources(
            cls, settings_cls, init_settings, env_settings, dotenv_settings, file_secret_settings
        ):
            if use_env:
                return init_settings, env_settings, _JsonFileSource(settings_cls)
            return init_settings, _JsonFileSource(settings_cls)

    return FileBotConfig


def load_config(path: Optional[Path] = None, use_env: bool = True) -> BotConfig:
    """Read the config file at ``path`` (default ``~/.skype-bot/config.json``).

    With ``use_env`` the ``SKYPE_BOT_*`` variables override what the file holds.
    A missing file yields the defaults.
    """
    settings_cls = _settings_for(path or CONFIG_FILE, use_env)
    try:
        return settings_cls()
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}")


def save_config(config: BotConfig, path: Optional[Path] = None) -> Path:
    path = path or CONFIG_FILE
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(config.model_dump(exclude_none=True), indent=2))
    return path
