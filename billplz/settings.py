import logging
import tomllib
from pathlib import Path
from typing import Optional, Tuple, Type

from pydantic import ValidationError
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from .client import BillplzClient
from .environment import Environment
from .errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".billplz" / "config.toml"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="BILLPLZ_",
        toml_file=DEFAULT_CONFIG_PATH,
        extra="ignore",
    )

    api_key: Optional[str] = None
    environment: str = "staging"

    # Host override, e.g. a local mock server
    base_url: Optional[str] = None
    timeout: Optional[float] = None

    log_level: str = "WARNING"

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        # env vars win over the config file
        return (init_settings, env_settings, TomlConfigSettingsSource(settings_cls))

    def into_client(self) -> BillplzClient:
        if self.base_url:
            return BillplzClient.with_base_url(self.base_url, self.api_key, timeout=self.timeout)
        return BillplzClient(Environment.from_name(self.environment), self.api_key, timeout=self.timeout)


class EnvSettings(Settings):
    """Settings without the config file, used when the file cannot be read."""

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        return (init_settings, env_settings)


def load_settings(config_path: Optional[Path] = None) -> Settings:
    """
    Load settings from BILLPLZ_* env vars and a TOML file
    (~/.billplz/config.toml unless config_path is given).

    A config file that is not valid TOML, or holds values of the wrong type,
    is ignored with a warning and only the env vars are used.
    """
    path = Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH
    settings_cls = Settings
    if config_path is not None:
        settings_cls = type(
            "FileSettings",
            (Settings,),
            {"model_config": SettingsConfigDict(toml_file=path)},
        )

    try:
        settings = settings_cls()
    except (tomllib.TOMLDecodeError, OSError, ValidationError) as e:
        logger.warning("ignoring config file %s: %s", path, e)
        try:
            settings = EnvSettings()
        except ValidationError as env_error:
            raise ConfigError(f"invalid BILLPLZ_* environment settings: {env_error}") from env_error

    if not settings.api_key:
        raise ConfigError(
            "API key not found. Set BILLPLZ_API_KEY env var "
            f"or add api_key to {path}"
        )
    return settings
