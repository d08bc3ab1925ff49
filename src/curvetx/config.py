import tomllib
from pathlib import Path
from typing import Annotated, Literal

import tomlkit
from pydantic import BaseModel, PlainSerializer, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from curvetx.logging import logger

CONFIG_DIR = Path.home() / ".config" / "curvetx"
CONFIG_FILE = CONFIG_DIR / "config.toml"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingSettings(BaseModel):
    level: LogLevel = "INFO"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CURVETX_",
        env_nested_delimiter="__",
    )

    logging: LoggingSettings = LoggingSettings()

    # Serialize the path as a string representation of the absolute path
    pools: (
        Annotated[
            Path,
            PlainSerializer(lambda path: str(path.absolute()), return_type=str),
        ]
        | None
    ) = None

    @field_validator("pools", mode="after")
    def validate_pools_path(
        cls,  # noqa: N805
        path: Path | None,
    ) -> Path | None:
        """
        Convert the pool catalog path to an absolute reference.
        """

        return path.expanduser().absolute() if path is not None else None


def load_config_from_file(config_path: Path) -> Settings:
    return Settings.model_validate(
        tomllib.loads(
            config_path.read_text(),
        ),
    )


def save_config_to_file(config: Settings, config_path: Path = CONFIG_FILE) -> None:
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(
        tomlkit.dumps(
            config.model_dump(exclude_none=True),
        ),
    )


settings = load_config_from_file(CONFIG_FILE) if CONFIG_FILE.exists() else Settings()
logger.setLevel(settings.logging.level)
