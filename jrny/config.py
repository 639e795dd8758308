"""Settings for jrny, read from a TOML file."""

from pathlib import Path
from typing import Literal, Optional

import toml
from pydantic import BaseModel, Field, ValidationError, field_validator

from jrny.models import RenderStyle

CONFIG_PATH = Path.home() / ".config" / "jrny" / "config.toml"

DEFAULT_JOURNAL = Path("journal.jrnl")
DEFAULT_LOG_FILE = Path("jrny.log")


class ConfigError(ValueError):
    """Raised when the settings file cannot be read or is invalid."""


class Settings(BaseModel):
    """User settings; every field has a default."""

    journal: Path = Field(default=DEFAULT_JOURNAL, description="Journal file used when none is given")
    log_file: Path = Field(default=DEFAULT_LOG_FILE, description="Diagnostic log file")
    view: Literal["text", "list"] = Field(default="text", description="Content view for sessions")
    quit_keys: list[str] = Field(default_factory=lambda: ["ctrl+c"], description="Keys that end a session")
    style: RenderStyle = Field(default_factory=RenderStyle)

    model_config = {"extra": "forbid"}

    @field_validator("journal", "log_file")
    @classmethod
    def _expand_user(cls, value: Path) -> Path:
        return value.expanduser()


def load_settings(config_path: Optional[Path] = None) -> Settings:
    """Load settings, falling back to defaults when the file is absent.

    Args:
        config_path: Settings file, defaults to ``CONFIG_PATH``.

    Returns:
        Validated settings.

    Raises:
        ConfigError: If the file exists but is not valid TOML or holds
            unknown or invalid values.
    """
    path = config_path or CONFIG_PATH
    if not path.exists():
        return Settings()

    try:
        data = toml.load(path)
    except (OSError, toml.TomlDecodeError) as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e

    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config {path}:\n{e}") from e
