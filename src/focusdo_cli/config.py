"""Configuration for Focusdo CLI.

Settings are built from defaults plus command-line overrides; nothing is read
from or written to disk.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class UIConfig(BaseModel):
    """Event loop and screen configuration."""

    alt_screen: bool = Field(default=True)
    tick_interval_ms: int = Field(default=5, ge=1, le=100)
    refresh_per_second: int = Field(default=20, ge=1, le=120)


class TodoConfig(BaseModel):
    """Todo list and text field configuration."""

    char_limit: int = Field(default=256, ge=1)
    width_margin: int = Field(default=10, ge=0)
    min_width: int = Field(default=20, ge=1)
    placeholder: str = Field(default="todo...")


class StyleConfig(BaseModel):
    """Colors (ANSI 256 codes) used by the renderer."""

    header_color: str = Field(default="205")
    cursor_color: str = Field(default="212")
    stricken_color: str = Field(default="240")
    help_key_color: str = Field(default="241")
    help_desc_color: str = Field(default="239")
    placeholder_color: str = Field(default="240")


class LogConfig(BaseModel):
    """Log file configuration."""

    level: str = Field(default="INFO")

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"must be one of {', '.join(LOG_LEVELS)}")
        return value


class AppConfig(BaseModel):
    """Main configuration."""

    ui: UIConfig = Field(default_factory=UIConfig)
    todo: TodoConfig = Field(default_factory=TodoConfig)
    style: StyleConfig = Field(default_factory=StyleConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key."""
        value: Any = self
        for k in key.split("."):
            if isinstance(value, BaseModel):
                value = getattr(value, k, None)
            else:
                return None
        return value


def load_config(overrides: Optional[dict[str, Any]] = None) -> AppConfig:
    """Build the configuration, applying dot-separated key overrides.

    ``None`` override values are skipped so unset CLI options keep defaults.
    Raises ``pydantic.ValidationError`` for out-of-range values.
    """
    config_dict = AppConfig().model_dump()

    for key, value in (overrides or {}).items():
        if value is None:
            continue
        keys = key.split(".")
        current = config_dict
        for k in keys[:-1]:
            if k not in current:
                current[k] = {}
            current = current[k]
        current[keys[-1]] = value

    return AppConfig(**config_dict)
