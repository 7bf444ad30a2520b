"""Configuration management for stepspec."""

import tomllib
from pathlib import Path

import tomli_w
from pydantic import BaseModel, Field

from .constants import CONFIG_FILENAME


class DumpConfig(BaseModel):
    """YAML serialization settings used when dumping steps."""

    indent: int = Field(default=2, ge=2, le=9, description="Indentation width")
    width: int = Field(default=80, description="Preferred line width")
    default_flow_style: bool | None = Field(
        default=False, description="Flow style for collections (None lets PyYAML choose)"
    )
    explicit_start: bool = Field(default=False, description="Emit a leading '---'")


class LoggingConfig(BaseModel):
    """Logging settings for the stepspec package logger."""

    verbosity: int = 0  # 0=normal, 1+=verbose
    quiet: bool = False
    no_color: bool = False


class StepspecConfig(BaseModel):
    """Root configuration for stepspec."""

    dump: DumpConfig = Field(default_factory=DumpConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(config_dir: Path) -> StepspecConfig:
    """Load config from stepspec.toml.

    Args:
        config_dir: Directory containing stepspec.toml

    Returns:
        Loaded configuration, or defaults if stepspec.toml doesn't exist
    """
    config_path = config_dir / CONFIG_FILENAME
    if not config_path.exists():
        return StepspecConfig()
    with open(config_path, "rb") as f:
        data = tomllib.load(f)
    return StepspecConfig.model_validate(data)


def write_config_template(config_dir: Path) -> Path:
    """Write default stepspec.toml template.

    Args:
        config_dir: Directory to write stepspec.toml into

    Returns:
        Path to the written config file
    """
    config_path = config_dir / CONFIG_FILENAME
    template = {
        "dump": {"indent": 2, "width": 80, "default_flow_style": False, "explicit_start": False},
        "logging": {"verbosity": 0, "quiet": False, "no_color": False},
    }
    with open(config_path, "wb") as f:
        tomli_w.dump(template, f)
    return config_path
