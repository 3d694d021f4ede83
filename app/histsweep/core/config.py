"""Sweep configuration and settings.

This module provides the configuration model and I/O functions for
histsweep defaults: which pattern profile to use and how user home
directories are discovered.

Configuration is stored in ~/.config/histsweep/config.toml
"""

import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated, Literal

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from histsweep.core.paths import ensure_config_dir, get_config_path

ProfileName = Literal["minimal", "extended"]
HomesPolicy = Literal["passwd", "glob"]


class SweepConfig(BaseModel):
    """Defaults applied to every sweep.

    Attributes:
        profile: Pattern profile ("minimal" or "extended").
        homes: Home directory discovery policy ("passwd" or "glob").
        home_base: Parent of user homes for the glob policy.
        admin_root: Administrative root, always swept.
        record_history: Append live sweeps to the history file.
    """

    model_config = ConfigDict(extra="forbid")

    profile: Annotated[
        ProfileName,
        Field(description="Pattern profile"),
    ] = "minimal"
    homes: Annotated[
        HomesPolicy,
        Field(description="Home directory discovery policy"),
    ] = "passwd"
    home_base: Annotated[
        Path,
        Field(description="Parent directory of user homes (glob policy)"),
    ] = Path("/home")
    admin_root: Annotated[
        Path,
        Field(description="Administrative root directory"),
    ] = Path("/root")
    record_history: Annotated[
        bool,
        Field(description="Record live sweeps to history"),
    ] = True

    @field_validator("home_base", "admin_root")
    @classmethod
    def validate_absolute(cls, v: Path) -> Path:
        """Require absolute directory paths."""
        if not v.is_absolute():
            msg = f"must be an absolute path, got {v}"
            raise ValueError(msg)
        return v


class SweepConfigError(Exception):
    """Base exception for sweep configuration errors."""


class SweepConfigNotFoundError(SweepConfigError):
    """Raised when the config file is not found."""


class SweepConfigParseError(SweepConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> SweepConfig:
    """Load sweep configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated SweepConfig object.

    Raises:
        SweepConfigNotFoundError: If the config file doesn't exist.
        SweepConfigParseError: If the TOML syntax is invalid.
        SweepConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise SweepConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise SweepConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise SweepConfigError(f"Failed to read config: {e}") from e

    try:
        return SweepConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise SweepConfigError(f"Invalid config content in {config_path}: {e}") from e


def load_config_or_default(path: Path | None = None) -> SweepConfig:
    """Load the config file, falling back to defaults when it is missing.

    Raises:
        SweepConfigError: If the file exists but is invalid.
    """
    try:
        return load_config(path)
    except SweepConfigNotFoundError:
        return SweepConfig()


def save_config(config: SweepConfig, path: Path | None = None) -> Path:
    """Save sweep configuration to a TOML file.

    The file is written to a temporary file in the same directory and
    moved into place with os.replace().

    Args:
        config: The SweepConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        SweepConfigError: If the file cannot be written.
    """
    if path is None:
        try:
            ensure_config_dir()
        except RuntimeError as e:
            raise SweepConfigError(str(e)) from e
    config_path = path or get_config_path()

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(config_to_dict(config), f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise SweepConfigError(f"Failed to write config: {e}") from e

    return config_path


def config_to_dict(config: SweepConfig) -> dict[str, object]:
    """Convert SweepConfig to a TOML-serializable dictionary."""
    return {
        "profile": config.profile,
        "homes": config.homes,
        "home_base": str(config.home_base),
        "admin_root": str(config.admin_root),
        "record_history": config.record_history,
    }
