"""User configuration for the pathscout command line.

Default walk and find settings are read from
~/.config/pathscout/config.toml. The library functions never consult
this file; the CLI loads it and lets explicit flags override it.

Example config.toml::

    [walk]
    max_depth = 3
    exclude = ["*/.git", "*/node_modules"]
    exclude_regex = ["\\\\.pyc$"]

    [find]
    stop = "/home/me"
"""

import logging
import os
import re
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from pathscout.core.paths import get_config_path
from pathscout.walker.exclude import build_patterns
from pathscout.walker.models import WalkOptions

logger = logging.getLogger(__name__)


class WalkSettings(BaseModel):
    """Defaults for ``pathscout walk``.

    Attributes:
        max_depth: Descent limit (None = unbounded).
        include_files: Yield file entries.
        include_dirs: Yield directory entries.
        include_symlinks: Yield unresolved symlink entries.
        follow_symlinks: Resolve and descend through symlinks.
        exclude: Glob patterns matched against full paths.
        exclude_regex: Regular expressions searched in full paths.
    """

    model_config = ConfigDict(extra="forbid")

    max_depth: Annotated[int | None, Field(ge=0, description="Descent limit")] = None
    include_files: bool = True
    include_dirs: bool = True
    include_symlinks: bool = True
    follow_symlinks: bool = False
    exclude: Annotated[
        list[str],
        Field(default_factory=list, description="Glob patterns to exclude"),
    ]
    exclude_regex: Annotated[
        list[str],
        Field(default_factory=list, description="Regular expressions to exclude"),
    ]

    @field_validator("exclude_regex")
    @classmethod
    def validate_regex(cls, value: list[str]) -> list[str]:
        """Validate that every exclude_regex entry compiles."""
        for source in value:
            try:
                re.compile(source)
            except re.error as e:
                msg = f"Invalid regular expression {source!r}: {e}"
                raise ValueError(msg) from e
        return value

    def to_options(self) -> WalkOptions:
        """Build WalkOptions from these settings."""
        return WalkOptions(
            max_depth=self.max_depth,
            include_files=self.include_files,
            include_dirs=self.include_dirs,
            include_symlinks=self.include_symlinks,
            follow_symlinks=self.follow_symlinks,
            exclude=build_patterns(self.exclude, self.exclude_regex),
        )


class FindSettings(BaseModel):
    """Defaults for ``pathscout find``.

    Attributes:
        stop: Default exclusive search boundary (None = filesystem root).
    """

    model_config = ConfigDict(extra="forbid")

    stop: Annotated[Path | None, Field(description="Default search boundary")] = None


class PathscoutConfig(BaseModel):
    """Top-level pathscout configuration file."""

    model_config = ConfigDict(extra="forbid")

    walk: WalkSettings = Field(default_factory=WalkSettings)
    find: FindSettings = Field(default_factory=FindSettings)


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> PathscoutConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated PathscoutConfig object.

    Raises:
        ConfigNotFoundError: If the config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise ConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        config = PathscoutConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content: {e}") from e

    logger.debug("Loaded config from %s", config_path)
    return config


def load_config_or_default(path: Path | None = None) -> PathscoutConfig:
    """Load configuration, falling back to defaults when no file exists.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    try:
        return load_config(path)
    except ConfigNotFoundError:
        return PathscoutConfig()


def save_config(config: PathscoutConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The PathscoutConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = _config_to_dict(config)

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def _config_to_dict(config: PathscoutConfig) -> dict[str, object]:
    """Convert PathscoutConfig to a dictionary for TOML serialization.

    TOML has no null, so unset optional values are omitted.
    """
    walk = config.walk.model_dump(exclude_none=True)
    find: dict[str, object] = {}
    if config.find.stop is not None:
        find["stop"] = str(config.find.stop)
    return {"walk": walk, "find": find}
