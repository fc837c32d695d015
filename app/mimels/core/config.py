"""Run settings and configuration file handling.

Settings are resolved once, before any traversal starts, from the
optional configuration file (~/.config/mimels/config.toml) and the
command-line switches. They are immutable for the rest of the run.

Example config.toml:

    all = true
    mime = true
    bucket_order = "discovery"
    magic_file = "/usr/share/misc/magic.mgc"
"""

import logging
import tomllib
from enum import Enum
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from mimels.core.paths import get_config_path
from mimels.errors import ConfigError, ConfigNotFoundError, ConfigParseError

logger = logging.getLogger(__name__)


class OutputFormat(str, Enum):
    """Output line format.

    Attributes:
        NAME: "<path>" only.
        MIME: "<label>: <path>".
    """

    NAME = "name"
    MIME = "mime"


class BucketOrder(str, Enum):
    """Order of paths within one content-type group.

    Attributes:
        NEWEST_FIRST: Most recently discovered entry first.
        DISCOVERY: Traversal order.
    """

    NEWEST_FIRST = "newest-first"
    DISCOVERY = "discovery"


class FileConfig(BaseModel):
    """Defaults read from the configuration file.

    Every key is optional. Command-line switches can only turn a
    behavior on, so a value of True here cannot be undone from the
    command line.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    mime: Annotated[bool, Field(description="Output '<mime>: <file>' lines")] = False
    null: Annotated[bool, Field(description="Terminate lines with a null byte")] = False
    show_all: Annotated[
        bool,
        Field(alias="all", description="Include entries starting with '.'"),
    ] = False
    ignore_inaccessible: Annotated[
        bool,
        Field(description="Warn instead of failing on inaccessible roots"),
    ] = False
    bucket_order: Annotated[
        BucketOrder,
        Field(description="Order of paths within a content-type group"),
    ] = BucketOrder.NEWEST_FIRST
    magic_file: Annotated[
        Path | None,
        Field(description="Custom libmagic database (None = system default)"),
    ] = None


class Settings(BaseModel):
    """Immutable settings for one run.

    Attributes:
        output_format: Output line format.
        terminator: Line terminator, newline or null byte.
        show_hidden: Include entries whose name starts with a dot.
        ignore_inaccessible: Warn and continue when a root cannot be accessed.
        bucket_order: Order of paths within a content-type group.
        magic_file: Custom libmagic database, or None for the default one.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    output_format: OutputFormat = OutputFormat.NAME
    terminator: str = "\n"
    show_hidden: bool = False
    ignore_inaccessible: bool = False
    bucket_order: BucketOrder = BucketOrder.NEWEST_FIRST
    magic_file: Path | None = None

    @field_validator("terminator")
    @classmethod
    def validate_terminator(cls, v: str) -> str:
        """Only newline and null byte terminators are supported."""
        if v not in ("\n", "\0"):
            msg = f"terminator must be a newline or a null byte, got {v!r}"
            raise ValueError(msg)
        return v


def load_config_file(path: Path | None = None) -> FileConfig:
    """Load configuration defaults from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config
            path, and a missing file yields default values.

    Returns:
        Validated FileConfig object.

    Raises:
        ConfigNotFoundError: If an explicitly given config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        if path is not None:
            raise ConfigNotFoundError(f"Config file not found: {config_path}")
        logger.debug("No config file at %s, using defaults", config_path)
        return FileConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config file {config_path}: {e}") from e

    try:
        config = FileConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config content in {config_path}: {e}") from e

    logger.debug("Loaded config from %s", config_path)
    return config


def resolve_settings(
    file_config: FileConfig | None = None,
    *,
    mime: bool = False,
    null: bool = False,
    show_all: bool = False,
    ignore_inaccessible: bool = False,
) -> Settings:
    """Combine config file defaults with command-line switches.

    Args:
        file_config: Defaults from the config file. If None, built-in defaults.
        mime: -m/--mime was given.
        null: -0/--null was given.
        show_all: -a/--all was given.
        ignore_inaccessible: -i/--ignore-inaccessible was given.

    Returns:
        Settings for the run.
    """
    cfg = file_config or FileConfig()

    return Settings(
        output_format=OutputFormat.MIME if (mime or cfg.mime) else OutputFormat.NAME,
        terminator="\0" if (null or cfg.null) else "\n",
        show_hidden=show_all or cfg.show_all,
        ignore_inaccessible=ignore_inaccessible or cfg.ignore_inaccessible,
        bucket_order=cfg.bucket_order,
        magic_file=cfg.magic_file,
    )
