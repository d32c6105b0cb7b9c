"""
Configuration management for peon-ping.

The config file is read once per hook invocation and is never fatal: a
missing or malformed file yields the defaults below. Tooling that rewrites
a single key (``peon pack``) goes through the plain config map instead of
PeonConfig so keys this schema does not know about survive the rewrite.
"""

import json
import logging
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    field_validator,
    model_validator,
)

from peon.utils.atomic import atomic_write_text
from peon.utils.paths import config_path

logger = logging.getLogger(__name__)

KNOWN_CATEGORIES = (
    "greeting",
    "acknowledge",
    "complete",
    "error",
    "permission",
    "resource_limit",
    "annoyed",
)

_toggle_adapter = TypeAdapter(bool)


class CategoryToggles(BaseModel):
    """Per-category sound switches.

    Categories nobody configured are enabled. Extra category names in the
    config file are kept, validated as booleans like the known ones, and
    honoured by is_enabled().
    """

    model_config = ConfigDict(extra="allow")

    greeting: bool = True
    acknowledge: bool = True
    complete: bool = True
    error: bool = True
    permission: bool = True
    resource_limit: bool = True
    annoyed: bool = True

    @model_validator(mode="after")
    def validate_extra_toggles(self) -> "CategoryToggles":
        """Coerce extra toggles to bool; reject values that are not booleans."""
        extra = self.model_extra or {}
        for name, value in extra.items():
            try:
                extra[name] = _toggle_adapter.validate_python(value)
            except ValidationError:
                raise ValueError(
                    f"Category toggle '{name}' must be a boolean, got {value!r}"
                ) from None
        return self

    def is_enabled(self, category: str) -> bool:
        """Check whether sounds for ``category`` should play."""
        if category in type(self).model_fields:
            return bool(getattr(self, category))
        extra = self.model_extra or {}
        return extra.get(category, True)


class LoggingSettings(BaseModel):
    """Logging configuration for the hook process."""

    level: Literal["debug", "info", "warning", "error"] = Field(
        default="info",
        description="Log level",
    )
    file: str | None = Field(
        default=None,
        description="Log file path (default: <peon dir>/logs/peon.log)",
    )
    max_size_mb: int = Field(
        default=10,
        description="Maximum log file size in MB",
    )
    backup_count: int = Field(
        default=5,
        description="Number of backup log files to keep",
    )

    @field_validator("max_size_mb", "backup_count")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate value is positive."""
        if v <= 0:
            raise ValueError("Value must be positive")
        return v


class PeonConfig(BaseModel):
    """Typed view of config.json, used on every read path."""

    active_pack: str = Field(
        default="peon",
        description="Sound pack used when no rotation is configured",
    )
    volume: float = Field(
        default=0.5,
        description="Playback volume between 0.0 and 1.0",
    )
    enabled: bool = Field(
        default=True,
        description="Master switch; when false every event is skipped",
    )
    categories: CategoryToggles = Field(
        default_factory=CategoryToggles,
        description="Per-category sound toggles",
    )
    annoyed_threshold: int = Field(
        default=3,
        ge=0,
        description="Prompts inside the window that trigger the annoyed sound",
    )
    annoyed_window_seconds: float = Field(
        default=10.0,
        description="Sliding window for annoyed detection, in seconds",
    )
    pack_rotation: list[str] = Field(
        default_factory=list,
        description="Packs to pin randomly per session (empty disables rotation)",
    )
    logging: LoggingSettings = Field(
        default_factory=LoggingSettings,
        description="Hook log file settings",
    )

    @field_validator("volume")
    @classmethod
    def clamp_volume(cls, v: float) -> float:
        """Clamp volume into [0.0, 1.0]."""
        return min(max(v, 0.0), 1.0)


def load_config_file(config_file: str | Path) -> dict[str, Any]:
    """
    Load a JSON or YAML configuration file.

    Args:
        config_file: Path to a .json, .yaml or .yml file

    Returns:
        Dictionary with the parsed content ({} if the file does not exist)

    Raises:
        ValueError: If the file is unreadable, has the wrong extension,
            or does not contain a JSON/YAML object
    """
    path = Path(config_file).expanduser()

    if not path.exists():
        return {}

    file_ext = path.suffix.lower()
    if file_ext not in [".yaml", ".yml", ".json"]:
        raise ValueError(
            f"Config file must have .yaml, .yml, or .json extension, got: {file_ext}\n"
            f"File: {path}"
        )

    try:
        content = path.read_text(encoding="utf-8")
        if file_ext == ".json":
            data = json.loads(content) if content.strip() else {}
        else:
            data = yaml.safe_load(content)
    except OSError as e:
        raise ValueError(f"Cannot read config file: {e}") from e
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in config file: {e}") from e
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in config file: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain an object, got {type(data).__name__}")
    return data


def read_config(config_file: str | Path | None = None) -> tuple[PeonConfig, str | None]:
    """
    Load configuration and report why the defaults were used, if they were.

    Args:
        config_file: Path to the config file (default: <peon dir>/config.json)

    Returns:
        (config, problem) where problem is None when the file loaded cleanly
        or did not exist
    """
    path = Path(config_file).expanduser() if config_file else config_path()

    try:
        config_dict = load_config_file(path)
    except ValueError as e:
        return PeonConfig(), f"could not load {path}: {e}"

    try:
        return PeonConfig(**config_dict), None
    except ValidationError as e:
        return PeonConfig(), f"validation failed for {path}: {e}"


def load_config(config_file: str | Path | None = None) -> PeonConfig:
    """
    Load configuration, falling back to defaults on any problem.

    Args:
        config_file: Path to the config file (default: <peon dir>/config.json)

    Returns:
        PeonConfig instance; never raises for missing or malformed files
    """
    config, problem = read_config(config_file)
    if problem:
        logger.warning(f"Using default config, {problem}")
    return config


def load_config_map(config_file: str | Path | None = None) -> dict[str, Any]:
    """
    Load the config as a plain dict for round-trip editing.

    Unknown keys are kept as-is so save_config_map() writes them back.

    Args:
        config_file: Path to the config file (default: <peon dir>/config.json)

    Returns:
        Ordered dict of the file's top-level keys ({} on any problem)
    """
    path = Path(config_file).expanduser() if config_file else config_path()
    try:
        return load_config_file(path)
    except ValueError as e:
        logger.warning(f"Starting from an empty config map, could not load {path}: {e}")
        return {}


def save_config_map(config_map: dict[str, Any], config_file: str | Path | None = None) -> None:
    """
    Save a config map, keeping the file's format (JSON or YAML).

    Args:
        config_map: Full config document to write
        config_file: Path to the config file (default: <peon dir>/config.json)

    Raises:
        OSError: If the file cannot be written
    """
    path = Path(config_file).expanduser() if config_file else config_path()

    if path.suffix.lower() in (".yaml", ".yml"):
        content = yaml.safe_dump(config_map, default_flow_style=False, sort_keys=False)
    else:
        content = json.dumps(config_map, indent=2) + "\n"

    atomic_write_text(path, content)
