"""
play-qqpr Configuration
=======================

This module handles configuration loading for the animation player.

Configuration Sources (in order of precedence):
    1. Environment variables (highest priority)
    2. qqpr.yaml / config.yaml file
    3. Default values (lowest priority)

Environment Variable Mapping:
    QQPR_FPS          -> player.fps
    QQPR_LOOP         -> player.loop
    QQPR_CACHE_DIR    -> cache.directory
    QQPR_SOURCE_URL   -> source.url_template
    QQPR_TIMEOUT      -> source.timeout_seconds
    QQPR_LOG_LEVEL    -> logging.level

Example:
    from qqpr_player.config import load_config

    settings = load_config()
    print(settings.player.fps)
    print(settings.source.url_template)
"""

import os
import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field


logger = logging.getLogger(__name__)


APP_NAME = "play-qqpr"


# =============================================================================
# Configuration Models
# =============================================================================

class PlayerConfig(BaseModel):
    """Playback defaults."""

    fps: float = Field(default=10.0, gt=0, description="Frames per second")
    loop: int = Field(
        default=0,
        ge=0,
        description="Loops to play before exiting (0 = unlimited)",
    )


class CacheConfig(BaseModel):
    """Local animation cache configuration."""

    directory: Optional[str] = Field(
        default=None,
        description="Cache root. None resolves to $XDG_CACHE_HOME/play-qqpr",
    )


class SourceConfig(BaseModel):
    """Remote animation source configuration."""

    url_template: str = Field(
        default="https://www.qqpr.com/ascii/js/{id}.js",
        description="URL of an animation script, formatted with its id",
    )
    timeout_seconds: float = Field(
        default=15.0,
        gt=0,
        description="HTTP timeout per request",
    )
    max_redirects: int = Field(
        default=5,
        ge=0,
        description="Maximum redirects followed per download",
    )
    user_agent: str = Field(default=APP_NAME, description="User-Agent header")


class ExtractionConfig(BaseModel):
    """Tuning for the frame-worthiness heuristic."""

    min_length: int = Field(
        default=50,
        ge=0,
        description="Minimum decoded payload length for a frame",
    )
    require_line_break: bool = Field(
        default=True,
        description="Require a \\n escape or <br> tag in a frame payload",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="WARNING", description="Log level")
    format: str = Field(default="text", description="Log format: json or text")


class Settings(BaseModel):
    """
    Main settings class for play-qqpr.

    Loads configuration from YAML file and environment variables.
    Environment variables take precedence over file values.
    """

    player: PlayerConfig = Field(default_factory=PlayerConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    source: SourceConfig = Field(default_factory=SourceConfig)
    extraction: ExtractionConfig = Field(default_factory=ExtractionConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# =============================================================================
# Configuration Loading
# =============================================================================

def load_config(config_path: Optional[str] = None) -> Settings:
    """
    Load configuration from YAML file and environment variables.

    Priority (highest to lowest):
        1. Environment variables
        2. YAML config file
        3. Default values

    Args:
        config_path: Path to a YAML file. If None, searches the working directory.

    Returns:
        Settings: Loaded configuration

    Raises:
        FileNotFoundError: If config_path is given but does not exist
    """
    if config_path is not None and not Path(config_path).exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    if config_path is None:
        for path in (Path("qqpr.yaml"), Path("config.yaml"), Path("config.yml")):
            if path.exists():
                config_path = str(path)
                break

    config_data = {}
    if config_path:
        logger.info(f"Loading config from: {config_path}")
        with open(config_path, "r", encoding="utf-8") as f:
            config_data = yaml.safe_load(f) or {}
    else:
        logger.debug("No config file found, using defaults and environment variables")

    _apply_env_overrides(config_data)

    return Settings.model_validate(config_data)


def _apply_env_overrides(config_data: dict) -> None:
    """Apply environment variable overrides to config data."""

    # Player settings
    if env_fps := os.environ.get("QQPR_FPS"):
        config_data.setdefault("player", {})["fps"] = float(env_fps)
    if env_loop := os.environ.get("QQPR_LOOP"):
        config_data.setdefault("player", {})["loop"] = int(env_loop)

    # Cache settings
    if env_cache := os.environ.get("QQPR_CACHE_DIR"):
        config_data.setdefault("cache", {})["directory"] = env_cache

    # Source settings
    if env_url := os.environ.get("QQPR_SOURCE_URL"):
        config_data.setdefault("source", {})["url_template"] = env_url
    if env_timeout := os.environ.get("QQPR_TIMEOUT"):
        config_data.setdefault("source", {})["timeout_seconds"] = float(env_timeout)

    # Logging settings
    if env_log := os.environ.get("QQPR_LOG_LEVEL"):
        config_data.setdefault("logging", {})["level"] = env_log


def default_cache_dir() -> Path:
    """Resolve the cache root from XDG_CACHE_HOME, falling back to ~/.cache."""
    base = os.environ.get("XDG_CACHE_HOME") or os.path.join(Path.home(), ".cache")
    return Path(base) / APP_NAME


def resolve_cache_dir(settings: Settings, override: Optional[str] = None) -> Path:
    """Pick the cache root: explicit override, then config, then XDG default."""
    if override:
        return Path(override).expanduser()
    if settings.cache.directory:
        return Path(settings.cache.directory).expanduser()
    return default_cache_dir()


def setup_logging(settings: Settings) -> None:
    """Configure logging based on settings."""
    log_level = getattr(logging, settings.logging.level.upper(), logging.WARNING)

    if settings.logging.format == "json":
        log_format = '{"time": "%(asctime)s", "level": "%(levelname)s", "module": "%(name)s", "message": "%(message)s"}'
    else:
        log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
    )
