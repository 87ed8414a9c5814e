"""
framedump Configuration
=======================

This module handles configuration loading for framedump entry points.

Configuration Sources (in order of precedence):
    1. Environment variables (highest priority)
    2. config.yaml file
    3. Default values (lowest priority)

Environment Variable Mapping:
    FRAMEDUMP_CONFIG            -> path of the YAML file
    FRAMEDUMP_LOG_LEVEL         -> logging.level
    FRAMEDUMP_LOG_FORMAT        -> logging.format
    FRAMEDUMP_TRACE_ENABLED     -> trace.enabled
    FRAMEDUMP_TRACE_DIR         -> trace.output_dir
    FRAMEDUMP_TRACE_MAX_POINTS  -> trace.max_points
    FRAMEDUMP_TICK_DIGITS       -> ticks.significant_digits

The geometry functions never read these settings themselves; entry
points pass the relevant values in explicitly.

Example:
    from framedump.config import settings

    print(settings.layout.margins.left)
    print(settings.trace.enabled)
"""

import os
import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field

from framedump.models.geometry import ChromeOffsets, LayoutMargins
from framedump.observability.trace import JsonTraceSink


logger = logging.getLogger(__name__)


# =============================================================================
# Configuration Models
# =============================================================================

class LayoutConfig(BaseModel):
    """Frame layout constants used to estimate plot rectangles."""

    margins: LayoutMargins = Field(default_factory=LayoutMargins)
    chrome: ChromeOffsets = Field(default_factory=ChromeOffsets)


class TicksConfig(BaseModel):
    """Axis tick configuration."""

    significant_digits: int = Field(
        default=10,
        ge=1,
        le=17,
        description="Significant digits kept when rounding ticks",
    )
    default_interval_count: int = Field(
        default=5,
        ge=1,
        description="Intervals per axis when a frame does not set one",
    )


class TraceConfig(BaseModel):
    """Transform diagnostic trace configuration."""

    enabled: bool = Field(
        default=False,
        description="Write transform-debug-*.json trace files",
    )
    max_points: int = Field(
        default=5,
        ge=0,
        description="Leading points traced per transform call",
    )
    output_dir: str = Field(
        default="./logs",
        description="Directory for trace files",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(default="json", description="Log format: json or text")


class Settings(BaseModel):
    """
    Main settings class for framedump.

    Loads configuration from YAML file and environment variables.
    Environment variables take precedence over file values.
    """

    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    ticks: TicksConfig = Field(default_factory=TicksConfig)
    trace: TraceConfig = Field(default_factory=TraceConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def build_observer(self) -> Optional[JsonTraceSink]:
        """Create the configured trace sink, or None when tracing is off."""
        if not self.trace.enabled:
            return None
        return JsonTraceSink(
            output_dir=self.trace.output_dir,
            trace_limit=self.trace.max_points,
        )


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
        config_path: Path to config.yaml. If None, uses FRAMEDUMP_CONFIG
            or searches common locations.

    Returns:
        Settings: Loaded configuration
    """
    if config_path is None:
        config_path = os.environ.get("FRAMEDUMP_CONFIG")

    # Find config file
    if config_path is None:
        search_paths = [
            Path("config.yaml"),
            Path("config.yml"),
            Path(__file__).parent.parent.parent / "config.yaml",
        ]
        for path in search_paths:
            if path.exists():
                config_path = str(path)
                break

    # Load from YAML if exists
    config_data = {}
    if config_path and Path(config_path).exists():
        logger.info(f"Loading config from: {config_path}")
        with open(config_path, "r") as f:
            config_data = yaml.safe_load(f) or {}
    else:
        logger.info("No config file found, using defaults and environment variables")

    # Apply environment variable overrides
    _apply_env_overrides(config_data)

    return Settings.model_validate(config_data)


def _apply_env_overrides(config_data: dict) -> None:
    """Apply environment variable overrides to config data."""

    # Logging settings
    if env_log := os.environ.get("FRAMEDUMP_LOG_LEVEL"):
        config_data.setdefault("logging", {})["level"] = env_log
    if env_fmt := os.environ.get("FRAMEDUMP_LOG_FORMAT"):
        config_data.setdefault("logging", {})["format"] = env_fmt

    # Trace settings
    if env_trace := os.environ.get("FRAMEDUMP_TRACE_ENABLED"):
        config_data.setdefault("trace", {})["enabled"] = env_trace.lower() in ("1", "true", "yes", "on")
    if env_dir := os.environ.get("FRAMEDUMP_TRACE_DIR"):
        config_data.setdefault("trace", {})["output_dir"] = env_dir
    if env_points := os.environ.get("FRAMEDUMP_TRACE_MAX_POINTS"):
        config_data.setdefault("trace", {})["max_points"] = int(env_points)

    # Tick settings
    if env_digits := os.environ.get("FRAMEDUMP_TICK_DIGITS"):
        config_data.setdefault("ticks", {})["significant_digits"] = int(env_digits)


def setup_logging(settings: Settings) -> None:
    """Configure logging based on settings."""
    log_level = getattr(logging, settings.logging.level.upper(), logging.INFO)

    if settings.logging.format == "json":
        log_format = '{"time": "%(asctime)s", "level": "%(levelname)s", "module": "%(name)s", "message": "%(message)s"}'
    else:
        log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
    )


# =============================================================================
# Global Settings Instance
# =============================================================================

# Global settings instance - loaded on import, logging left to entry points
settings = load_config()
