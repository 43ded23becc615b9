"""
Donut Chart Configuration
=========================

This module handles configuration loading for the ring chart engine.

Configuration Sources (in order of precedence):
    1. Environment variables (highest priority)
    2. config.yaml file
    3. Default values (lowest priority)

Environment Variable Mapping:
    DONUT_STROKE_WIDTH   -> chart.stroke_width
    DONUT_ARC_STEP       -> chart.arc_step_degrees
    DONUT_TOUCH_SLOP     -> interaction.touch_slop_px
    DONUT_TAP_TIMEOUT    -> interaction.tap_timeout_sec
    DONUT_RENDER_WIDTH   -> render.width
    DONUT_RENDER_HEIGHT  -> render.height
    DONUT_LOG_LEVEL      -> logging.level
    DONUT_LOG_FORMAT     -> logging.format

Example:
    from donut_chart.config import settings

    print(settings.chart.stroke_width)
    print(settings.interaction.touch_slop_px)
"""

import os
import logging
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field


logger = logging.getLogger(__name__)


# =============================================================================
# Configuration Models
# =============================================================================

class ChartConfig(BaseModel):
    """Ring geometry and fill configuration."""

    stroke_width: float = Field(
        default=80.0,
        gt=0,
        description="Radial thickness of the ring (outer radius - inner radius)",
    )
    arc_step_degrees: float = Field(
        default=2.0,
        gt=0,
        le=45.0,
        description="Angular sampling step used when flattening arcs to polygons",
    )
    neutral_color: List[int] = Field(
        default_factory=lambda: [136, 136, 136],
        min_length=3,
        max_length=3,
        description="RGB fill for paths without a backing category",
    )


class InteractionConfig(BaseModel):
    """Pointer gesture configuration."""

    touch_slop_px: float = Field(
        default=8.0,
        ge=0,
        description="Max pointer travel between DOWN and UP for a tap",
    )
    tap_timeout_sec: float = Field(
        default=0.5,
        gt=0,
        description="Max DOWN→UP duration for a single tap (seconds)",
    )


class RenderConfig(BaseModel):
    """Raster output configuration used by the host demo."""

    width: int = Field(default=800, ge=1, description="Surface width in pixels")
    height: int = Field(default=800, ge=1, description="Surface height in pixels")
    background: List[int] = Field(
        default_factory=lambda: [255, 255, 255],
        min_length=3,
        max_length=3,
        description="RGB background of the raster canvas",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(default="text", description="Log format: json or text")


class Settings(BaseModel):
    """
    Main settings class for the ring chart engine.

    Loads configuration from YAML file and environment variables.
    Environment variables take precedence over file values.
    """

    chart: ChartConfig = Field(default_factory=ChartConfig)
    interaction: InteractionConfig = Field(default_factory=InteractionConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# =============================================================================
# Configuration Loading
# =============================================================================

# Checked in order when no explicit path is given
CONFIG_CANDIDATES = (
    Path("config.yaml"),
    Path("config.yml"),
    Path(__file__).resolve().parents[2] / "config.yaml",
)

# env var -> (section, key, parser)
ENV_OVERRIDES = {
    "DONUT_STROKE_WIDTH": ("chart", "stroke_width", float),
    "DONUT_ARC_STEP": ("chart", "arc_step_degrees", float),
    "DONUT_TOUCH_SLOP": ("interaction", "touch_slop_px", float),
    "DONUT_TAP_TIMEOUT": ("interaction", "tap_timeout_sec", float),
    "DONUT_RENDER_WIDTH": ("render", "width", int),
    "DONUT_RENDER_HEIGHT": ("render", "height", int),
    "DONUT_LOG_LEVEL": ("logging", "level", str),
    "DONUT_LOG_FORMAT": ("logging", "format", str),
}

LOG_FORMATS = {
    "json": '{"time": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s"}',
    "text": "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
}


def load_config(config_path: Optional[str] = None) -> Settings:
    """
    Build Settings from defaults, an optional YAML file and the environment.

    Args:
        config_path: Explicit YAML path. When None, the first existing
            entry of CONFIG_CANDIDATES is used.

    Returns:
        Validated Settings
    """
    path = Path(config_path) if config_path else _find_config_file()

    raw: dict = {}
    if path is not None and path.is_file():
        logger.info(f"Reading chart config from {path}")
        raw = yaml.safe_load(path.read_text()) or {}
    else:
        logger.debug("Chart config file not found; defaults + environment only")

    _apply_env_overrides(raw)
    return Settings.model_validate(raw)


def _find_config_file() -> Optional[Path]:
    return next((p for p in CONFIG_CANDIDATES if p.is_file()), None)


def _apply_env_overrides(raw: dict) -> None:
    for env_name, (section, key, parse) in ENV_OVERRIDES.items():
        if value := os.environ.get(env_name):
            raw.setdefault(section, {})[key] = parse(value)


def setup_logging(settings: Settings) -> None:
    """Install a root handler using ``settings.logging`` (level and json/text format)."""
    logging.basicConfig(
        level=getattr(logging, settings.logging.level.upper(), logging.INFO),
        format=LOG_FORMATS.get(settings.logging.format, LOG_FORMATS["text"]),
        datefmt="%Y-%m-%dT%H:%M:%S",
    )


# =============================================================================
# Global Settings Instance
# =============================================================================

# Loaded on import; hosts call setup_logging(settings) themselves
settings = load_config()
