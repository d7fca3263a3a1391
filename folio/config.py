"""Configuration loading for the portfolio site generator."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


class SiteConfig(BaseModel):
    title: str = "Pragadeesh | Portfolio"
    owner: str = "Pragadeesh"
    handle: str = "pragadeesh"
    logo_letter: str = "P"
    static_dir: str = "static"
    output_dir: str = "dist"
    catalog_path: str = "catalog.yaml"


class TypewriterConfig(BaseModel):
    forward_delay_ms: int = 150
    backward_delay_ms: int = 75
    hold_ms: int = 1000  # pause at full string before deleting
    jitter_ms: int = 350
    blink_ms: int = 500


class CursorConfig(BaseModel):
    outline_duration_ms: int = 500


class ScrollConfig(BaseModel):
    stiffness: float = 100.0
    damping: float = 30.0
    mass: float = 1.0
    rest_delta: float = 0.001
    rest_speed: float = 0.01
    frame_ms: int = 16


class NavigationConfig(BaseModel):
    scroll_threshold_px: int = 50


class RevealConfig(BaseModel):
    hidden_offset_px: int = 60
    card_offset_px: int = 50
    skill_offset_px: int = 50
    section_duration_s: float = 0.6
    timeline_duration_s: float = 0.5
    skill_duration_s: float = 0.8
    skill_fill_duration_s: float = 1.5
    skill_fill_lag_s: float = 0.2
    timeline_step_s: float = 0.2
    service_step_s: float = 0.2
    portfolio_step_s: float = 0.1
    skill_step_s: float = 0.2
    portfolio_hidden_scale: float = 0.9
    hero_image_hidden_scale: float = 0.8
    hero_image_duration_s: float = 0.8


class TiltSettings(BaseModel):
    max_angle_x: float = 10.0
    max_angle_y: float = 10.0
    perspective: int = 1000
    scale: float = 1.0
    transition_speed_ms: int = 400


class TiltConfig(BaseModel):
    hero: TiltSettings = Field(default_factory=lambda: TiltSettings(transition_speed_ms=1500))
    service: TiltSettings = Field(default_factory=lambda: TiltSettings(
        max_angle_x=15.0, max_angle_y=15.0, scale=1.05,
    ))
    portfolio: TiltSettings = Field(default_factory=lambda: TiltSettings(
        max_angle_x=5.0, max_angle_y=5.0, scale=1.02,
    ))


class AssetsConfig(BaseModel):
    max_preview_width: int = 960
    preview_suffix: str = "-preview"
    strict: bool = False


class Config(BaseModel):
    site: SiteConfig = Field(default_factory=SiteConfig)
    typewriter: TypewriterConfig = Field(default_factory=TypewriterConfig)
    cursor: CursorConfig = Field(default_factory=CursorConfig)
    scroll: ScrollConfig = Field(default_factory=ScrollConfig)
    navigation: NavigationConfig = Field(default_factory=NavigationConfig)
    reveal: RevealConfig = Field(default_factory=RevealConfig)
    tilt: TiltConfig = Field(default_factory=TiltConfig)
    assets: AssetsConfig = Field(default_factory=AssetsConfig)

    @property
    def resolved_static_dir(self) -> Path:
        return _resolve(self.site.static_dir)

    @property
    def resolved_output_dir(self) -> Path:
        return _resolve(self.site.output_dir)

    @property
    def resolved_catalog_path(self) -> Path:
        return _resolve(self.site.catalog_path)


def _resolve(path: str) -> Path:
    """Resolve a path relative to the project root."""
    p = Path(path).expanduser()
    if p.is_absolute():
        return p
    return _project_root() / p


def _project_root() -> Path:
    """Return the folio project root directory."""
    return Path(__file__).parent.parent


def load_config(config_path: Path | None = None) -> Config:
    """Load config from YAML file. Falls back to defaults if file missing."""
    if config_path is None:
        config_path = _project_root() / "config.yaml"

    if config_path.exists():
        raw: dict[str, Any] = yaml.safe_load(config_path.read_text()) or {}
        return Config(**raw)

    return Config()
