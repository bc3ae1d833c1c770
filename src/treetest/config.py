from __future__ import annotations

from pathlib import Path

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, Field, field_validator

from treetest.style import GlyphSet, Style


def _expand(value: str | None) -> str | None:
    """Expand ${VAR} and ${VAR:-default} references in a path value.

    Raises ValueError when a variable without a default is unset, so pydantic
    reports it as a validation error.
    """
    if value is None:
        return None
    try:
        return expandvars(value, nounset=True)
    except Exception:
        raise ValueError(f"Unset environment variable in path: {value}")


class ReportConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    color: bool = True
    glyphs: GlyphSet = GlyphSet.EMOJI
    summary: bool = False
    success_message: str = "TESTS SUCCEEDED"
    failure_message: str = "TESTS FAILED"
    junit: str | None = None
    html: str | None = None

    @field_validator("junit", "html", mode="before")
    @classmethod
    def expand_paths(cls, v: str | None) -> str | None:
        return _expand(v)

    def style(self) -> Style:
        return Style(color=self.color, glyphs=self.glyphs)


class RunConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    max_concurrency: int | None = Field(default=None, ge=1)
    verbose: bool = False
    debug_log: str | None = None
    report: ReportConfig = Field(default_factory=ReportConfig)

    @field_validator("debug_log", mode="before")
    @classmethod
    def expand_debug_log(cls, v: str | None) -> str | None:
        return _expand(v)


def load_config(path: Path) -> RunConfig:
    """Load and validate a run config from a YAML file."""
    config_dir = path.parent.resolve()

    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"Config file {path} must contain a mapping")

    config = RunConfig(**raw)

    # Resolve relative output paths relative to config file location
    if config.debug_log and not Path(config.debug_log).is_absolute():
        config.debug_log = str((config_dir / config.debug_log).resolve())
    for field_name in ("junit", "html"):
        value = getattr(config.report, field_name)
        if value and not Path(value).is_absolute():
            setattr(config.report, field_name, str((config_dir / value).resolve()))

    return config
