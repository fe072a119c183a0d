from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml

from .models import ScaleLaw, SizeConfig

LOGGER = logging.getLogger(__name__)

DEFAULT_SCALE = 5.0
DEFAULT_SPACING = 1.0


@dataclass(slots=True)
class BubbleConfig:
    """Configuration options for the bubble pipeline."""

    scale: float = DEFAULT_SCALE
    spacing: float = DEFAULT_SPACING
    law: str = ScaleLaw.LINEAR.value
    show_breaks: bool = True
    show_stats: bool = True

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))

    def to_size_config(self) -> SizeConfig:
        """Build a validated SizeConfig; raises InvalidConfig on bad values."""
        return SizeConfig(
            law=ScaleLaw.parse(self.law),
            scale=self.scale,
            spacing=self.spacing,
        ).validate()


def config_from_dict(data: Mapping[str, Any] | None) -> BubbleConfig:
    """Build a BubbleConfig from a dictionary-like input, ignoring unknown keys."""
    if data is None:
        return BubbleConfig()
    allowed = {field.name for field in fields(BubbleConfig)}
    kwargs = {key: data[key] for key in data if key in allowed}
    if isinstance(kwargs.get("law"), ScaleLaw):
        kwargs["law"] = kwargs["law"].value
    return BubbleConfig(**kwargs)


def config_from_yaml(path: str | Path) -> BubbleConfig:
    """Load configuration from a YAML file."""
    LOGGER.debug("Loading bubble configuration from %s", path)
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> BubbleConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return BubbleConfig()
    return config_from_yaml(path)
