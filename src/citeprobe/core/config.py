"""Config file loading for brand profiles and detector settings.

Looks for ``.citeprobe.yml`` in the working directory, then the home
directory. A missing file yields defaults; CLI flags override file values.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from citeprobe.core.citation.config import DetectorConfig
from citeprobe.core.errors import ConfigError
from citeprobe.core.models import Competitor

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".citeprobe.yml"


class CiteprobeConfig(BaseModel):
    """Brand profile plus CLI and detector defaults."""

    brand: str | None = None
    domain: str | None = None
    competitors: list[Competitor] = Field(default_factory=list)
    category: str | None = None
    format: str | None = None
    verbose: bool = False
    detector: DetectorConfig = Field(default_factory=DetectorConfig)

    @field_validator("competitors", mode="before")
    @classmethod
    def _coerce_competitors(cls, value: Any) -> Any:
        """Accept bare competitor names alongside ``{name, domain}`` mappings."""
        if value is None:
            return []
        if isinstance(value, list):
            return [{"name": v} if isinstance(v, str) else v for v in value]
        return value


def find_config(search_dirs: list[Path] | None = None) -> Path | None:
    """Return the first existing config file in ``search_dirs``."""
    dirs = search_dirs if search_dirs is not None else [Path.cwd(), Path.home()]
    for directory in dirs:
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_config(
    path: str | Path | None = None,
    *,
    search_dirs: list[Path] | None = None,
) -> CiteprobeConfig:
    """Load the config file, or return defaults when none exists.

    An explicit ``path`` must exist. Raises ConfigError for unreadable YAML
    or values that fail validation.
    """
    if path is not None:
        config_path = Path(path)
        if not config_path.is_file():
            raise ConfigError(f"Config file not found: {config_path}")
    else:
        found = find_config(search_dirs)
        if found is None:
            return CiteprobeConfig()
        config_path = found

    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Cannot read {config_path}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{config_path} must contain a mapping at the top level")

    try:
        config = CiteprobeConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config in {config_path}: {exc}") from exc

    logger.debug("Loaded config from %s", config_path)
    return config
