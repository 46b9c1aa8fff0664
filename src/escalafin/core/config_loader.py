"""Utilities for loading tariff configurations from YAML/JSON sources."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from copy import deepcopy
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigError
from .tariffs import DEFAULT_TARIFFS, TariffConfig

__all__ = [
    "TariffConfigError",
    "load_tariffs",
    "dump_tariffs",
]

logger = logging.getLogger(__name__)


class TariffConfigError(ConfigError, ValueError):
    """Raised when a tariff configuration source cannot be parsed or validated."""


def load_tariffs(
    source: str | Path | Mapping[str, Any] | None, *, format: str | None = None
) -> TariffConfig:
    """
    Parse a tariff configuration from a YAML/JSON file or a mapping.

    ``None`` returns ``DEFAULT_TARIFFS``. A mapping is accepted as-is so that
    the JSON blob read from the per-tenant store can be passed straight in.
    """
    if source is None:
        logger.debug("No tariff source given; using default tariffs")
        return DEFAULT_TARIFFS

    mapping, label = _read_source(source, format=format)
    try:
        config = TariffConfig.from_dict(mapping)
    except ConfigError as exc:
        raise TariffConfigError(f"{label}: {exc}") from exc
    logger.debug(
        "Loaded tariffs from %s (%d tiers, %d weekly rates)",
        label,
        len(config.fixed_fee.tiers),
        len(config.weekly_interest.rates),
    )
    return config


def dump_tariffs(config: TariffConfig, path: str | Path, *, format: str | None = None) -> None:
    """Write a configuration to a YAML or JSON file (format from suffix by default)."""
    path = Path(path)
    fmt = (format or path.suffix.lstrip(".")).lower()
    data = config.to_dict()
    if fmt in {"yaml", "yml"}:
        text = yaml.safe_dump(data, sort_keys=False)
    elif fmt in {"json", ""}:
        text = json.dumps(data, indent=2) + "\n"
    else:
        raise TariffConfigError(f"Unsupported tariff format '{fmt}' for {path}")
    path.write_text(text, encoding="utf-8")


def _read_source(
    source: str | Path | Mapping[str, Any], *, format: str | None
) -> tuple[dict[str, Any], str]:
    if isinstance(source, Mapping):
        return deepcopy(dict(source)), "<mapping>"

    path = Path(source)
    if not path.exists():
        raise FileNotFoundError(path)

    fmt = (format or path.suffix.lstrip(".")).lower()
    text = path.read_text(encoding="utf-8")
    try:
        if fmt in {"yaml", "yml"}:
            data = yaml.safe_load(text)
        elif fmt in {"json", ""}:
            data = json.loads(text)
        else:
            raise TariffConfigError(f"Unsupported tariff format '{fmt}' for {path}")
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise TariffConfigError(f"{path}: could not parse {fmt or 'json'}: {exc}") from exc

    if not isinstance(data, dict):
        raise TariffConfigError(f"Tariff root must be a mapping (source={path})")
    return data, str(path)
