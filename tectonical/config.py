"""Generator settings and the ``.tectonical.config`` file format."""

from __future__ import annotations

import dataclasses
import re
from dataclasses import dataclass
from pathlib import Path

__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_CONFIG_TEXT",
    "Config",
    "ConfigError",
    "ensure_config",
    "load_config",
]

CONFIG_FILENAME = ".tectonical.config"

DEFAULT_CONFIG_TEXT = (
    "seed=100\n"
    "width=256\n"
    "height=256\n"
    "land-rate=0.3\n"
    "tectonic-volatility=128\n"
    "tectonic-impact-max-range=50\n"
    "tectonic-impact-diminishing-factor=0.4\n"
    "sea-plate-height=10\n"
    "land-plate-height=20\n"
    "tectonic-impact-factor=1.5\n"
    "sea-level=20\n"
    "gaussian-range=85\n"
    "gaussian-diminishing-factor=-2\n"
    "tectonic-count=11\n"
)

_WHITESPACE = re.compile(r"\s*")
_INT = re.compile(r"\s*([+-]?\d+)")
_FLOAT = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


class ConfigError(ValueError):
    """Raised when configuration text does not match the expected layout."""


@dataclass(frozen=True)
class Config:
    """All settings that drive map generation."""

    seed: int = 100
    width: int = 256
    height: int = 256
    land_rate: float = 0.3
    tectonic_volatility: int = 128
    tectonic_impact_max_range: int = 50
    tectonic_impact_diminishing_factor: float = 0.4
    sea_plate_height: float = 10.0
    land_plate_height: float = 20.0
    tectonic_impact_factor: float = 1.5
    sea_level: int = 20
    gaussian_range: int = 85
    gaussian_diminishing_factor: float = -2.0
    tectonic_count: int = 11

    @classmethod
    def parse(cls, text: str) -> Config:
        """Parse configuration text whose ``key=value`` entries appear in order.

        Entries may be separated by any whitespace; content after the last
        entry is ignored.
        """
        values = {}
        pos = 0
        for index, field in enumerate(dataclasses.fields(cls)):
            if index:
                pos = _WHITESPACE.match(text, pos).end()
            key = field.name.replace("_", "-") + "="
            if not text.startswith(key, pos):
                raise ConfigError(f"expected '{key}' at offset {pos}")
            pos += len(key)
            is_int = field.type in (int, "int")
            match = (_INT if is_int else _FLOAT).match(text, pos)
            if match is None:
                kind = "an integer" if is_int else "a number"
                raise ConfigError(f"'{key[:-1]}' must be {kind}")
            values[field.name] = int(match.group(1)) if is_int else float(match.group(1))
            pos = match.end()
        return cls(**values)


def ensure_config(path: str | Path = CONFIG_FILENAME) -> Path:
    """Write the default configuration to ``path`` unless the file already exists."""
    path = Path(path)
    if not path.exists():
        path.write_text(DEFAULT_CONFIG_TEXT, encoding="utf-8")
    return path


def load_config(path: str | Path = CONFIG_FILENAME) -> Config:
    """Read and parse the configuration file at ``path``."""
    return Config.parse(Path(path).read_text(encoding="utf-8"))