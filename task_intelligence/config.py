"""Tunable thresholds for the task intelligence engine."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EngineSettings:
    """Thresholds used by the analyzer, suggestion engine and productivity analyzer.

    The defaults reproduce the documented behaviour; override them only for
    experiments.
    """

    # Priority falls back to medium above this many characters.
    long_text_chars: int = 50
    # Duration fallback: < short -> 15 min, < long -> 30 min, else 60 min.
    short_text_chars: int = 20
    short_text_minutes: int = 15
    default_text_minutes: int = 30
    long_text_minutes: int = 60

    # Hour buckets are half-open: [morning_start, afternoon_start) is morning,
    # [afternoon_start, evening_start) is afternoon, everything else is evening.
    morning_start_hour: int = 6
    afternoon_start_hour: int = 12
    evening_start_hour: int = 17

    excellent_score: int = 80
    good_score: int = 60
    fair_score: int = 40
    # Fraction of all completions expected on a single day for a full score.
    daily_target_ratio: float = 0.1

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "EngineSettings":
        """Build settings from a mapping, rejecting unknown keys."""

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise ValueError(f"Unknown settings {unknown}")

        defaults = asdict(cls())
        parsed: dict[str, Any] = {}
        for name, raw in values.items():
            caster = type(defaults[name])
            try:
                value = caster(raw)
            except (TypeError, ValueError) as exc:
                raise ValueError(f"Setting '{name}' must be {caster.__name__}") from exc
            if caster is int and value != float(raw):
                raise ValueError(f"Setting '{name}' must be a whole number, got {raw!r}")
            parsed[name] = value

        return cls(**parsed)

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Raise ValueError when the hour buckets are out of order."""

        hours = (self.morning_start_hour, self.afternoon_start_hour, self.evening_start_hour)
        if not 0 <= hours[0] <= hours[1] <= hours[2] <= 24:
            raise ValueError(
                "Hour boundaries must satisfy 0 <= morning_start_hour <= afternoon_start_hour"
                f" <= evening_start_hour <= 24, got {hours}"
            )

    def to_dict(self) -> dict:
        return asdict(self)


DEFAULT_SETTINGS = EngineSettings()


def load_settings(file_path: str | Path) -> EngineSettings:
    """Load engine settings from a JSON object file."""

    with open(file_path, encoding="utf-8") as handle:
        payload = json.load(handle)

    if not isinstance(payload, dict):
        raise ValueError("Settings file must contain a JSON object")

    settings = EngineSettings.from_mapping(payload)
    logger.debug("Loaded engine settings from %s: %s", file_path, settings)
    return settings
