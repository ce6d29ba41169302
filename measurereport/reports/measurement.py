"""Measurement data model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Measurement:
    """A single weather reading."""

    temperature: float           # degrees, unit left to the caller
    humidity: float              # relative humidity, e.g. 55.0
