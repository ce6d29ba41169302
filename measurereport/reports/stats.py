"""Statistic strategies and the basic helpers behind them (stdlib only)."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol, TypeVar

from measurereport.common.constants import MEAN_AND_STD_CAPTION, MEDIAN_CAPTION
from measurereport.reports.errors import InsufficientDataError

T_co = TypeVar("T_co", covariant=True)


def _require(statistic: str, v: list[float], required: int) -> None:
    if len(v) < required:
        raise InsufficientDataError(statistic, required, len(v))


def mean(v: list[float]) -> float:
    _require("mean", v, 1)
    return sum(v) / len(v)


def stdev(v: list[float], m: float | None = None) -> float:
    """Sample standard deviation (Bessel's correction, divisor n - 1).

    Pass *m* when the mean of *v* is already known.
    """
    _require("stdev", v, 2)
    if m is None:
        m = mean(v)
    return math.sqrt(sum((x - m) ** 2 for x in v) / (len(v) - 1))


def median(v: list[float]) -> float:
    _require("median", v, 1)
    s = sorted(v)
    n = len(s)
    return float(s[n // 2]) if n % 2 == 1 else (s[n // 2 - 1] + s[n // 2]) / 2.0


def fmt_number(value: float) -> str:
    """Shortest decimal form: ``20.0`` -> ``"20"``, ``0.5`` -> ``"0.5"``."""
    if math.isfinite(value) and float(value).is_integer():
        return str(int(value))
    return repr(float(value))


@dataclass(frozen=True)
class MeanAndStd:
    mean: float
    std: float

    def __str__(self) -> str:
        return f"MeanAndStd(mean={fmt_number(self.mean)}, std={fmt_number(self.std)})"


class StatisticMaker(Protocol[T_co]):
    """Computes one named statistic over a sequence of numbers."""

    @property
    def caption(self) -> str: ...

    def make_statistic(self, data: Iterable[float]) -> T_co: ...


class MeanAndStdStatisticMaker:
    caption = MEAN_AND_STD_CAPTION

    def make_statistic(self, data: Iterable[float]) -> MeanAndStd:
        values = list(data)
        _require(self.caption, values, 2)
        m = mean(values)
        return MeanAndStd(mean=m, std=stdev(values, m))


class MedianStatisticMaker:
    caption = MEDIAN_CAPTION

    def make_statistic(self, data: Iterable[float]) -> float:
        return median(list(data))
