"""Report generation: one statistic per measurement field, wrapped in one markup."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Generic, TypeVar

from measurereport.common.constants import FIELD_DEFS
from measurereport.common.logging import get_logger
from measurereport.reports.measurement import Measurement
from measurereport.reports.stats import (
    MeanAndStd,
    MeanAndStdStatisticMaker,
    MedianStatisticMaker,
    StatisticMaker,
    fmt_number,
)
from measurereport.reports.templates import (
    HtmlTemplateMaker,
    MarkdownTemplateMaker,
    TemplateMaker,
)

T = TypeVar("T")


def to_text(result: object) -> str:
    """Display text for a statistic result."""
    if isinstance(result, (int, float)):
        return fmt_number(result)
    return str(result)


class ReportMaker(Generic[T]):
    """Combines one template maker with one statistic maker."""

    def __init__(
        self,
        template_maker: TemplateMaker,
        statistic_maker: StatisticMaker[T],
    ) -> None:
        self.template_maker = template_maker
        self.statistic_maker = statistic_maker
        self._log = get_logger("report")

    def make_report(self, measurements: Iterable[Measurement]) -> str:
        # Iterated once per field, so one-shot iterables are materialized here.
        data = list(measurements)
        tm, sm = self.template_maker, self.statistic_maker

        parts = [tm.make_caption(sm.caption), tm.begin_list()]
        for label, attr in FIELD_DEFS:
            result = sm.make_statistic(getattr(m, attr) for m in data)
            parts.append(tm.make_item(label, to_text(result)))
        parts.append(tm.end_list())

        self._log.debug(
            "report.built",
            caption=sm.caption,
            template=type(tm).__name__,
            measurements=len(data),
        )
        return "".join(parts)


# ═══════════════════════════════════════════════════════════════════════════════
#  Fixed compositions
# ═══════════════════════════════════════════════════════════════════════════════


def mean_and_std_html_report(measurements: Iterable[Measurement]) -> str:
    return ReportMaker[MeanAndStd](
        HtmlTemplateMaker(), MeanAndStdStatisticMaker()
    ).make_report(measurements)


def median_markdown_report(measurements: Iterable[Measurement]) -> str:
    return ReportMaker[float](
        MarkdownTemplateMaker(), MedianStatisticMaker()
    ).make_report(measurements)


def mean_and_std_markdown_report(measurements: Iterable[Measurement]) -> str:
    return ReportMaker[MeanAndStd](
        MarkdownTemplateMaker(), MeanAndStdStatisticMaker()
    ).make_report(measurements)


def median_html_report(measurements: Iterable[Measurement]) -> str:
    return ReportMaker[float](
        HtmlTemplateMaker(), MedianStatisticMaker()
    ).make_report(measurements)
