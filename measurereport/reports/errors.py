"""Report-specific exceptions."""


class MeasureReportError(Exception):
    """Base class for errors raised while building a report."""


class InsufficientDataError(MeasureReportError, ValueError):
    """Raised when a statistic receives fewer values than it needs.

    The whole report is aborted; callers never get a partial report or a
    NaN/infinite value in its place.
    """

    def __init__(self, statistic: str, required: int, received: int) -> None:
        self.statistic = statistic
        self.required = required
        self.received = received
        super().__init__(
            f"{statistic} needs at least {required} value(s), got {received}"
        )
