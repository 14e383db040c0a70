"""Exceptions raised by price sources and the analysis core."""

from datetime import datetime


class PriceSourceError(Exception):
    """A price source could not deliver or parse prices."""
    pass


class PriceAnalysisError(Exception):
    """Base exception for analysis errors."""
    pass


class EmptySeries(PriceAnalysisError):
    """Statistics were requested for a series without entries."""

    def __init__(self, message: str = "Price series is empty"):
        super().__init__(message)


class InvalidWindowLength(PriceAnalysisError):
    """A charging window of zero or negative length was requested."""

    def __init__(self, hours: int):
        self.hours = hours
        super().__init__(f"Charging window must be at least 1 hour, got {hours}")


class InsufficientData(PriceAnalysisError):
    """The series is shorter than the requested window."""

    def __init__(self, hours: int, available: int):
        self.hours = hours
        self.available = available
        super().__init__(
            f"Not enough data for a {hours}-hour window ({available} hour(s) available)"
        )


class MalformedSeries(PriceAnalysisError):
    """Merged prices contain a duplicate hour or a gap."""

    def __init__(self, message: str, start: datetime | None = None):
        self.start = start
        super().__init__(message)
