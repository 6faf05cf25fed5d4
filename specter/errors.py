"""Exception hierarchy for histograms, cuts and the resource manager."""

from __future__ import annotations

import uuid


def _fmt(value: float) -> str:
    """Render a float the way the error messages expect (``3600`` rather than ``3600.0``)."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


class HistogramError(Exception):
    """Base class for histogram failures."""


class WrongDimensionsError(HistogramError):
    """A fill did not match the dimensionality of the histogram."""

    def __init__(self) -> None:
        super().__init__("Histogram has mismatched dimensions")


class OutOfBoundsError(HistogramError):
    """A value fell outside the range of an axis."""

    def __init__(self, minimum: float, maximum: float, value: float) -> None:
        self.minimum = minimum
        self.maximum = maximum
        self.value = value
        super().__init__(
            "Histogram attempted to fill an out of bounds value - "
            f"min: {_fmt(minimum)}, max: {_fmt(maximum)}, val: {_fmt(value)}"
        )


class BadAxisError(HistogramError):
    """An axis was given an empty range or no bins."""

    def __init__(self, title: str, bins: int, minimum: float, maximum: float) -> None:
        self.title = title
        self.bins = bins
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"Invalid axis created: {title}, bins: {bins}, "
            f"min: {_fmt(minimum)}, max: {_fmt(minimum)}"
        )


class CutError(Exception):
    """Base class for cut failures."""


class Invalid1DCutError(CutError):
    """A 1D cut whose low bound is not below its high bound."""

    def __init__(self, low: float, high: float) -> None:
        self.low = low
        self.high = high
        super().__init__(f"Invalid 1D Cut with low: {_fmt(low)} high: {_fmt(high)}")


class Invalid2DCutError(CutError):
    """A 2D cut with missing y variable or malformed point lists."""

    def __init__(self) -> None:
        super().__init__("Invalid 2D Cut with mangled inputs")


class UnclosedCutError(CutError):
    """A 2D cut whose polygon does not end where it starts."""

    def __init__(self) -> None:
        super().__init__("Attempted to make 2D Cut with an unclosed polygon")


class NoReferenceHistogramError(CutError):
    """A cut referred to a histogram that does not exist."""

    def __init__(self, histogram_id: uuid.UUID) -> None:
        self.histogram_id = histogram_id
        super().__init__(f"Could not find reference histogram {histogram_id}")


class ResourceError(Exception):
    """Base class for resource manager failures."""


class InvalidHistogramIDError(ResourceError):
    """No histogram is registered under the given id."""

    def __init__(self, histogram_id: uuid.UUID) -> None:
        self.histogram_id = histogram_id
        super().__init__(f"Specter failed to get histogram with ID {histogram_id}")


class CutFailedError(ResourceError):
    """Creating a cut failed; ``cause`` holds the underlying cut error."""

    def __init__(self, cause: CutError) -> None:
        self.cause = cause
        super().__init__(f"Failed to create cut: {cause}")