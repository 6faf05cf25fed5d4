"""Axes and one- or two-dimensional counting histograms."""

from __future__ import annotations

import math
import uuid
from dataclasses import dataclass, field

from .errors import BadAxisError, OutOfBoundsError, WrongDimensionsError


@dataclass
class AxisSpec:
    """A binned axis over ``[minimum, maximum)`` tied to a data variable."""

    variable: str
    title: str
    bins: int
    minimum: float
    maximum: float

    def __post_init__(self) -> None:
        if self.minimum >= self.maximum or self.bins < 1:
            raise BadAxisError(self.title, self.bins, self.minimum, self.maximum)

    def bin_width(self) -> float:
        return (self.maximum - self.minimum) / self.bins

    def bin_of(self, value: float) -> int:
        """Return the bin index holding ``value``; raise if it is out of range."""
        if value < self.minimum or value >= self.maximum:
            raise OutOfBoundsError(self.minimum, self.maximum, value)
        return math.floor((value - self.minimum) / self.bin_width())


@dataclass
class HistSpec:
    """Description of a histogram: its axes and the cuts tied to it."""

    name: str
    title: str
    x_axis: AxisSpec
    y_axis: AxisSpec | None = None
    cuts_to_draw: list[uuid.UUID] = field(default_factory=list)
    cuts_to_check: list[uuid.UUID] = field(default_factory=list)
    id: uuid.UUID = field(default_factory=uuid.uuid4)


@dataclass
class Histogram:
    """Bin counts for a :class:`HistSpec`."""

    spec: HistSpec
    data: list[int] = field(init=False)

    def __post_init__(self) -> None:
        size = self.spec.x_axis.bins
        if self.spec.y_axis is not None:
            size *= self.spec.y_axis.bins
        self.data = [0] * size

    def fill(self, x_value: float, y_value: float | None = None) -> int:
        """Count one entry and return the bin it went to."""
        bin_index = self.spec.x_axis.bin_of(x_value)
        y_axis = self.spec.y_axis
        if y_value is not None:
            if y_axis is None:
                raise WrongDimensionsError()
            bin_index *= y_axis.bin_of(y_value)
        elif y_axis is not None:
            raise WrongDimensionsError()
        self.data[bin_index] += 1
        return bin_index