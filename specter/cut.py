"""Gates that decide whether an event falls inside a region."""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from itertools import pairwise
from typing import Sequence

from .data_blob import DataBlob
from .errors import Invalid1DCutError, Invalid2DCutError, UnclosedCutError


@dataclass
class CutSpec:
    """Name and variables a cut is applied to."""

    name: str
    x_variable: str
    y_variable: str | None = None
    id: uuid.UUID = field(default_factory=uuid.uuid4)


class Cut(ABC):
    """A gate whose ``is_valid`` reflects the last evaluated event."""

    def __init__(self, spec: CutSpec) -> None:
        self.spec = spec
        self.is_valid = False

    @abstractmethod
    def evaluate(self, blob: DataBlob) -> bool:
        """Test an event, store the outcome in ``is_valid`` and return it."""

    def reset(self) -> None:
        self.is_valid = False


class Cut1D(Cut):
    """Open interval ``(low, high)`` on one variable."""

    def __init__(self, spec: CutSpec, low: float, high: float) -> None:
        if low >= high:
            raise Invalid1DCutError(low, high)
        super().__init__(spec)
        self.low = low
        self.high = high

    def evaluate(self, blob: DataBlob) -> bool:
        x = blob.find(self.spec.x_variable)
        self.is_valid = x is not None and self.low < x < self.high
        return self.is_valid


class Cut2D(Cut):
    """Closed polygon on two variables, tested with an even-odd rule."""

    def __init__(
        self, spec: CutSpec, x_values: Sequence[float], y_values: Sequence[float]
    ) -> None:
        if spec.y_variable is None or len(x_values) != len(y_values) or len(x_values) < 3:
            raise Invalid2DCutError()
        if x_values[0] != x_values[-1] or y_values[0] != y_values[-1]:
            raise UnclosedCutError()
        super().__init__(spec)
        self.x_values = tuple(x_values)
        self.y_values = tuple(y_values)

    def evaluate(self, blob: DataBlob) -> bool:
        self.is_valid = self._contains(blob)
        return self.is_valid

    def _contains(self, blob: DataBlob) -> bool:
        if self.spec.y_variable is None:
            return False
        x = blob.find(self.spec.x_variable)
        if x is None:
            return False
        y = blob.find(self.spec.y_variable)
        if y is None:
            return False

        inside = False
        for (x0, y0), (x1, y1) in pairwise(zip(self.x_values, self.y_values)):
            if x == x0 and y == y0:
                return True
            slope = (x - x0) * (y1 - y0) - (x1 - x0) * (y - y0)
            if slope == 0.0:
                return True
            if (slope < 0.0) != (y1 < y0):
                inside = not inside
        return inside