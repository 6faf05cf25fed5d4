"""Registry of histograms and cuts, fed one event at a time."""

from __future__ import annotations

import logging
import uuid
from typing import Sequence

from .cut import Cut, Cut1D, Cut2D, CutSpec
from .data_blob import DataBlob
from .errors import (
    CutError,
    CutFailedError,
    HistogramError,
    InvalidHistogramIDError,
    NoReferenceHistogramError,
)
from .histogram import HistSpec, Histogram

logger = logging.getLogger(__name__)


class ResourceManager:
    """Owns histograms and cuts and fills histograms from events."""

    def __init__(self) -> None:
        self._histograms: dict[uuid.UUID, Histogram] = {}
        self._cuts: dict[uuid.UUID, Cut] = {}

    def __len__(self) -> int:
        return len(self._histograms)

    def __contains__(self, hist_id: object) -> bool:
        return hist_id in self._histograms

    def add_histogram(self, spec: HistSpec) -> int:
        """Register a histogram (replacing one with the same id); return its position."""
        self._histograms[spec.id] = Histogram(spec)
        return len(self._histograms) - 1

    def _histogram(self, hist_id: uuid.UUID) -> Histogram:
        try:
            return self._histograms[hist_id]
        except KeyError:
            raise InvalidHistogramIDError(hist_id) from None

    def remove_histogram(self, hist_id: uuid.UUID) -> None:
        self._histogram(hist_id)
        del self._histograms[hist_id]

    def histogram_data(self, hist_id: uuid.UUID) -> list[int]:
        return self._histogram(hist_id).data

    def histogram_spec(self, hist_id: uuid.UUID) -> HistSpec:
        return self._histogram(hist_id).spec

    def _attach(self, spec: CutSpec, histogram_id: uuid.UUID) -> None:
        gram = self._histograms.get(histogram_id)
        if gram is None:
            raise CutFailedError(NoReferenceHistogramError(histogram_id))
        gram.spec.cuts_to_draw.append(spec.id)

    def add_cut_1d(
        self, spec: CutSpec, low_value: float, high_value: float, histogram_id: uuid.UUID
    ) -> None:
        """Create a 1D cut drawn on the given histogram."""
        self._attach(spec, histogram_id)
        try:
            self._cuts[spec.id] = Cut1D(spec, low_value, high_value)
        except CutError as err:
            raise CutFailedError(err) from err

    def add_cut_2d(
        self,
        spec: CutSpec,
        x_values: Sequence[float],
        y_values: Sequence[float],
        histogram_id: uuid.UUID,
    ) -> None:
        """Create a 2D polygon cut drawn on the given histogram."""
        self._attach(spec, histogram_id)
        try:
            self._cuts[spec.id] = Cut2D(spec, x_values, y_values)
        except CutError as err:
            raise CutFailedError(err) from err

    def update(self, data: DataBlob) -> None:
        """Evaluate every cut against ``data`` and fill the histograms that pass."""
        for cut in self._cuts.values():
            cut.evaluate(data)

        for gram in self._histograms.values():
            spec = gram.spec
            if any(
                not self._cuts[cut_id].is_valid
                for cut_id in spec.cuts_to_check
                if cut_id in self._cuts
            ):
                continue

            x_val = data.find(spec.x_axis.variable)
            if x_val is None:
                continue
            y_val = None
            if spec.y_axis is not None:
                y_val = data.find(spec.y_axis.variable)
                if y_val is None:
                    continue
            try:
                bin_index = gram.fill(x_val, y_val)
            except HistogramError as err:
                logger.debug("Out of bounds: %s", err)
            else:
                logger.debug("Filled bin: %d", bin_index)