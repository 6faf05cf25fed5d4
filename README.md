# specter

Histograms and gates (cuts) for event-by-event data analysis.

Each event is a `DataBlob`, which maps variable names to values. A
`ResourceManager` holds histograms and cuts. Each call to `update` evaluates
every cut against the event. It then fills each histogram whose checked cuts
all passed.

## Installation

```
pip install .
```

To run the tests, install the `test` extra and run `pytest`:

```
pip install .[test]
pytest
```

## Modules

- `specter.data_blob`: `DataBlob`
- `specter.histogram`: `AxisSpec`, `HistSpec`, `Histogram`
- `specter.cut`: `CutSpec`, `Cut`, `Cut1D`, `Cut2D`
- `specter.manager`: `ResourceManager`
- `specter.errors`: the exception classes

## Concepts

### Events

`DataBlob(values)` wraps a `dict[str, float]`.

- `find(variable)` returns the value, or `None` when the event does not have
  that variable.
- `variable in blob` and `len(blob)` also work.

### Histograms

`AxisSpec(variable, title, bins, minimum, maximum)` describes one binned axis
over the range `[minimum, maximum)`.

- An axis with no bins raises `BadAxisError`.
- An axis with `minimum >= maximum` also raises `BadAxisError`.
- `bin_width()` returns the width of one bin.
- `bin_of(value)` returns the index of the bin that holds `value`.
- A value outside the range raises `OutOfBoundsError`.

`HistSpec` describes a histogram. It has these fields:

- `name`
- `title`
- `x_axis`
- `y_axis`, which is optional
- `cuts_to_draw` and `cuts_to_check`, which are lists of cut ids
- `id`, which defaults to a fresh `uuid.uuid4()`

`Histogram(spec)` holds its counts in `data`, a list of ints.

- For a 1D histogram, `data` has `x_axis.bins` entries.
- For a 2D histogram, `data` has `x_axis.bins * y_axis.bins` entries.

`fill(x_value, y_value=None)` adds one count and returns the index it used.

- For a 2D histogram, that index is the x bin index multiplied by the y bin
  index.
- A `y_value` given to a 1D histogram raises `WrongDimensionsError`.
- A missing `y_value` for a 2D histogram also raises `WrongDimensionsError`.

### Cuts

`CutSpec` has these fields:

- `name`
- `x_variable`
- `y_variable`, which is optional
- `id`, which defaults to a fresh `uuid.uuid4()`

Every `Cut` has an `is_valid` flag. The flag holds the outcome of the last
`evaluate(blob)`, and `reset()` clears it.

- `Cut1D(spec, low, high)` passes when the x variable lies strictly between
  `low` and `high`. It raises `Invalid1DCutError` unless `low < high`.
- `Cut2D(spec, x_values, y_values)` passes when `(x, y)` lies inside the
  polygon, by an even-odd rule. It also passes when the point lies on a vertex
  or on an edge line.
  - It raises `Invalid2DCutError` when `spec.y_variable` is `None`.
  - It also raises `Invalid2DCutError` when the two lists differ in length or
    have fewer than 3 points.
  - It raises `UnclosedCutError` when the last point differs from the first.
- An event that lacks a variable a cut needs fails that cut.

### The manager

`ResourceManager` has these methods:

- `add_histogram(spec)` registers a histogram and returns its position.
  Registering the same `id` again replaces the histogram.
- `remove_histogram(hist_id)` removes the histogram.
- `histogram_data(hist_id)` returns the histogram's counts.
- `histogram_spec(hist_id)` returns the histogram's spec.
- `add_cut_1d(spec, low_value, high_value, histogram_id)` creates a 1D cut.
- `add_cut_2d(spec, x_values, y_values, histogram_id)` creates a 2D cut.
- `update(data)` evaluates every cut and fills the histograms.

An unknown histogram id raises `InvalidHistogramIDError` in `remove_histogram`,
`histogram_data` and `histogram_spec`.

Adding a cut appends its id to the histogram's `cuts_to_draw`.

- An unknown `histogram_id` raises `CutFailedError` wrapping
  `NoReferenceHistogramError`.
- An invalid cut raises `CutFailedError` wrapping the cut's error.
- The id is appended before the cut is built. A cut that fails to build
  therefore still leaves its id in `cuts_to_draw`.

For each histogram, `update` does the following:

1. It skips the histogram if any cut in `cuts_to_check` failed. Ids of cuts
   that are not registered are ignored.
2. It skips the histogram if the event lacks one of the axis variables.
3. Otherwise it fills the histogram.

Out-of-range values are not raised. They are logged at debug level on the
`specter.manager` logger, as are successful fills.

## Example

```python
import uuid

from specter.cut import CutSpec
from specter.data_blob import DataBlob
from specter.histogram import AxisSpec, HistSpec
from specter.manager import ResourceManager

manager = ResourceManager()

spec = HistSpec(
    id=uuid.uuid4(),
    name="energy",
    title="Energy",
    x_axis=AxisSpec("energy", "Energy", 600, 0.0, 600.0),
)
manager.add_histogram(spec)

gate = CutSpec(id=uuid.uuid4(), name="peak", x_variable="energy")
manager.add_cut_1d(gate, 100.0, 200.0, spec.id)
spec.cuts_to_check.append(gate.id)

manager.update(DataBlob({"energy": 150.5}))
counts = manager.histogram_data(spec.id)
assert counts[150] == 1
```

## Errors

All errors are exceptions from `specter.errors`:

- `HistogramError`, with subclasses `WrongDimensionsError`, `OutOfBoundsError`
  and `BadAxisError`.
- `CutError`, with subclasses `Invalid1DCutError`, `Invalid2DCutError`,
  `UnclosedCutError` and `NoReferenceHistogramError`.
- `ResourceError`, with subclasses `InvalidHistogramIDError` and
  `CutFailedError`. A `CutFailedError` keeps the underlying `CutError` in
  `cause`.

## What it does not do

This is a library only. It has:

- no command-line program
- no reader for event files
- no plotting or drawing of histograms or cuts
- no saving or loading of histograms

Events must be built as `DataBlob` objects and passed to `update` by your own
code.