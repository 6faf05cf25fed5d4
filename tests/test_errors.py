import uuid

import pytest

from specter.errors import (
    BadAxisError,
    CutError,
    CutFailedError,
    HistogramError,
    Invalid1DCutError,
    Invalid2DCutError,
    InvalidHistogramIDError,
    NoReferenceHistogramError,
    OutOfBoundsError,
    ResourceError,
    UnclosedCutError,
    WrongDimensionsError,
)


def test_wrong_dimensions_message():
    assert str(WrongDimensionsError()) == "Histogram has mismatched dimensions"


def test_out_of_bounds_keeps_values():
    err = OutOfBoundsError(0.0, 600.0, -1.0)
    assert (err.minimum, err.maximum, err.value) == (0.0, 600.0, -1.0)
    assert str(err).startswith("Histogram attempted to fill an out of bounds value")
    assert "min: 0," in str(err)


def test_bad_axis_mentions_title_and_bins():
    err = BadAxisError("energy", 600, 0.0, 3600.0)
    assert "energy" in str(err)
    assert "bins: 600" in str(err)
    assert err.maximum == 3600.0


def test_invalid_1d_message():
    err = Invalid1DCutError(0.5, 0.25)
    assert str(err) == "Invalid 1D Cut with low: 0.5 high: 0.25"


def test_fixed_cut_messages():
    assert str(Invalid2DCutError()) == "Invalid 2D Cut with mangled inputs"
    assert str(UnclosedCutError()) == "Attempted to make 2D Cut with an unclosed polygon"


def test_id_messages_contain_uuid():
    hist_id = uuid.uuid4()
    assert str(hist_id) in str(NoReferenceHistogramError(hist_id))
    assert str(hist_id) in str(InvalidHistogramIDError(hist_id))
    assert InvalidHistogramIDError(hist_id).histogram_id == hist_id


def test_cut_failed_wraps_cause():
    cause = UnclosedCutError()
    err = CutFailedError(cause)
    assert err.cause is cause
    assert str(err) == f"Failed to create cut: {cause}"


@pytest.mark.parametrize(
    "error, base",
    [
        (WrongDimensionsError(), HistogramError),
        (OutOfBoundsError(0, 1, 2), HistogramError),
        (BadAxisError("a", 0, 1, 0), HistogramError),
        (Invalid1DCutError(1, 0), CutError),
        (Invalid2DCutError(), CutError),
        (UnclosedCutError(), CutError),
        (NoReferenceHistogramError(uuid.uuid4()), CutError),
        (InvalidHistogramIDError(uuid.uuid4()), ResourceError),
        (CutFailedError(Invalid2DCutError()), ResourceError),
    ],
)
def test_hierarchy(error, base):
    with pytest.raises(base) as excinfo:
        raise error
    assert excinfo.value is error
    assert str(excinfo.value) == str(error)