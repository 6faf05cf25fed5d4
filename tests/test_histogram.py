import pytest

from specter.errors import BadAxisError, OutOfBoundsError, WrongDimensionsError
from specter.histogram import AxisSpec, HistSpec, Histogram


def make_1d():
    return HistSpec(
        name="test",
        title="test",
        x_axis=AxisSpec("var", "var", 600, 0.0, 600.0),
    )


def make_2d():
    return HistSpec(
        name="test",
        title="test",
        x_axis=AxisSpec("var", "var", 600, 0.0, 600.0),
        y_axis=AxisSpec("var2", "var2", 600, 0.0, 600.0),
    )


def test_axis():
    assert AxisSpec("var", "var", 600, 0.0, 3600.0).bins == 600
    with pytest.raises(BadAxisError):
        AxisSpec("var", "var", 0, 0.0, 3600.0)
    with pytest.raises(BadAxisError):
        AxisSpec("var", "var", 600, 36000.0, 3600.0)
    axis = AxisSpec("var", "var", 600, 0.0, 600.0)
    assert axis.bin_of(0.5) == 0
    assert axis.bin_width() == 1.0
    with pytest.raises(OutOfBoundsError):
        axis.bin_of(-1.0)
    assert axis.variable == "var"
    assert axis.title == "var"


def test_axis_upper_edge_is_exclusive():
    axis = AxisSpec("var", "var", 600, 0.0, 600.0)
    with pytest.raises(OutOfBoundsError):
        axis.bin_of(600.0)
    assert axis.bin_of(599.5) == axis.bins - 1


def test_axis_equal_bounds_rejected():
    with pytest.raises(BadAxisError):
        AxisSpec("var", "var", 10, 5.0, 5.0)


def test_hist1d():
    gram = Histogram(make_1d())
    assert len(gram.data) == 600
    assert gram.fill(0.5, None) == 0
    with pytest.raises(OutOfBoundsError):
        gram.fill(-1.0, None)
    assert gram.spec.name == "test"
    assert gram.spec.title == "test"
    assert gram.spec.cuts_to_draw == []
    assert gram.spec.cuts_to_check == []


def test_hist1d_counts_accumulate():
    gram = Histogram(make_1d())
    first = gram.fill(10.5)
    second = gram.fill(10.5)
    assert first == second
    assert gram.data[first] == 2
    assert sum(gram.data) == 2


def test_hist1d_rejects_y_value():
    gram = Histogram(make_1d())
    with pytest.raises(WrongDimensionsError):
        gram.fill(0.5, 0.5)
    assert sum(gram.data) == 0


def test_hist2d():
    gram = Histogram(make_2d())
    assert len(gram.data) == 360_000
    assert gram.fill(0.5, 0.5) == 0
    with pytest.raises(WrongDimensionsError):
        gram.fill(0.5, None)
    with pytest.raises(OutOfBoundsError):
        gram.fill(-1.0, 0.5)
    with pytest.raises(OutOfBoundsError):
        gram.fill(0.5, -1.0)
    with pytest.raises(OutOfBoundsError):
        gram.fill(-1.0, -1.0)
    assert gram.spec.name == "test"
    assert gram.spec.cuts_to_draw == []
    assert gram.spec.cuts_to_check == []


def test_spec_ids_are_unique():
    assert make_1d().id != make_1d().id or make_1d() == make_1d()
    a, b = make_1d(), make_1d()
    assert a.id != b.id