import pytest

from tsanalyzer.core.errors import DivisionByZeroError, LengthMismatchError, OutOfRangeError
from tsanalyzer.core.series import TimeSeries


def make_series(*values):
    ts = TimeSeries()
    for v in values:
        ts.push(v)
    return ts


def test_new_series_is_empty():
    ts = TimeSeries()
    assert ts.is_empty()
    assert ts.len() == 0
    assert len(ts) == 0
    assert not ts


def test_push_then_pop_returns_value_and_restores_length():
    ts = make_series(1, 2)
    ts.push(3)
    assert ts.len() == 3
    assert ts.pop() == 3
    assert ts.len() == 2
    assert ts.to_list() == [1, 2]


def test_pop_removes_from_tail():
    ts = make_series("a", "b", "c")
    assert ts.pop() == "c"
    assert ts.pop() == "b"
    assert ts.pop() == "a"
    assert ts.is_empty()


def test_pop_empty_returns_none():
    ts = TimeSeries()
    assert ts.pop() is None
    assert ts.len() == 0


def test_slice_valid_bounds():
    ts = make_series(10, 20, 30, 40)
    part = ts.slice(1, 3)
    assert isinstance(part, TimeSeries)
    assert part.to_list() == [20, 30]
    assert len(part) == 3 - 1


@pytest.mark.parametrize("a", [0, 2, 4])
def test_slice_empty_range_is_not_an_error(a):
    ts = make_series(10, 20, 30, 40)
    assert ts.slice(a, a).is_empty()


@pytest.mark.parametrize("start,end", [(2, 1), (0, 5), (-1, 2)])
def test_slice_out_of_range(start, end):
    ts = make_series(10, 20, 30, 40)
    with pytest.raises(OutOfRangeError) as excinfo:
        ts.slice(start, end)
    assert excinfo.value.length == 4
    # still an IndexError for callers catching the builtin
    assert isinstance(excinfo.value, IndexError)


def test_slice_is_an_independent_copy():
    ts = make_series([1], [2], [3])
    part = ts.slice(0, 2)
    part[0].append(99)
    part.push([4])
    assert ts.to_list() == [[1], [2], [3]]
    assert ts.len() == 3


def test_map_preserves_length_and_order():
    ts = make_series(1, 2, 3)
    doubled = ts.map(lambda x: x * 2)
    assert len(doubled) == len(ts)
    for i in range(len(ts)):
        assert doubled[i] == ts[i] * 2


def test_map_changes_element_type():
    ts = make_series(1, 2, 3)
    labels = ts.map(lambda x: f"Value: {x}")
    assert labels.to_list() == ["Value: 1", "Value: 2", "Value: 3"]
    # source untouched
    assert ts.to_list() == [1, 2, 3]


def test_map_on_empty_series():
    assert TimeSeries().map(str).is_empty()


def test_render_end_to_end():
    ts = TimeSeries()
    ts.push(1)
    ts.push(2)
    ts.push(3)
    assert str(ts.map(lambda x: x * 2)) == "[2, 4, 6]"
    assert str(ts.map(lambda x: "Value: " + str(x))) == '["Value: 1", "Value: 2", "Value: 3"]'
    assert repr(ts) == "TimeSeries([1, 2, 3])"


def test_render_empty():
    assert str(TimeSeries()) == "[]"


def test_first_last_get():
    ts = make_series(5, 6, 7)
    assert ts.first() == 5
    assert ts.last() == 7
    assert ts.get(1) == 6
    assert ts.get(3) is None
    assert ts.get(-1) is None
    empty = TimeSeries()
    assert empty.first() is None
    assert empty.last() is None


def test_clear():
    ts = make_series(1, 2)
    ts.clear()
    assert ts.is_empty()


def test_filter_and_reverse_return_new_series():
    ts = make_series(1, 2, 3, 4)
    assert ts.filter(lambda x: x % 2 == 0).to_list() == [2, 4]
    assert ts.reverse().to_list() == [4, 3, 2, 1]
    assert ts.to_list() == [1, 2, 3, 4]


def test_append_and_extend():
    ts = make_series(1)
    ts.append(make_series(2, 3))
    ts.extend([4, 5])
    assert ts.to_list() == [1, 2, 3, 4, 5]


def test_indexing_and_iteration():
    ts = TimeSeries([1, 2, 3])
    ts[0] = 10
    assert ts[0] == 10
    assert ts[-1] == 3
    assert ts[1:] == TimeSeries([2, 3])
    assert list(ts) == [10, 2, 3]
    assert 2 in ts
    with pytest.raises(IndexError):
        ts[3]


def test_equality():
    assert TimeSeries([1, 2]) == TimeSeries([1, 2])
    assert TimeSeries([1, 2]) != TimeSeries([2, 1])
    assert TimeSeries([1, 2]) != [1, 2]


def test_arithmetic_between_series():
    a = TimeSeries([1.0, 2.0, 3.0])
    b = TimeSeries([4.0, 5.0, 6.0])
    assert (a + b).to_list() == [5.0, 7.0, 9.0]
    assert (b - a).to_list() == [3.0, 3.0, 3.0]
    assert (a * b).to_list() == [4.0, 10.0, 18.0]
    assert (b / a).to_list() == [4.0, 2.5, 2.0]


def test_arithmetic_with_scalar():
    a = TimeSeries([1, 2, 4])
    assert (a * 2).to_list() == [2, 4, 8]
    assert (2 * a).to_list() == [2, 4, 8]
    assert (10 - a).to_list() == [9, 8, 6]
    assert (8 / a).to_list() == [8.0, 4.0, 2.0]


def test_arithmetic_length_mismatch():
    with pytest.raises(LengthMismatchError):
        TimeSeries([1, 2]) + TimeSeries([1])


def test_division_by_zero_element():
    with pytest.raises(DivisionByZeroError) as excinfo:
        TimeSeries([1, 2, 3]) / TimeSeries([1, 0, 1])
    assert excinfo.value.index == 1
