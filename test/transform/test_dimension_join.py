import pytest

from framejoin.frame import Field, Frame
from framejoin.transform import (
    FullJoinTransformer,
    JoinOptions,
    RowLimitExceededError,
)
from framejoin.transform.join import DimensionJoinStrategy, find_key_fields


@pytest.fixture
def join():
    return FullJoinTransformer(JoinOptions(["Time"]))


def test_default_key_field():
    transformer = FullJoinTransformer()
    assert transformer.options.by_fields == ("Time",)
    assert isinstance(transformer.strategy, DimensionJoinStrategy)


def test_str(join):
    assert str(join) == "FullJoinTransformer(by_fields=['Time'], strategy='dimensions')"


def test_find_key_fields():
    frame = Frame.from_pydict({"Time": [1], "host": ["a"]})
    assert [f.name for f in find_key_fields(frame, ("host", "Time"))] == ["host", "Time"]
    assert find_key_fields(frame, ("Time", "missing")) is None


def test_only_dimensions_in_all_frames_survive(join):
    a = Frame.from_pydict({"Time": [1, 2, 3], "a": [10, 20, 30]})
    b = Frame.from_pydict({"Time": [2, 3, 4], "b": [100, 200, 300]})

    result = join.transform([a, b])

    assert len(result) == 1
    assert result[0].to_pydict() == {"Time": [2, 3], "a": [20, 30], "b": [100, 200]}


def test_missing_key_returns_input_unchanged(join):
    a = Frame.from_pydict({"Time": [1, 2], "a": [1, 2]})
    b = Frame.from_pydict({"Timestamp": [1, 2], "b": [3, 4]})
    frames = [a, b]

    result = join.transform(frames)

    assert result is frames
    assert result[0] is a
    assert a.to_pydict() == {"Time": [1, 2], "a": [1, 2]}


def test_unknown_key_field_is_inert():
    frames = [Frame.from_pydict({"Time": [1], "a": [1]})]
    assert FullJoinTransformer(JoinOptions(["nope"])).transform(frames) is frames


def test_no_frames(join):
    assert join.transform([]) == [Frame()]


def test_single_frame_is_cloned(join):
    a = Frame.from_pydict({"Time": [1, 1, 2], "a": [1, 2, 3]}, name="a")
    [result] = join.transform([a])
    assert result == a
    assert result is not a
    assert result["a"] is not a["a"]


def test_input_frames_are_not_modified(join):
    a = Frame.from_pydict({"Time": [1, 2], "a": [1, 2]})
    b = Frame.from_pydict({"Time": [2, 3], "b": [3, 4]})
    join.transform([a, b])
    assert a.to_pydict() == {"Time": [1, 2], "a": [1, 2]}
    assert b.to_pydict() == {"Time": [2, 3], "b": [3, 4]}


def test_three_frames(join):
    a = Frame.from_pydict({"Time": [1, 2, 3], "a": [1, 2, 3]})
    b = Frame.from_pydict({"Time": [3, 2], "b": [30, 20]})
    c = Frame.from_pydict({"Time": [2, 3, 5], "c": [200, 300, 500]})

    [result] = join.transform([a, b, c])

    assert result.to_pydict() == {
        "Time": [2, 3],
        "a": [2, 3],
        "b": [20, 30],
        "c": [200, 300],
    }


def test_cardinality_is_reconciled_by_tiling(join):
    a = Frame.from_pydict({"Time": [1, 1], "a": ["a1", "a2"]})
    b = Frame.from_pydict({"Time": [1, 1, 1], "b": ["b1", "b2", "b3"]})

    [result] = join.transform([a, b])

    assert result.to_pydict() == {
        "Time": [1] * 6,
        "a": ["a1", "a2", "a1", "a2", "a1", "a2"],
        "b": ["b1", "b2", "b3", "b1", "b2", "b3"],
    }


def test_rows_follow_join_domain_order(join):
    a = Frame.from_pydict({"Time": [2, 1], "a": [20, 10]})
    b = Frame.from_pydict({"Time": [1, 2], "b": [100, 200]})

    [result] = join.transform([a, b])

    assert result.to_pydict() == {"Time": [2, 1], "a": [20, 10], "b": [200, 100]}


def test_later_frame_wins_on_column_collision(join):
    a = Frame.from_pydict({"Time": [1, 2], "x": ["a1", "a2"]})
    b = Frame.from_pydict({"Time": [1, 2], "x": ["b1", "b2"]})

    [result] = join.transform([a, b])

    assert result.field_names == ["Time", "x"]
    assert result["x"].values == ["b1", "b2"]


def test_new_fields_keep_their_type_and_config(join):
    a = Frame([Field("Time", [1], type="time"), Field("a", [1], config={"unit": "s"})])
    b = Frame([Field("Time", [1], type="time"), Field("b", [2], config={"unit": "ms"})])

    [result] = join.transform([a, b])

    assert result.fields == [
        Field("Time", [1], type="time"),
        Field("a", [1], config={"unit": "s"}),
        Field("b", [2], config={"unit": "ms"}),
    ]


def test_dimensions_are_coerced_but_rows_are_matched_strictly(join):
    # Time=1 and Time="1" are the same dimension, but the rows of
    # the second frame don't strictly match the value recorded from the first.
    a = Frame.from_pydict({"Time": [1, 2], "a": [10, 20]})
    b = Frame.from_pydict({"Time": ["1", 2], "b": [100, 200]})

    strategy = DimensionJoinStrategy(("Time",))
    assert [d.vals for d in strategy.join_domain([a, b])] == [[1], [2]]

    [result] = join.transform([a, b])

    assert result.to_pydict() == {"Time": [2], "a": [20], "b": [200]}


def test_falsy_keys_never_match(join):
    a = Frame.from_pydict({"Time": [0, 1], "a": [10, 20]})
    b = Frame.from_pydict({"Time": [0, 1], "b": [100, 200]})

    [result] = join.transform([a, b])

    assert result.to_pydict() == {"Time": [1], "a": [20], "b": [200]}


def test_multiple_key_fields():
    a = Frame.from_pydict(
        {"Time": [1, 1, 2], "host": ["a", "b", "a"], "cpu": [0.1, 0.2, 0.3]}
    )
    b = Frame.from_pydict(
        {"Time": [1, 2, 2], "host": ["b", "a", "b"], "mem": [10, 20, 30]}
    )

    [result] = FullJoinTransformer(JoinOptions(["Time", "host"])).transform([a, b])

    assert result.to_pydict() == {
        "Time": [1, 2],
        "host": ["b", "a"],
        "cpu": [0.2, 0.3],
        "mem": [10, 20],
    }


def test_no_shared_dimensions(join):
    a = Frame.from_pydict({"Time": [1], "a": [10]})
    b = Frame.from_pydict({"Time": [2], "b": [20]})

    [result] = join.transform([a, b])

    assert result.to_pydict() == {"Time": [], "a": [], "b": []}


def test_empty_key_list_joins_nothing():
    a = Frame.from_pydict({"Time": [1], "a": [10]})
    b = Frame.from_pydict({"Time": [1], "b": [20]})

    [result] = FullJoinTransformer(JoinOptions([])).transform([a, b])

    assert result.to_pydict() == {"Time": [], "a": [], "b": []}


def test_row_limit():
    a = Frame.from_pydict({"Time": [1] * 4, "a": [1, 2, 3, 4]})
    b = Frame.from_pydict({"Time": [1] * 3, "b": [1, 2, 3]})

    with pytest.raises(RowLimitExceededError):
        FullJoinTransformer(JoinOptions(max_rows=10)).transform([a, b])

    [result] = FullJoinTransformer(JoinOptions(max_rows=None)).transform([a, b])
    assert result.length == 12


def test_frame_name_is_kept(join):
    a = Frame.from_pydict({"Time": [1], "a": [1]}, name="first")
    b = Frame.from_pydict({"Time": [1], "b": [1]}, name="second")
    [result] = join.transform([a, b])
    assert result.name == "first"


def test_row_limit_is_absolute():
    a = Frame.from_pydict({"Time": [1, 2, 3], "a": [1, 2, 3]})
    b = Frame.from_pydict({"Time": [1, 2, 3], "b": [1, 2, 3]})

    with pytest.raises(RowLimitExceededError):
        FullJoinTransformer(JoinOptions(max_rows=2)).transform([a, b])

    with pytest.raises(RowLimitExceededError):
        FullJoinTransformer(JoinOptions(strategy="rows", max_rows=2)).transform([a, b])


def test_large_join(join):
    size = 20000
    a = Frame.from_pydict({"Time": list(range(1, size + 1)), "a": list(range(size))})
    b = Frame.from_pydict({"Time": list(reversed(range(1, size + 1))), "b": list(range(size))})

    [result] = join.transform([a, b])

    assert result.length == size
    assert result["Time"].values[:3] == [1, 2, 3]
    assert result["b"].values[:3] == [size - 1, size - 2, size - 3]
