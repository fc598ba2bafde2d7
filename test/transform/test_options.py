import pytest

from framejoin.transform import (
    FullJoinTransformer,
    InvalidOptionsError,
    JoinOptions,
    SanitizeOptions,
    SanitizeTransformer,
    get_transformer,
)
from framejoin.transform.registry import default_options


def test_join_defaults():
    options = JoinOptions()
    assert options.by_fields == ("Time",)
    assert options.strategy == "dimensions"
    assert options.max_rows == 1_000_000


def test_join_from_dict():
    options = JoinOptions.from_dict({"byFields": ["Time", "host"], "strategy": "rows", "maxRows": 10})
    assert options == JoinOptions(["Time", "host"], strategy="rows", max_rows=10)
    assert options.to_dict() == {"byFields": ["Time", "host"], "strategy": "rows", "maxRows": 10}


@pytest.mark.parametrize("options", [None, {}])
def test_join_from_empty_dict(options):
    assert JoinOptions.from_dict(options) == JoinOptions()


def test_join_options_do_not_keep_caller_list():
    by_fields = ["Time"]
    options = JoinOptions(by_fields)
    by_fields.append("host")
    assert options.by_fields == ("Time",)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"strategy": "outer"},
        {"max_rows": 0},
        {"max_rows": -5},
        {"max_rows": "10"},
        {"max_rows": 10.0},
        {"max_rows": True},
        {"by_fields": "Time"},
        {"by_fields": ["Time", 1]},
    ],
)
def test_join_invalid_options(kwargs):
    with pytest.raises(InvalidOptionsError):
        JoinOptions(**kwargs)


def test_invalid_options_are_value_errors():
    with pytest.raises(ValueError):
        JoinOptions(strategy="outer")


def test_sanitize_options():
    options = SanitizeOptions.from_dict({"byFields": ["b", "a", "b"]})
    assert options.by_fields == frozenset({"a", "b"})
    assert options.to_dict() == {"byFields": ["a", "b"]}
    assert options == SanitizeOptions(["a", "b"])
    assert SanitizeOptions().by_fields == frozenset({"Time"})
    assert repr(options) == "SanitizeOptions(by_fields=['a', 'b'])"


@pytest.mark.parametrize(
    "id, options, transformer_class",
    [
        ("fullJoin", {"byFields": ["host"]}, FullJoinTransformer),
        ("mapping", {"byFields": ["bytes"]}, SanitizeTransformer),
    ],
)
def test_get_transformer(id, options, transformer_class):
    transformer = get_transformer(id, options)
    assert isinstance(transformer, transformer_class)
    assert transformer.id == id
    assert transformer.options.to_dict()["byFields"] == options["byFields"]


def test_get_unknown_transformer():
    with pytest.raises(KeyError):
        get_transformer("pivot")


def test_default_options():
    assert default_options("fullJoin") == {
        "byFields": ["Time"],
        "strategy": "dimensions",
        "maxRows": 1_000_000,
    }
    assert default_options("mapping") == {"byFields": ["Time"]}


@pytest.mark.parametrize("max_rows", ["10", 2.5, [10]])
def test_join_from_dict_invalid_max_rows(max_rows):
    with pytest.raises(InvalidOptionsError):
        JoinOptions.from_dict({"maxRows": max_rows})


def test_join_from_dict_no_row_limit():
    assert JoinOptions.from_dict({"maxRows": None}).max_rows is None
