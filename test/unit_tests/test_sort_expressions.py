import pytest

from sortparams.sorting import (
    Order,
    Sort,
    SortDirection,
    fold_into_expressions,
    group_by_direction,
    legacy_direction_parameter_name,
    legacy_fold_expressions,
    parse_legacy_expression,
    parse_sort_expressions,
    resolve_parameter_name,
)
from sortparams.utils.errors import InvalidSortConfigurationError, LegacySortDirectionError

ASC = SortDirection.ASC
DESC = SortDirection.DESC


def orders(*pairs):
    return Sort.of(Order(field=field, direction=direction) for field, direction in pairs)


@pytest.mark.parametrize(
    "values,expected",
    [
        ([], None),
        ([None], None),
        ([None, None], None),
        ([""], None),
        ([","], None),
        (["firstname,lastname,asc"], orders(("firstname", ASC), ("lastname", ASC))),
        (["firstname,asc", "lastname,desc"], orders(("firstname", ASC), ("lastname", DESC))),
        (["firstname,xyz"], orders(("firstname", None), ("xyz", None))),
        (["firstname"], orders(("firstname", None))),
        (["firstname,DESC"], orders(("firstname", DESC))),
        (["firstname,descending"], orders(("firstname", DESC))),
        (["firstname,asc", None, "age,desc"], orders(("firstname", ASC), ("age", DESC))),
        (["b,a,asc", "a,desc"], orders(("b", ASC), ("a", ASC), ("a", DESC))),
        (["firstname,", ",lastname,desc"], orders(("firstname", None), ("lastname", DESC))),
    ],
)
def test_parse_sort_expressions(values, expected):
    assert parse_sort_expressions(values, ",") == expected


def test_parse_sort_expressions_lone_direction():
    # A direction without fields contributes nothing
    assert parse_sort_expressions(["asc"], ",") is None
    assert parse_sort_expressions(["asc", "name,desc"], ",") == orders(("name", DESC))


def test_parse_sort_expressions_custom_delimiter():
    assert parse_sort_expressions(["first.last.desc"], ".") == orders(("first", DESC), ("last", DESC))
    assert parse_sort_expressions(["first,last|asc"], "|") == orders(("first,last", ASC))


def test_parse_sort_expressions_accepts_generator():
    assert parse_sort_expressions((value for value in ["a,desc"]), ",") == orders(("a", DESC))


@pytest.mark.parametrize(
    "sort,expected",
    [
        (Sort(), []),
        (orders(("a", ASC), ("b", ASC), ("c", DESC)), ["a,b,asc", "c,desc"]),
        (orders(("a", ASC), ("b", DESC), ("c", ASC)), ["a,asc", "b,desc", "c,asc"]),
        (orders(("a", DESC)), ["a,desc"]),
        (orders(("a", None), ("b", None), ("c", DESC)), ["a,b", "c,desc"]),
    ],
)
def test_fold_into_expressions(sort, expected):
    assert fold_into_expressions(sort, ",") == expected


def test_fold_into_expressions_custom_delimiter():
    assert fold_into_expressions(orders(("a", ASC), ("b", ASC)), ";") == ["a;b;asc"]


def test_group_by_direction_contiguous_runs_only():
    sort = orders(("a", ASC), ("b", ASC), ("c", DESC), ("d", ASC))

    assert group_by_direction(sort) == [(ASC, ["a", "b"]), (DESC, ["c"]), (ASC, ["d"])]
    assert group_by_direction(Sort()) == []


@pytest.mark.parametrize(
    "sort",
    [
        orders(("firstname", ASC), ("lastname", ASC)),
        orders(("firstname", ASC), ("lastname", DESC), ("age", ASC)),
        orders(("a", DESC), ("a", ASC)),
        orders(("a", None), ("b", DESC)),
    ],
)
def test_fold_then_parse_returns_same_sort(sort):
    assert parse_sort_expressions(fold_into_expressions(sort, ","), ",") == sort


def test_legacy_fold_expressions():
    assert legacy_fold_expressions(orders(("a", DESC), ("b", DESC)), ",") == ("a,b", "desc")
    assert legacy_fold_expressions(orders(("a", None)), ",") == ("a", "")


@pytest.mark.parametrize(
    "sort",
    [
        orders(("a", ASC), ("b", DESC)),
        orders(("a", ASC), ("b", DESC), ("c", ASC)),
        Sort(),
    ],
)
def test_legacy_fold_expressions_single_direction_only(sort):
    with pytest.raises(LegacySortDirectionError, match="only supports a single direction") as error_info:
        legacy_fold_expressions(sort, ",")

    assert isinstance(error_info.value, InvalidSortConfigurationError)
    assert error_info.value.sort == sort


@pytest.mark.parametrize(
    "fields,direction,expected",
    [
        ("firstname,lastname", "desc", Sort.by(DESC, "firstname", "lastname")),
        ("firstname", "ASC", Sort.by(ASC, "firstname")),
        ("firstname", None, Sort.by(None, "firstname")),
        ("firstname", "up", Sort.by(None, "firstname")),
        ("", "asc", None),
        (None, "asc", None),
    ],
)
def test_parse_legacy_expression(fields, direction, expected):
    assert parse_legacy_expression(fields, direction, ",") == expected


@pytest.mark.parametrize(
    "base_name,qualifier,delimiter,expected",
    [
        ("sort", "user", "_", "user_sort"),
        ("sort", None, "_", "sort"),
        ("sort", "", "_", "sort"),
        ("order", "user", "-", "user-order"),
    ],
)
def test_resolve_parameter_name(base_name, qualifier, delimiter, expected):
    assert resolve_parameter_name(base_name, qualifier, delimiter) == expected


def test_legacy_direction_parameter_name():
    assert legacy_direction_parameter_name("sort") == "sort.dir"
    assert legacy_direction_parameter_name(resolve_parameter_name("sort", "user", "_")) == "user_sort.dir"
