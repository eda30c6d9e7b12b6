import random

import pytest

from jobly.core.exceptions import BadRequestException
from jobly.core.sql import (
    FilterField,
    FilterOp,
    FilterSpec,
    bind_params,
    placeholder,
    sql_for_filters,
    sql_for_partial_update,
)

USER_JS_TO_SQL = {
    "firstName": "first_name",
    "lastName": "last_name",
    "isAdmin": "is_admin",
}

JOB_SPEC = FilterSpec(
    fields={
        "title": FilterField("title", FilterOp.CONTAINS),
        "minSalary": FilterField("salary", FilterOp.GTE),
        "maxSalary": FilterField("salary", FilterOp.LTE),
    },
    order_by="title",
    bounds=(("minSalary", "maxSalary", "salary"),),
)


# ─── Partial update ────────────────────────────────────────────

def test_partial_update_maps_known_names_and_keeps_unknown():
    set_cols, values = sql_for_partial_update(
        {"username": "someUser", "firstName": "Teddy"},
        USER_JS_TO_SQL,
    )

    assert set_cols == '"username" = :p1, "first_name" = :p2'
    assert values == ["someUser", "Teddy"]


def test_partial_update_empty_data_is_bad_request():
    with pytest.raises(BadRequestException) as exc_info:
        sql_for_partial_update({}, USER_JS_TO_SQL)

    assert exc_info.value.message == "No data"
    assert exc_info.value.status_code == 400


def test_partial_update_keeps_none_values():
    set_cols, values = sql_for_partial_update({"logoUrl": None}, {"logoUrl": "logo_url"})

    assert set_cols == '"logo_url" = :p1'
    assert values == [None]


def test_partial_update_preserves_key_order_for_any_field_set():
    rng = random.Random(1234)
    names = ["firstName", "lastName", "isAdmin", "email", "password", "username"]

    for _ in range(50):
        picked = rng.sample(names, rng.randint(1, len(names)))
        data = {name: rng.randint(0, 1000) for name in picked}

        set_cols, values = sql_for_partial_update(data, USER_JS_TO_SQL)
        fragments = set_cols.split(", ")

        assert len(fragments) == len(values) == len(data)
        assert values == list(data.values())
        for idx, (name, fragment) in enumerate(zip(data, fragments), start=1):
            assert fragment == f'"{USER_JS_TO_SQL.get(name, name)}" = :p{idx}'


# ─── Placeholders ──────────────────────────────────────────────

def test_bind_params_numbers_from_one():
    assert placeholder(3) == ":p3"
    assert bind_params(["a", None, 7]) == {"p1": "a", "p2": None, "p3": 7}
    assert bind_params(None) == {}


# ─── Filters ───────────────────────────────────────────────────

def test_empty_filters_produce_no_clause():
    assert sql_for_filters({}, JOB_SPEC) == ("", None)


def test_contains_filter_is_case_insensitive_substring():
    where, values = sql_for_filters({"title": "Developer"}, JOB_SPEC)

    assert where == 'WHERE LOWER("title") LIKE LOWER(:p1) ORDER BY "title"'
    assert values == ["%Developer%"]


def test_filters_are_anded_in_given_order():
    where, values = sql_for_filters(
        {"minSalary": 100000, "maxSalary": 120000, "title": "dev"},
        JOB_SPEC,
    )

    assert where == (
        'WHERE "salary" >= :p1 AND "salary" <= :p2 '
        'AND LOWER("title") LIKE LOWER(:p3) ORDER BY "title"'
    )
    assert values == [100000, 120000, "%dev%"]


def test_min_greater_than_max_is_bad_request():
    with pytest.raises(BadRequestException) as exc_info:
        sql_for_filters({"minSalary": 200, "maxSalary": 100}, JOB_SPEC)

    assert exc_info.value.message == "Min salary cannot be greater than max"


def test_single_bound_is_not_range_checked():
    where, values = sql_for_filters({"minSalary": 999999}, JOB_SPEC)

    assert where == 'WHERE "salary" >= :p1 ORDER BY "title"'
    assert values == [999999]


def test_equal_bounds_are_allowed():
    _, values = sql_for_filters({"minSalary": 100, "maxSalary": 100}, JOB_SPEC)

    assert values == [100, 100]


def test_unknown_filter_is_bad_request():
    with pytest.raises(BadRequestException):
        sql_for_filters({"numberOfTemps": 3}, JOB_SPEC)
