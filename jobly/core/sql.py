"""
SQL fragment builders for partial updates and list filters.

Both builders emit numbered bind parameters (``:p1``, ``:p2``, ...) together
with the values in the same order, so a caller can append its own parameters
(``placeholder(len(values) + 1)``) after them. Pass the value list through
``bind_params`` to get the mapping SQLAlchemy's ``text()`` expects.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from jobly.core.exceptions import BadRequestException


def placeholder(index: int) -> str:
    """Bind parameter for the 1-based position ``index``."""
    return f":p{index}"


def bind_params(values: Optional[Sequence[Any]]) -> Dict[str, Any]:
    """Turn an ordered value list into ``text()`` bind parameters."""
    if not values:
        return {}
    return {f"p{idx}": value for idx, value in enumerate(values, start=1)}


def sql_for_partial_update(
    data: Mapping[str, Any],
    js_to_sql: Mapping[str, str],
) -> Tuple[str, List[Any]]:
    """
    Build the SET clause of a partial UPDATE.

    Args:
        data: Fields to change, e.g. ``{"firstName": "Aliya", "age": 32}``
        js_to_sql: camelCase name -> column name, e.g. ``{"firstName": "first_name"}``.
            Names missing from it are used as the column name unchanged.

    Returns:
        Tuple of (``'"first_name" = :p1, "age" = :p2'``, ``["Aliya", 32]``)

    Raises:
        BadRequestException: If ``data`` is empty.
    """
    if not data:
        raise BadRequestException("No data")

    cols = [
        f'"{js_to_sql.get(key, key)}" = {placeholder(idx)}'
        for idx, key in enumerate(data, start=1)
    ]
    return ", ".join(cols), list(data.values())


class FilterOp(str, Enum):
    """Comparison a filter field compiles to."""

    CONTAINS = "contains"  # case-insensitive substring
    GTE = ">="
    LTE = "<="


@dataclass(frozen=True)
class FilterField:
    column: str
    op: FilterOp


@dataclass(frozen=True)
class FilterSpec:
    """
    The filters an entity accepts for list queries.

    ``bounds`` holds ``(lower_key, upper_key, label)`` triples; when both keys
    are supplied the lower one may not exceed the upper one.
    """

    fields: Mapping[str, FilterField]
    order_by: str
    bounds: Tuple[Tuple[str, str, str], ...] = field(default_factory=tuple)


def sql_for_filters(
    filters: Mapping[str, Any],
    spec: FilterSpec,
) -> Tuple[str, Optional[List[Any]]]:
    """
    Build the WHERE ... ORDER BY tail of a list query.

    Returns ``("", None)`` for empty filters; the caller then orders by
    ``spec.order_by`` itself.

    Raises:
        BadRequestException: If a lower bound exceeds its upper bound or a
            filter name is not in ``spec``.
    """
    for lower_key, upper_key, label in spec.bounds:
        lower = filters.get(lower_key)
        upper = filters.get(upper_key)
        if lower is not None and upper is not None and lower > upper:
            raise BadRequestException(f"Min {label} cannot be greater than max")

    if not filters:
        return "", None

    clauses = []
    values = []
    for idx, (key, value) in enumerate(filters.items(), start=1):
        filter_field = spec.fields.get(key)
        if filter_field is None:
            raise BadRequestException(f"Unrecognized filter: {key}")

        if filter_field.op is FilterOp.CONTAINS:
            clauses.append(f'LOWER("{filter_field.column}") LIKE LOWER({placeholder(idx)})')
            value = f"%{value}%"
        else:
            clauses.append(f'"{filter_field.column}" {filter_field.op.value} {placeholder(idx)}')
        values.append(value)

    return f'WHERE {" AND ".join(clauses)} ORDER BY "{spec.order_by}"', values
