# Copyright 2019-2025 SURF, GÉANT, ESnet.
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from collections.abc import Iterable

import structlog
from more_itertools import split_when

from sortparams.sorting.sorting import Order, Sort
from sortparams.types import SortDirection
from sortparams.utils.errors import LegacySortDirectionError

logger = structlog.get_logger(__name__)

LEGACY_DIRECTION_SUFFIX = ".dir"

DirectionRun = tuple[SortDirection | None, list[str]]


def resolve_parameter_name(base_name: str, qualifier: str | None, qualifier_delimiter: str) -> str:
    """Return the request parameter name for a (possibly qualified) sort parameter.

    >>> resolve_parameter_name("sort", "user", "_")
    'user_sort'
    >>> resolve_parameter_name("sort", None, "_")
    'sort'
    """
    if qualifier:
        return f"{qualifier}{qualifier_delimiter}{base_name}"
    return base_name


def legacy_direction_parameter_name(parameter_name: str) -> str:
    """Return the companion parameter holding the direction in legacy mode.

    >>> legacy_direction_parameter_name("user_sort")
    'user_sort.dir'
    """
    return f"{parameter_name}{LEGACY_DIRECTION_SUFFIX}"


def _split_expression(expression: str, delimiter: str) -> list[str]:
    return [token for token in expression.split(delimiter) if token]


def _parse_expression(expression: str, delimiter: str) -> list[Order]:
    tokens = _split_expression(expression, delimiter)
    if not tokens:
        return []

    direction = SortDirection.from_string_or_none(tokens[-1])
    fields = tokens[:-1] if direction is not None else tokens
    return [Order(field=field, direction=direction) for field in fields]


def parse_sort_expressions(values: Iterable[str | None], delimiter: str) -> Sort | None:
    """Parse sort expressions like ``firstname,lastname,asc`` into a Sort.

    Each expression is split on the delimiter. When the last element is a direction keyword it applies to every other
    element of that expression; otherwise all elements are fields without a direction. Orders keep the position they
    have in the request.

    Args:
        values: all values of the (multi-valued) sort parameter, ``None`` entries are skipped
        delimiter: separates the fields and the direction within one expression

    Returns:
        The Sort or None when no field was given.

    """
    orders = [order for value in values if value is not None for order in _parse_expression(value, delimiter)]
    if not orders:
        return None

    logger.debug("Parsed sort expressions", orders=[str(order) for order in orders])
    return Sort.of(orders)


def parse_legacy_expression(fields: str | None, direction: str | None, delimiter: str) -> Sort | None:
    """Parse the legacy format, where all fields share the direction given in a separate parameter."""
    if fields is None:
        return None

    if not (tokens := _split_expression(fields, delimiter)):
        return None

    return Sort.by(SortDirection.from_string_or_none(direction), *tokens)


def group_by_direction(sort: Sort) -> list[DirectionRun]:
    """Group the orders into runs of consecutive orders sharing the same direction.

    A run ends as soon as the direction changes, orders with the same direction further on start a new run.
    """
    runs = split_when(sort.orders, lambda previous, current: previous.direction != current.direction)
    return [(run[0].direction, [order.field for order in run]) for run in runs]


def fold_into_expressions(sort: Sort, delimiter: str) -> list[str]:
    """Fold a Sort into sort expressions, one for each run of orders with the same direction.

    Orders without a direction are folded without a trailing direction keyword.
    """
    return [
        delimiter.join([*fields, direction.keyword] if direction is not None else fields)
        for direction, fields in group_by_direction(sort)
    ]


def legacy_fold_expressions(sort: Sort, delimiter: str) -> tuple[str, str]:
    """Fold a Sort into the legacy (fields, direction) pair.

    Raises:
        LegacySortDirectionError: the sort is empty or uses more than one direction.

    """
    runs = group_by_direction(sort)
    if len(runs) != 1:
        logger.error("Cannot fold sort into legacy expressions", sort=str(sort), runs=len(runs))
        raise LegacySortDirectionError(sort)

    direction, fields = runs[0]
    return delimiter.join(fields), direction.keyword if direction is not None else ""
