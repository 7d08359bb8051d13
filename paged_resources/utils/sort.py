"""
Utilities for converting sort criteria to and from query parameters.
"""
from typing import Any, Iterable, List, Optional

from paged_resources.core.exceptions import MalformedSortSpecification
from paged_resources.schemas.page import Direction, Order, Sort


def parse_sort_param(value: str) -> Order:
    """
    Parse a single ``sort`` query value.

    Accepts ``field`` or ``field,direction`` where direction is asc or desc
    in any case.

    Args:
        value: Raw query parameter value

    Returns:
        Order: Parsed sort criterion

    Raises:
        MalformedSortSpecification: If the value has no field, more than one
            direction, or an unknown direction
    """
    parts = [part.strip() for part in value.split(",")]
    if not parts[0] or len(parts) > 2:
        raise MalformedSortSpecification(value)

    if len(parts) == 1:
        return Order(property=parts[0])

    if not parts[1]:
        raise MalformedSortSpecification(value)
    return Order(property=parts[0], direction=Direction.from_string(parts[1]))


def parse_sort_params(values: Optional[Iterable[str]]) -> Optional[Sort]:
    """Parse repeated ``sort`` query values into a single sort, or None when absent."""
    orders = [parse_sort_param(value) for value in values or [] if value.strip()]
    return Sort(orders=orders) if orders else None


def format_sort_param(order: Order) -> str:
    """Render a sort criterion as a ``field,direction`` query value."""
    return f"{order.property},{order.direction.value.lower()}"


def coerce_sort(value: Any) -> Optional[Sort]:
    """
    Normalise whatever a page reports as its sort into a Sort.

    Pages produced outside this package may report their sort as the
    textual ``"field: DIRECTION"`` form; those are parsed here.

    Raises:
        MalformedSortSpecification: If a textual sort cannot be parsed
    """
    if value is None or isinstance(value, Sort):
        return value
    if isinstance(value, Order):
        return Sort(orders=[value])
    if isinstance(value, str):
        return Sort.parse(value)
    raise MalformedSortSpecification(repr(value), message=f"Unsupported sort value: {value!r}")


def format_sort_params(sort: Optional[Sort]) -> List[str]:
    """Render every order of a sort as its own query value, in priority order."""
    if not sort:
        return []
    return [format_sort_param(order) for order in sort.orders]
