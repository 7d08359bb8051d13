"""
Pydantic schemas describing a page of results and the request that produced it.

These mirror the page abstraction most data-access layers hand back: a page
number, a page size, totals across the whole result set, the sort that was
applied and the content of the current page. Nothing here fetches or slices
data; instances are built by whatever layer ran the query.
"""
from typing import Any, Callable, Generic, List, Optional, Protocol, TypeVar, runtime_checkable
from enum import Enum
from pydantic import BaseModel, Field

from paged_resources.core.exceptions import MalformedSortSpecification


T = TypeVar('T')
S = TypeVar('S')


class Direction(str, Enum):
    """Sort direction enum."""
    ASC = "ASC"
    DESC = "DESC"

    @classmethod
    def from_string(cls, value: str) -> "Direction":
        """
        Parse a direction case-insensitively.

        Raises:
            MalformedSortSpecification: If the value is not asc or desc
        """
        try:
            return cls(value.strip().upper())
        except ValueError:
            raise MalformedSortSpecification(
                value, message=f"Invalid sort direction: {value!r}"
            ) from None


class Order(BaseModel):
    """A single sort criterion."""
    property: str = Field(..., min_length=1, description="Property to sort by")
    direction: Direction = Field(Direction.ASC, description="Sort direction")

    class Config:
        """Pydantic config."""
        frozen = True

    def is_ascending(self) -> bool:
        return self.direction == Direction.ASC

    def __str__(self) -> str:
        return f"{self.property}: {self.direction.value}"


class Sort(BaseModel):
    """Ordered collection of sort criteria. An empty sort means unsorted."""
    orders: List[Order] = Field(default_factory=list, description="Sort criteria in priority order")

    class Config:
        """Pydantic config."""
        frozen = True

    @classmethod
    def by(cls, *properties: str, direction: Direction = Direction.ASC) -> "Sort":
        """Create a sort over the given properties, all in the same direction."""
        return cls(orders=[Order(property=p, direction=direction) for p in properties])

    @classmethod
    def unsorted(cls) -> "Sort":
        return cls()

    @classmethod
    def parse(cls, value: str) -> "Sort":
        """
        Parse the textual form produced by ``str(sort)``.

        The format is a comma separated list of ``property: DIRECTION``
        tokens, e.g. ``"name: ASC, created_at: DESC"``. ``"UNSORTED"`` and
        the empty string give an unsorted instance.

        Args:
            value: Textual sort representation

        Returns:
            Sort: Parsed sort

        Raises:
            MalformedSortSpecification: If a token does not split into exactly
                a property and a direction
        """
        value = value.strip()
        if not value or value.upper() == "UNSORTED":
            return cls.unsorted()

        orders = []
        for token in value.split(","):
            parts = token.split(":")
            if len(parts) != 2 or not parts[0].strip() or not parts[1].strip():
                raise MalformedSortSpecification(token.strip())
            orders.append(Order(property=parts[0].strip(), direction=Direction.from_string(parts[1])))
        return cls(orders=orders)

    def is_sorted(self) -> bool:
        return bool(self.orders)

    def is_unsorted(self) -> bool:
        return not self.orders

    def get_order_for(self, name: str) -> Optional[Order]:
        for order in self.orders:
            if order.property == name:
                return order
        return None

    def __bool__(self) -> bool:
        return self.is_sorted()

    def __str__(self) -> str:
        if not self.orders:
            return "UNSORTED"
        return ", ".join(str(order) for order in self.orders)


class Pageable(BaseModel):
    """
    Descriptor of a page request: which page, how big, and how to sort.
    """
    page: int = Field(0, ge=0, description="Zero-based page index")
    size: int = Field(..., gt=0, description="Page size")
    sort: Optional[Sort] = Field(None, description="Requested sort")

    class Config:
        """Pydantic config."""
        frozen = True

    @property
    def offset(self) -> int:
        """Number of items to skip to reach this page."""
        return self.page * self.size

    def has_previous(self) -> bool:
        return self.page > 0

    def next(self) -> "Pageable":
        return self.model_copy(update={"page": self.page + 1})

    def previous(self) -> "Pageable":
        if not self.has_previous():
            raise ValueError("First page has no previous page")
        return self.model_copy(update={"page": self.page - 1})

    def previous_or_first(self) -> "Pageable":
        return self.previous() if self.has_previous() else self

    def first(self) -> "Pageable":
        return self.model_copy(update={"page": 0})


@runtime_checkable
class PageLike(Protocol[T]):
    """Read-only paging accessors shared by pages and their link-decorated wrappers."""

    @property
    def number(self) -> int: ...

    @property
    def size(self) -> int: ...

    @property
    def total_pages(self) -> int: ...

    @property
    def total_elements(self) -> int: ...

    @property
    def number_of_elements(self) -> int: ...

    @property
    def sort(self) -> Any: ...

    @property
    def content(self) -> Any: ...

    def has_previous(self) -> bool: ...

    def has_next(self) -> bool: ...

    def is_first(self) -> bool: ...

    def is_last(self) -> bool: ...

    def has_content(self) -> bool: ...


class Page(BaseModel, Generic[T]):
    """
    Immutable snapshot of one page of a larger result set.
    """
    number: int = Field(0, ge=0, description="Zero-based page index")
    size: int = Field(..., gt=0, description="Requested page size")
    total_pages: int = Field(0, ge=0, description="Total number of pages")
    total_elements: int = Field(0, ge=0, description="Total number of elements across all pages")
    sort: Optional[Sort] = Field(None, description="Sort applied to the result set")
    content: List[T] = Field(default_factory=list, description="Elements of the current page")

    class Config:
        """Pydantic config."""
        frozen = True

    @classmethod
    def of(cls, content: List[T], pageable: Pageable, total_elements: int) -> "Page[T]":
        """
        Build a page from its content, the request that produced it and the overall total.

        Args:
            content: Elements of the current page
            pageable: Page request
            total_elements: Number of elements across all pages

        Returns:
            Page: Page with total pages derived from the total and page size
        """
        total_pages = -(-total_elements // pageable.size)
        return cls(
            number=pageable.page,
            size=pageable.size,
            total_pages=total_pages,
            total_elements=total_elements,
            sort=pageable.sort,
            content=list(content),
        )

    @classmethod
    def empty(cls, pageable: Pageable) -> "Page[T]":
        return cls.of([], pageable, 0)

    @property
    def number_of_elements(self) -> int:
        return len(self.content)

    @property
    def pageable(self) -> Pageable:
        return Pageable(page=self.number, size=self.size, sort=self.sort)

    def has_previous(self) -> bool:
        return self.number > 0

    def has_next(self) -> bool:
        return self.number + 1 < self.total_pages

    def is_first(self) -> bool:
        return not self.has_previous()

    def is_last(self) -> bool:
        return not self.has_next()

    def has_content(self) -> bool:
        return bool(self.content)

    def next_pageable(self) -> Optional[Pageable]:
        return self.pageable.next() if self.has_next() else None

    def previous_pageable(self) -> Optional[Pageable]:
        return self.pageable.previous() if self.has_previous() else None

    def map(self, converter: Callable[[T], S]) -> "Page[S]":
        """Return a page with the same metadata and every element passed through ``converter``."""
        return Page[Any](
            number=self.number,
            size=self.size,
            total_pages=self.total_pages,
            total_elements=self.total_elements,
            sort=self.sort,
            content=[converter(item) for item in self.content],
        )
