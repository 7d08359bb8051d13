"""
Utilities for API pagination.

``PagedResources`` wraps a page of results and decorates it with navigation
links (previous, next, first, last, self) rebuilt from the base URI of the
current request, any extra query parameters the caller wants preserved, and
the page, size and sort of each target page.
"""
import logging
from typing import Any, Callable, Dict, Generic, Iterator, List, Mapping, Optional, Sequence, Tuple, TypeVar, Union
from urllib.parse import urlencode, urlsplit
from fastapi import Query
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from paged_resources.core.config import settings
from paged_resources.core.exceptions import InvalidPageState
from paged_resources.schemas.link import Link, LinkRelation
from paged_resources.schemas.page import Order, Page, Pageable, PageLike, Sort
from paged_resources.utils.sort import coerce_sort, format_sort_params, parse_sort_params

logger = logging.getLogger("paged_resources.links")

T = TypeVar('T')
S = TypeVar('S')

QueryParams = Mapping[str, Union[str, Sequence[str]]]


class PageRequestParams:
    """
    Page request parameters for API endpoints.

    This class is used as a FastAPI dependency to extract the page index,
    page size and sort criteria from query parameters.
    """

    def __init__(
        self,
        page: int = Query(0, ge=0, alias=settings.PAGE_PARAMETER, description="Zero-based page index"),
        size: int = Query(
            settings.DEFAULT_PAGE_SIZE,
            ge=1,
            le=settings.MAX_PAGE_SIZE,
            alias=settings.SIZE_PARAMETER,
            description="Items per page",
        ),
        sort: Optional[List[str]] = Query(
            None,
            alias=settings.SORT_PARAMETER,
            description="Sort criteria as field,direction (repeatable)",
        ),
    ):
        """
        Initialize page request parameters.

        Args:
            page: Page index (0-based)
            size: Items per page
            sort: Repeated sort values, e.g. ``name,asc``

        Raises:
            MalformedSortSpecification: If a sort value cannot be parsed
        """
        self.page = page
        self.size = size
        self.sort = parse_sort_params(sort)

        # Offset and limit for the data layer
        self.skip = page * size
        self.limit = size

    @property
    def pageable(self) -> Pageable:
        return Pageable(page=self.page, size=self.size, sort=self.sort)


class PagedResponse(BaseModel, Generic[T]):
    """
    Generic paged response model.

    Serialized with camelCase keys: ``number``, ``size``, ``totalPages``,
    ``totalElements``, ``numberOfElements``, ``sort``, ``content`` and
    ``links``.
    """
    number: int
    size: int
    total_pages: int
    total_elements: int
    number_of_elements: int
    sort: Optional[List[Order]] = None
    content: List[T] = Field(default_factory=list)
    links: List[Link] = Field(default_factory=list)

    class Config:
        """Pydantic config."""
        alias_generator = to_camel
        populate_by_name = True


def strip_query(uri: str) -> str:
    """Drop the query string and fragment from a URI, keeping scheme, host, port and path."""
    return urlsplit(uri)._replace(query="", fragment="").geturl()


def normalize_query_params(query_params: Optional[QueryParams]) -> Dict[str, Tuple[str, ...]]:
    """
    Copy extra query parameters into an ordered key -> values mapping.

    A bare string value counts as a single value. Multi-dicts exposing
    ``multi_items()`` (such as Starlette's ``QueryParams``) keep every
    repeated value.
    """
    normalized: Dict[str, Tuple[str, ...]] = {}
    if not query_params:
        return normalized

    if hasattr(query_params, "multi_items"):
        for key, value in query_params.multi_items():
            normalized[key] = normalized.get(key, ()) + (str(value),)
        return normalized

    for key, values in query_params.items():
        if isinstance(values, str):
            normalized[key] = (values,)
        else:
            normalized[key] = tuple(str(value) for value in values)
    return normalized


def build_page_link(
    base_uri: str,
    page: int,
    size: int,
    sort: Optional[Sort],
    rel: Union[str, LinkRelation],
    query_params: Optional[QueryParams] = None,
) -> Link:
    """
    Build a navigation link to one page.

    Args:
        base_uri: URI the current request was made against
        page: Target page index
        size: Page size
        sort: Sort to carry over, one ``sort`` parameter per order
        rel: Link relation
        query_params: Additional query parameters, emitted before paging ones.
            Values must be passed decoded; they are percent-encoded here, so
            an already encoded value such as ``a%20b`` is encoded again

    Returns:
        Link: Built link
    """
    pairs = [
        (key, value)
        for key, values in normalize_query_params(query_params).items()
        for value in values
    ]
    pairs.append((settings.PAGE_PARAMETER, str(page)))
    pairs.append((settings.SIZE_PARAMETER, str(size)))
    pairs.extend((settings.SORT_PARAMETER, value) for value in format_sort_params(sort))

    href = f"{strip_query(base_uri)}?{urlencode(pairs, safe=',')}"
    rel = rel.value if isinstance(rel, LinkRelation) else rel
    return Link(href=href, rel=rel)


class PagedResources(Generic[T]):
    """
    Page metadata wrapper with navigation links.

    The following links are added when the wrapper is created:

    - PREVIOUS (if there is a previous page)
    - NEXT (if there is a next page)
    - FIRST
    - LAST (if there is at least one page)
    - SELF

    Extra query parameters are repeated on every link, which is what makes
    paginating a search work: ``/users?search=alice&page=0&size=5&sort=name,asc``.
    """

    def __init__(
        self,
        page: PageLike[T],
        base_uri: str,
        query_params: Optional[QueryParams] = None,
    ):
        """
        Wrap a page and build its links.

        Args:
            page: Page of results
            base_uri: URI of the current request; any query string is ignored
            query_params: Additional parameters to include in every link

        Raises:
            MalformedSortSpecification: If the page's sort cannot be parsed
        """
        self._page = page
        self._base_uri = strip_query(base_uri)
        self._query_params = normalize_query_params(query_params)
        self._sort = coerce_sort(page.sort)
        self._links: Tuple[Link, ...] = tuple(self._build_links())

    def _build_links(self) -> Iterator[Link]:
        number = self._page.number

        if self._page.has_previous():
            yield self._link(number - 1, LinkRelation.PREVIOUS)

        if self._page.has_next():
            yield self._link(number + 1, LinkRelation.NEXT)

        yield self._link(0, LinkRelation.FIRST)

        if self._page.total_pages > 0:
            yield self._link(self._page.total_pages - 1, LinkRelation.LAST)
        else:
            logger.debug(f"No last link for {self._base_uri}: result has no pages")

        yield self._link(number, LinkRelation.SELF)

    def _link(self, page: int, rel: LinkRelation) -> Link:
        return build_page_link(
            self._base_uri,
            page,
            self._page.size,
            self._sort,
            rel,
            self._query_params,
        )

    @property
    def links(self) -> Tuple[Link, ...]:
        return self._links

    def get_link(self, rel: Union[str, LinkRelation]) -> Optional[Link]:
        rel = rel.value if isinstance(rel, LinkRelation) else rel
        for link in self._links:
            if link.rel == rel:
                return link
        return None

    def has_link(self, rel: Union[str, LinkRelation]) -> bool:
        return self.get_link(rel) is not None

    def require_link(self, rel: Union[str, LinkRelation]) -> Link:
        """
        Return the link for a relation, failing if the page cannot have one.

        Raises:
            InvalidPageState: If no link exists for the relation
        """
        link = self.get_link(rel)
        if link is None:
            rel = rel.value if isinstance(rel, LinkRelation) else rel
            raise InvalidPageState(
                message=f"No {rel} link for page {self.number} of {self.total_pages}",
                details={"rel": rel, "number": self.number, "total_pages": self.total_pages},
            )
        return link

    @property
    def base_uri(self) -> str:
        return self._base_uri

    @property
    def query_params(self) -> Dict[str, Tuple[str, ...]]:
        return dict(self._query_params)

    @property
    def number(self) -> int:
        return self._page.number

    @property
    def size(self) -> int:
        return self._page.size

    @property
    def total_pages(self) -> int:
        return self._page.total_pages

    @property
    def number_of_elements(self) -> int:
        return self._page.number_of_elements

    @property
    def total_elements(self) -> int:
        return self._page.total_elements

    @property
    def content(self) -> Tuple[T, ...]:
        return tuple(self._page.content)

    @property
    def sort(self) -> Any:
        return self._page.sort

    def has_previous(self) -> bool:
        return self._page.has_previous()

    def has_next(self) -> bool:
        return self._page.has_next()

    def is_first(self) -> bool:
        return self._page.is_first()

    def is_last(self) -> bool:
        return self._page.is_last()

    def has_content(self) -> bool:
        return self._page.has_content()

    def __iter__(self) -> Iterator[T]:
        return iter(self._page.content)

    def __len__(self) -> int:
        return self.number_of_elements

    def next_pageable(self) -> Optional[Pageable]:
        if not self.has_next():
            return None
        return Pageable(page=self.number + 1, size=self.size, sort=self._sort)

    def previous_pageable(self) -> Optional[Pageable]:
        if not self.has_previous():
            return None
        return Pageable(page=self.number - 1, size=self.size, sort=self._sort)

    def map(self, converter: Callable[[T], S]) -> "PagedResources[S]":
        """
        Convert every element, keeping page metadata, base URI and query parameters.

        Args:
            converter: Function applied to each element of the content

        Returns:
            PagedResources: New wrapper over the converted page
        """
        if hasattr(self._page, "map"):
            return PagedResources(self._page.map(converter), self._base_uri, self._query_params)

        mapped = Page[Any](
            number=self.number,
            size=self.size,
            total_pages=self.total_pages,
            total_elements=self.total_elements,
            sort=self._sort,
            content=[converter(item) for item in self._page.content],
        )
        return PagedResources(mapped, self._base_uri, self._query_params)

    def to_response(self) -> PagedResponse[Any]:
        """Build the response model for this page and its links."""
        return PagedResponse[Any](
            number=self.number,
            size=self.size,
            total_pages=self.total_pages,
            total_elements=self.total_elements,
            number_of_elements=self.number_of_elements,
            sort=list(self._sort.orders) if self._sort else None,
            content=list(self._page.content),
            links=list(self._links),
        )

    def model_dump(self) -> Dict[str, Any]:
        """Serialize to the JSON-compatible dict sent on the wire."""
        return self.to_response().model_dump(by_alias=True, mode="json")

    def __repr__(self) -> str:
        return (
            f"PagedResources(number={self.number}, size={self.size}, "
            f"total_pages={self.total_pages}, links={[link.rel for link in self._links]})"
        )
