"""
API endpoints for browsing the user directory.
"""
from typing import Optional
from fastapi import APIRouter, Depends, Path, Query

from paged_resources.api.v1.dependencies import get_base_uri, get_users
from paged_resources.core.exceptions import NotFoundError, PagedResourcesException
from paged_resources.schemas.user import User, UserSummary
from paged_resources.services.users import UserDirectory
from paged_resources.utils.error_handling import handle_exception
from paged_resources.utils.pagination import PagedResources, PagedResponse, PageRequestParams

router = APIRouter()


def _search(
    users: UserDirectory,
    pagination: PageRequestParams,
    search: Optional[str],
    base_uri: str,
) -> PagedResources[User]:
    try:
        page = users.search(search, pagination.pageable)
    except PagedResourcesException as e:
        raise handle_exception(e)

    # Keep the search term on every navigation link
    query_params = {"search": [search]} if search else None
    return PagedResources(page, base_uri, query_params)


@router.get("/", response_model=PagedResponse[User])
async def list_users(
    pagination: PageRequestParams = Depends(),
    search: Optional[str] = Query(None, description="Filter by name or email"),
    base_uri: str = Depends(get_base_uri),
    users: UserDirectory = Depends(get_users),
):
    """
    List users.

    Returns a page of users with previous, next, first, last and self links.
    """
    return _search(users, pagination, search, base_uri).to_response()


@router.get("/summary", response_model=PagedResponse[UserSummary])
async def list_user_summaries(
    pagination: PageRequestParams = Depends(),
    search: Optional[str] = Query(None, description="Filter by name or email"),
    base_uri: str = Depends(get_base_uri),
    users: UserDirectory = Depends(get_users),
):
    """
    List users with only their id and name.
    """
    resources = _search(users, pagination, search, base_uri)
    return resources.map(lambda user: UserSummary(id=user.id, name=user.name)).to_response()


@router.get("/{user_id}", response_model=User)
async def get_user(
    user_id: str = Path(..., description="User ID"),
    users: UserDirectory = Depends(get_users),
):
    """
    Get a specific user.
    """
    user = users.get_by_id(user_id)
    if not user:
        raise handle_exception(NotFoundError(message=f"User {user_id} not found"))
    return user
