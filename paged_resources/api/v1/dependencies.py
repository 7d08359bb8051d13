"""
Dependencies for API endpoints.
"""
from fastapi import Request

from paged_resources.services.users import UserDirectory, get_user_directory


async def get_base_uri(request: Request) -> str:
    """
    Get the URI the current request was made against, without its query string.

    Args:
        request: Incoming request

    Returns:
        str: Scheme, host, port and path of the request
    """
    return str(request.url.replace(query="", fragment=""))


async def get_users() -> UserDirectory:
    """Get user directory."""
    return get_user_directory()
