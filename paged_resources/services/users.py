"""
In-memory user directory backing the sample users endpoint.
"""
from datetime import datetime, timedelta, timezone
from typing import Iterable, List, Optional
import logging

from paged_resources.core.exceptions import InvalidSortProperty
from paged_resources.schemas.page import Page, Pageable, Sort
from paged_resources.schemas.user import User, UserRole

logger = logging.getLogger("paged_resources.users")

SORTABLE_PROPERTIES = ("id", "name", "email", "role", "created_at")

_SEED_NAMES = [
    "Alice Anderson", "Bob Brown", "Carol Clark", "Dave Davis", "Eve Evans",
    "Frank Foster", "Grace Green", "Heidi Hall", "Ivan Irwin", "Judy Jones",
    "Mallory Moore", "Niaj Nolan", "Olivia Owens", "Peggy Price", "Rupert Reed",
    "Sybil Scott", "Trent Turner", "Victor Vance", "Walter White", "Xavier Young",
    "Yvonne Zane", "Zoe Zimmer", "Alicia Keyes",
]


def _seed_users() -> List[User]:
    start = datetime(2024, 1, 1, tzinfo=timezone.utc)
    users = []
    for index, name in enumerate(_SEED_NAMES, start=1):
        first = name.split()[0].lower()
        users.append(User(
            id=f"user-{index:03d}",
            name=name,
            email=f"{first}@example.com",
            role=UserRole.ADMIN if index % 7 == 0 else UserRole.USER,
            created_at=start + timedelta(days=index),
        ))
    return users


class UserDirectory:
    """
    Read-only directory of users with search, sort and paging.
    """

    def __init__(self, users: Optional[Iterable[User]] = None):
        self._users = list(users) if users is not None else _seed_users()

    def __len__(self) -> int:
        return len(self._users)

    def get_by_id(self, user_id: str) -> Optional[User]:
        for user in self._users:
            if user.id == user_id:
                return user
        return None

    def search(self, term: Optional[str], pageable: Pageable) -> Page[User]:
        """
        Find users whose name or email contains a term.

        Args:
            term: Case-insensitive substring; None or empty matches everyone
            pageable: Page, size and sort to apply

        Returns:
            Page[User]: Requested page of matches

        Raises:
            InvalidSortProperty: If the sort names an unknown property
        """
        matches = self._users
        if term:
            needle = term.lower()
            matches = [
                user for user in matches
                if needle in user.name.lower() or needle in user.email.lower()
            ]

        matches = self._sorted(matches, pageable.sort)
        content = matches[pageable.offset:pageable.offset + pageable.size]

        logger.debug(f"Search {term!r}: {len(matches)} matches, returning {len(content)}")
        return Page[User].of(content, pageable, len(matches))

    @staticmethod
    def _sorted(users: List[User], sort: Optional[Sort]) -> List[User]:
        if not sort:
            return list(users)

        result = list(users)
        # Stable sorts applied from the least to the most significant order
        for order in reversed(sort.orders):
            if order.property not in SORTABLE_PROPERTIES:
                raise InvalidSortProperty(order.property, allowed=list(SORTABLE_PROPERTIES))
            result.sort(key=lambda user: getattr(user, order.property), reverse=not order.is_ascending())
        return result


# Singleton instance for dependency injection
_user_directory = UserDirectory()

def get_user_directory() -> UserDirectory:
    """Get the singleton user directory instance."""
    return _user_directory
