from typing import Protocol
from uuid import UUID

from users.domain.entities import User


class UserRepository(Protocol):
    """Store of user records.

    `create` must raise `DuplicateKeyError` when the id, email or username
    is already taken.
    """

    async def get_by_id(self, user_id: UUID) -> User | None: ...

    async def get_by_email(self, email: str) -> User | None: ...

    async def get_by_username(self, username: str) -> User | None: ...

    async def create(self, user: User) -> User: ...


class UserNotifier(Protocol):
    async def user_created(self, user: User) -> None: ...
