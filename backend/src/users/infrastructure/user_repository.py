import logging
from uuid import UUID

from sqlalchemy import ColumnElement, insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from shared.exceptions import DuplicateKeyError
from users.domain.entities import User
from users.infrastructure.orm_models import UserModel

logger = logging.getLogger(__name__)


class DbUserRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, user_id: UUID) -> User | None:
        return await self._find_one(UserModel.id == user_id)

    async def get_by_email(self, email: str) -> User | None:
        return await self._find_one(UserModel.email == email)

    async def get_by_username(self, username: str) -> User | None:
        return await self._find_one(UserModel.username == username)

    async def create(self, user: User) -> User:
        # Core insert keeps the session's identity map out of the way so
        # the database constraints are the only uniqueness check.
        try:
            await self.session.execute(
                insert(UserModel).values(
                    id=user.id,
                    email=user.email,
                    username=user.username,
                    created_at=user.created_at,
                )
            )
            await self.session.commit()
        except IntegrityError as exc:
            await self.session.rollback()
            duplicate = await self._find_duplicate(user)
            if duplicate is None:
                raise
            logger.warning("Rejected user %s: %s", user.id, duplicate.message)
            raise duplicate from exc

        logger.info("Stored user %s (%s)", user.id, user.username)
        return user

    async def _find_one(self, criterion: ColumnElement[bool]) -> User | None:
        model = (await self.session.scalars(select(UserModel).where(criterion))).one_or_none()
        return _to_entity(model) if model else None

    async def _find_duplicate(self, user: User) -> DuplicateKeyError | None:
        if await self.get_by_id(user.id):
            return DuplicateKeyError("id", str(user.id))
        if await self.get_by_email(user.email):
            return DuplicateKeyError("email", user.email)
        if await self.get_by_username(user.username):
            return DuplicateKeyError("username", user.username)
        return None


def _to_entity(model: UserModel) -> User:
    return User(
        id=model.id,
        email=model.email,
        username=model.username,
        created_at=model.created_at,
    )
