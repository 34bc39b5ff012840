import logging
from datetime import datetime, timezone
from typing import Any
from uuid import UUID, uuid4

import pydantic

from shared.exceptions import NotFoundError, ValidationError
from users.domain.entities import User
from users.domain.repository import UserNotifier, UserRepository
from users.interfaces.schemas import NewUser

logger = logging.getLogger(__name__)

# Distinguishes an omitted argument from an explicit None.
_UNSET: Any = object()


async def create_user(
    repo: UserRepository,
    email: str,
    username: str,
    id: UUID = _UNSET,
    created_at: datetime = _UNSET,
    notifier: UserNotifier | None = None,
) -> User:
    """Validate and insert a new user.

    When omitted, `id` and `created_at` default to a fresh uuid4 and the
    current UTC time. An explicit None is rejected like any other null field.
    Raises `ValidationError` for bad input and `DuplicateKeyError` when the
    id, email or username is taken.
    """
    try:
        new_user = NewUser(
            id=uuid4() if id is _UNSET else id,
            email=email,
            username=username,
            created_at=datetime.now(timezone.utc) if created_at is _UNSET else created_at,
        )
    except pydantic.ValidationError as exc:
        raise ValidationError(_describe(exc)) from exc

    user = await repo.create(
        User(
            id=new_user.id,
            email=new_user.email,
            username=new_user.username,
            created_at=new_user.created_at,
        )
    )
    if notifier is not None:
        await notifier.user_created(user)
    return user


async def get_user_by_id(repo: UserRepository, user_id: UUID) -> User:
    user = await repo.get_by_id(user_id)
    if not user:
        logger.debug("No user with id %s", user_id)
        raise NotFoundError("User", str(user_id))
    return user


async def get_user_by_email(repo: UserRepository, email: str) -> User:
    email = email.strip()
    user = await repo.get_by_email(email)
    if not user:
        logger.debug("No user with email %s", email)
        raise NotFoundError("User", email)
    return user


async def get_user_by_username(repo: UserRepository, username: str) -> User:
    username = username.strip()
    user = await repo.get_by_username(username)
    if not user:
        logger.debug("No user with username %s", username)
        raise NotFoundError("User", username)
    return user


def _describe(exc: pydantic.ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in exc.errors()
    )
