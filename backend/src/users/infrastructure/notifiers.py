import logging

from users.domain.entities import User

logger = logging.getLogger(__name__)


class LoggingUserNotifier:
    async def user_created(self, user: User) -> None:
        logger.info("User created: %s <%s>", user.username, user.email)


class CollectingUserNotifier:
    """Records every created user, keyed by email."""

    def __init__(self, sent: dict[str, User] | None = None):
        self.sent = sent if sent is not None else {}

    async def user_created(self, user: User) -> None:
        self.sent[user.email] = user
