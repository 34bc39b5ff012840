"""Seed script: applies migrations and creates demo users.

Usage:
    python scripts/seed.py                      # uses DATABASE_URL from settings / .env
    python scripts/seed.py sqlite+aiosqlite:///users.db
"""

import asyncio
import sys
from pathlib import Path

from alembic import command
from alembic.config import Config

BACKEND_DIR = Path(__file__).resolve().parent.parent / "backend"
sys.path.insert(0, str(BACKEND_DIR / "src"))

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402

from shared.config import settings  # noqa: E402
from shared.exceptions import DuplicateKeyError  # noqa: E402
from shared.logging import configure_logging  # noqa: E402
from users.application.services import create_user  # noqa: E402
from users.infrastructure.notifiers import LoggingUserNotifier  # noqa: E402
from users.infrastructure.user_repository import DbUserRepository  # noqa: E402
from users.interfaces.schemas import UserRecord  # noqa: E402

DATABASE_URL = sys.argv[1] if len(sys.argv) > 1 else settings.DATABASE_URL

USERS = [
    {"username": "alice", "email": "alice@example.com"},
    {"username": "bob", "email": "bob@example.com"},
]


def migrate(url: str) -> None:
    config = Config(str(BACKEND_DIR / "alembic.ini"))
    config.set_main_option("sqlalchemy.url", url)
    config.attributes["configure_logger"] = False
    command.upgrade(config, "head")


async def seed(url: str) -> None:
    engine = create_async_engine(url)
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    notifier = LoggingUserNotifier()

    async with session_factory() as session:
        repo = DbUserRepository(session)
        for user in USERS:
            try:
                created = await create_user(repo, notifier=notifier, **user)
            except DuplicateKeyError as exc:
                print(f"  {user['username']} skipped: {exc.message}")
                continue
            print(f"  {UserRecord.model_validate(created).model_dump_json()}")

    await engine.dispose()


def main() -> None:
    configure_logging()
    print(f"Seeding {DATABASE_URL}\n")
    migrate(DATABASE_URL)
    asyncio.run(seed(DATABASE_URL))
    print("\nDone!")


if __name__ == "__main__":
    main()
