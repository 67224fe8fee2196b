"""Seed members from a JSON file.

Usage:
    python -m cotitra.tools.seed_db
    python -m cotitra.tools.seed_db --data-dir data
    python -m cotitra.tools.seed_db --file path/to/users.json

The file is a list of {"firstName", "lastName", "email", "password"?}
objects. ``users.local.json`` (not committed) wins over ``users.json``.
Existing members (same first and last name) get their email and password
updated; new ones are created.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from sqlalchemy import select

from cotitra.adapters.crypto.passwords import hash_password
from cotitra.adapters.persistence.database import async_session_factory
from cotitra.adapters.persistence.models import UserModel
from cotitra.config import settings
from cotitra.infrastructure.logging import configure_logging

logger = logging.getLogger(__name__)

USER_FILE_NAMES = ("users.local.json", "users.json")


def find_users_file(data_dir: Path) -> Path | None:
    for name in USER_FILE_NAMES:
        path = data_dir / name
        if path.exists():
            logger.info("Using users file: %s", path)
            return path
    return None


def load_users(path: Path) -> list[dict[str, str]]:
    """Parse and validate the users file.

    Raises:
        ValueError: the file is not a list, or an entry misses a required field.
    """
    raw = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(raw, list):
        raise ValueError(f"{path}: expected a JSON list of users")

    users: list[dict[str, str]] = []
    for index, entry in enumerate(raw):
        first = str(entry.get("firstName") or "").strip()
        last = str(entry.get("lastName") or "").strip()
        email = str(entry.get("email") or "").strip().lower()
        if not first or not last or not email:
            raise ValueError(
                f"Invalid user at index {index}: firstName, lastName and email are required"
            )
        user = {"first_name": first, "last_name": last, "email": email}
        if entry.get("password"):
            user["password"] = str(entry["password"])
        users.append(user)
    return users


async def seed(path: Path) -> dict[str, int]:
    """Create or update every user in *path*. Returns counts."""
    counts = {"created": 0, "updated": 0}
    users = load_users(path)
    logger.info("Loading %d users from %s", len(users), path)

    async with async_session_factory() as session:
        for data in users:
            result = await session.execute(
                select(UserModel).where(
                    UserModel.first_name == data["first_name"],
                    UserModel.last_name == data["last_name"],
                )
            )
            existing = result.scalar_one_or_none()
            password_hash = hash_password(data["password"]) if "password" in data else None

            if existing:
                existing.email = data["email"]
                if password_hash:
                    existing.password_hash = password_hash
                counts["updated"] += 1
                logger.info("Updated: %s %s", data["first_name"], data["last_name"])
                continue

            session.add(
                UserModel(
                    first_name=data["first_name"],
                    last_name=data["last_name"],
                    email=data["email"],
                    password_hash=password_hash,
                )
            )
            counts["created"] += 1
            logger.info("Created: %s %s", data["first_name"], data["last_name"])

        await session.commit()

    logger.info("Seed complete: %d created, %d updated", counts["created"], counts["updated"])
    return counts


def main():
    configure_logging(settings)
    parser = argparse.ArgumentParser(description="Seed CoTiTra members from a JSON file")
    parser.add_argument(
        "--data-dir", type=str, default="data",
        help="Directory containing users.local.json or users.json (default: data)",
    )
    parser.add_argument("--file", type=str, default=None, help="Explicit users file")
    args = parser.parse_args()

    path = Path(args.file) if args.file else find_users_file(Path(args.data_dir))
    if path is None or not path.exists():
        logger.error("No users file found (looked for %s)", ", ".join(USER_FILE_NAMES))
        sys.exit(1)

    asyncio.run(seed(path))


if __name__ == "__main__":
    main()
