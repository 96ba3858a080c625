"""
Insert the bundled advocate dataset into the database.

Run after migrations. Skips seeding when the table already has rows
unless --force is given.

Usage:
    python scripts/seed_advocates.py [--force]
"""

import argparse
import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from app.core.config import settings
from app.db.seed_data import seed_records
from app.db.session import build_engine, build_session_maker, session_scope
from app.repositories.advocate_repository import AdvocateRepository


async def seed(force: bool) -> int:
    engine = build_engine(settings)
    if engine is None:
        print("DATABASE_URL is not set; nothing to seed.")
        return 1

    try:
        async with session_scope(build_session_maker(engine)) as db:
            repo = AdvocateRepository(db)
            existing = await repo.count()
            if existing and not force:
                print(f"advocates already has {existing} rows; use --force to insert anyway.")
                return 0

            created = await repo.create_many(seed_records())
            print(f"Inserted {len(created)} advocates.")
            return 0
    finally:
        await engine.dispose()


def main() -> int:
    parser = argparse.ArgumentParser(description="Seed the advocates table")
    parser.add_argument("--force", action="store_true", help="insert even if rows exist")
    args = parser.parse_args()
    return asyncio.run(seed(args.force))


if __name__ == "__main__":
    sys.exit(main())
