"""
seed.py: load demo restaurants, dishes and a customer account.

Writes nothing if the users table already has rows.

Usage:
    python scripts/seed.py              # create tables if needed, then seed
    python scripts/seed.py --dry-run    # list what would be inserted, no DB writes
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from app.database import AsyncSessionLocal, engine
from app.models import Base
from app.services.seed import (
    DEMO_CUSTOMER,
    DEMO_MENU,
    DEMO_PASSWORD,
    DEMO_RESTAURANTS,
    seed_demo_data,
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)


def _describe() -> None:
    for r in DEMO_RESTAURANTS:
        logger.info("restaurant  %-20s %s", r["name"], r["email"])
        for d in DEMO_MENU:
            logger.info("  dish      %-20s %s (%s)", d["name"], d["price"], d["category"])
    logger.info("customer    %-20s %s", DEMO_CUSTOMER["name"], DEMO_CUSTOMER["email"])
    logger.info("password for every account: %s", DEMO_PASSWORD)


async def main(dry_run: bool) -> int:
    _describe()
    if dry_run:
        logger.info("Dry run, nothing written.")
        return 0

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with AsyncSessionLocal() as session:
        inserted = await seed_demo_data(session)

    await engine.dispose()
    if not inserted:
        logger.warning("Database already has users; seed skipped.")
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed the marketplace demo data.")
    parser.add_argument("--dry-run", action="store_true", help="Parse only, no DB writes")
    args = parser.parse_args()
    sys.exit(asyncio.run(main(args.dry_run)))
