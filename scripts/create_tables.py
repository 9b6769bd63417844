"""
create_tables.py: idempotent table creation script.
Run this before starting the API against a fresh database, or after schema changes.
Safe to run multiple times (all DDL uses IF NOT EXISTS).

Usage:
    python scripts/create_tables.py
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

# Ensure the project root is on the path
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.config import settings
from app.database import engine
from app.models import Base


async def main() -> None:
    """Create all tables."""
    print(f"Creating tables on {engine.url.render_as_string(hide_password=True)}...")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    print("  ✓ All tables created (IF NOT EXISTS)")

    if settings.is_production:
        print("\nDone.")
    else:
        print("\nDone. Run `python scripts/seed.py` to load demo data.")
    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
