#!/usr/bin/env python3
"""
Demo seed script: populates the database with sample accounts.

!! NOT FOR PRODUCTION !!
Writes straight to the database configured by DATABASE_URL (or .env),
since the API itself only exposes account retrieval.

Usage:
    python demo/seed.py

    # Drop and recreate the accounts table first:
    python demo/seed.py --reset

Then fetch any of the printed ids:
    curl http://localhost:8000/accounts/1
"""

import argparse
import asyncio

from account_api.config import settings
from account_api.database import AsyncSessionLocal, Base, engine, ensure_sqlite_directory
from account_api.models.account import Account

# ---------------------------------------------------------------------------
# Demo accounts (balances in cents)
# ---------------------------------------------------------------------------

ACCOUNTS = [
    {"owner": "alice.chen", "balance": 850_00, "currency": "USD"},
    {"owner": "alice.chen", "balance": 5_000_00, "currency": "EUR"},
    {"owner": "bob.martinez", "balance": 1_200_00, "currency": "USD"},
    {"owner": "carol.nguyen", "balance": 3_200_00, "currency": "CAD"},
    {"owner": "dave.johnson", "balance": -75_25, "currency": "USD"},
    {"owner": "erin.patel", "balance": 0, "currency": "EUR"},
]


async def seed(reset: bool) -> None:
    ensure_sqlite_directory()

    async with engine.begin() as conn:
        if reset:
            print("Dropping existing tables...")
            await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    async with AsyncSessionLocal() as session:
        accounts = [Account(**fields) for fields in ACCOUNTS]
        session.add_all(accounts)
        await session.commit()

    print(f"Seeded {len(accounts)} accounts into {settings.DATABASE_URL}:")
    for account in accounts:
        print(
            f"  #{account.id:<4} {account.owner:<14} "
            f"{account.balance / 100:>12,.2f} {account.currency}"
        )

    await engine.dispose()


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the Account API database")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Drop and recreate tables before seeding",
    )
    args = parser.parse_args()
    asyncio.run(seed(args.reset))


if __name__ == "__main__":
    main()
