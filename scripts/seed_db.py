import asyncio
import sys
from pathlib import Path

# Add project root to sys.path
project_root = Path(__file__).resolve().parent.parent
sys.path.append(str(project_root))

from app.api.deps import build_engine, build_sessionmaker  # noqa: E402
from app.config import get_settings  # noqa: E402
from app.infrastructure.db.seeder import seed_database  # noqa: E402
from app.infrastructure.db.tables import metadata  # noqa: E402
from app.infrastructure.services import ClockImpl, hash_password  # noqa: E402


async def seed():
    engine = build_engine(get_settings())
    try:
        async with engine.begin() as conn:
            await conn.run_sync(metadata.create_all)
        print("Tables ready.")

        async with build_sessionmaker(engine)() as session:
            inserted = await seed_database(session, ClockImpl(), hash_password)
        print("Seeded initial data." if inserted else "Database already has data, nothing to do.")
    finally:
        await engine.dispose()


if __name__ == "__main__":
    asyncio.run(seed())
