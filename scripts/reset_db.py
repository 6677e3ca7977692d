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


async def reset():
    engine = build_engine(get_settings())
    try:
        async with engine.begin() as conn:
            # drop_all ya respeta el orden de las FKs
            await conn.run_sync(metadata.drop_all)
            for table in reversed(metadata.sorted_tables):
                print(f"Dropped {table.name}")

            await conn.run_sync(metadata.create_all)
            print("Recreated all tables.")

        async with build_sessionmaker(engine)() as session:
            await seed_database(session, ClockImpl(), hash_password)
        print("Seeded initial data.")
    finally:
        await engine.dispose()


if __name__ == "__main__":
    asyncio.run(reset())
