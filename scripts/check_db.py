import asyncio
import sys
from pathlib import Path

# Add project root to sys.path
project_root = Path(__file__).resolve().parent.parent
sys.path.append(str(project_root))

from app.api.deps import build_engine, build_sessionmaker  # noqa: E402
from app.config import get_settings  # noqa: E402
from app.infrastructure.db.seeder import motos_by_status, table_counts  # noqa: E402


async def check():
    engine = build_engine(get_settings())
    try:
        async with build_sessionmaker(engine)() as session:
            for table, total in (await table_counts(session)).items():
                print(f"{table}: {total} rows")

            print("Motos by status:")
            for status_nome, total in await motos_by_status(session):
                print(f"  {status_nome}: {total}")
    finally:
        await engine.dispose()


if __name__ == "__main__":
    asyncio.run(check())
