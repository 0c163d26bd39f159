"""Integration tests need a migrated PostgreSQL database.

Point ``DATABASE__URL`` at one (``alembic upgrade head`` first); without a
reachable database the whole directory is skipped.
"""

import pytest
import pytest_asyncio
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from stance.config import Settings
from stance.persistence.database import create_engine


@pytest_asyncio.fixture(autouse=True)
async def require_database():
    engine = create_engine(Settings())
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1 FROM votes LIMIT 1"))
    except (OSError, SQLAlchemyError) as e:
        pytest.skip(f"PostgreSQL not available: {e}")
    finally:
        await engine.dispose()
    yield
