import asyncio
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import get_settings
from app.services.database import Database

async def test_connection():
    database = Database(get_settings())
    try:
        await database.ping()
        print("Database connection successful!")
    except (SQLAlchemyError, OSError) as e:
        print(f"Database connection failed: {str(e)}")
    finally:
        await database.dispose()

if __name__ == "__main__":
    asyncio.run(test_connection())
