import asyncio
import os
import sys
from dotenv import load_dotenv

# Add the 'Backend' directory to the system path so we can import from the 'app' module
# without installing the project first.
backend_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'Backend'))
sys.path.append(backend_dir)

project_root = os.path.dirname(backend_dir)
# Load the .env file from the project root to get the DATABASE_URL.
load_dotenv(os.path.join(project_root, ".env"))

from app.core.config import Settings
from app.services.database import Database

# Import all models so SQLAlchemy knows about them and can create the tables.
from app.models.artist import Artist
from app.models.album import Album
from app.models.genre import Genre
from app.models.song import Song
# The album_genre association table is created because it's linked in the Album and Genre models.

async def create_all_tables():
    """Connects to the database and creates all tables for the imported models."""
    print("Connecting to the database to create tables...")
    database = Database(Settings())
    try:
        await database.create_all()
        print("All tables created successfully!")
    finally:
        await database.dispose()

if __name__ == "__main__":
    asyncio.run(create_all_tables())
