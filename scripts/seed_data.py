import asyncio
import os
import sys
from datetime import date
from dotenv import load_dotenv

# Add the 'Backend' directory to the system path so we can import from the 'app' module
# without installing the project first.
backend_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'Backend'))
sys.path.append(backend_dir)

project_root = os.path.dirname(backend_dir)
load_dotenv(os.path.join(project_root, ".env"))

from app.core.config import Settings
from app.models.artist import Artist
from app.models.album import Album
from app.models.genre import Genre
from app.models.song import Song
from app.services.database import Database

async def create_demo_data():
    database = Database(Settings())

    async with database.session() as session:
        genres = {
            "rock": Genre(name="Rock"),
            "progressive": Genre(name="Progressive Rock"),
            "jazz": Genre(name="Jazz"),
        }
        session.add_all(genres.values())

        artists = [
            Artist(id="the-beatles", name="The Beatles"),
            Artist(id="pink-floyd", name="Pink Floyd"),
            Artist(id="miles-davis", name="Miles Davis"),
        ]
        session.add_all(artists)
        await session.flush()

        albums = [
            Album(
                id="abbey-road",
                title="Abbey Road",
                release_date=date(1969, 9, 26),
                artist_id="the-beatles",
                genres=[genres["rock"]],
            ),
            Album(
                id="dark-side-of-the-moon",
                title="The Dark Side of the Moon",
                release_date=date(1973, 3, 1),
                artist_id="pink-floyd",
                genres=[genres["rock"], genres["progressive"]],
            ),
            Album(
                id="kind-of-blue",
                title="Kind of Blue",
                release_date=date(1959, 8, 17),
                artist_id="miles-davis",
                genres=[genres["jazz"]],
            ),
        ]
        session.add_all(albums)
        await session.flush()

        songs = [
            Song(title="Come Together", album_id="abbey-road", duration=259),
            Song(title="Here Comes the Sun", album_id="abbey-road", duration=185, is_favorite=True),
            Song(title="Money", album_id="dark-side-of-the-moon", duration=382),
            Song(title="Time", album_id="dark-side-of-the-moon", duration=413),
            Song(title="So What", album_id="kind-of-blue", duration=562, is_favorite=True),
        ]
        session.add_all(songs)

    await database.dispose()
    print("Demo catalog created successfully!")

if __name__ == "__main__":
    asyncio.run(create_demo_data())
