"""
Shared fixtures for the catalog API tests.

Every test gets its own SQLite file database (aiosqlite) so the three
concurrent search sessions each get a real connection.
"""

from datetime import date

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event

from app.core.config import Settings
from app.models.album import Album
from app.models.artist import Artist
from app.models.genre import Genre
from app.models.song import Song
from app.services.database import Database
from main import create_app


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}",
        _env_file=None,
    )


@pytest.fixture
async def database(settings: Settings) -> Database:
    database = Database(settings)
    await database.create_all()
    yield database
    await database.dispose()


@pytest.fixture
async def client(settings: Settings, database: Database) -> AsyncClient:
    app = create_app(settings)
    # ASGITransport does not run the lifespan, so hand the app its database directly
    app.state.database = database
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
async def catalog(database: Database) -> None:
    """
    Small catalog:
    - "soda" owns two albums, "sosa" owns one, "garcia" owns none
    - genre 1 (Rock) tags both Soda albums, genre 2 (Folk) tags Cantora, genre 3 (Jazz) tags nothing
    - song "loose" has no album
    """
    async with database.session() as session:
        rock = Genre(id=1, name="Rock")
        folk = Genre(id=2, name="Folk")
        jazz = Genre(id=3, name="Jazz")
        session.add_all([rock, folk, jazz])

        session.add_all([
            Artist(id="soda", name="Soda Stereo"),
            Artist(id="sosa", name="Mercedes Sosa"),
            Artist(id="garcia", name="Charly Garcia"),
        ])
        await session.flush()

        session.add_all([
            Album(id="animal", title="Cancion Animal", release_date=date(1990, 8, 7),
                  artist_id="soda", genres=[rock]),
            Album(id="sueno", title="Sueno Stereo", release_date=date(1995, 8, 21),
                  artist_id="soda", genres=[rock]),
            Album(id="cantora", title="Cantora", release_date=date(2009, 4, 1),
                  artist_id="sosa", genres=[folk]),
        ])
        await session.flush()

        session.add_all([
            Song(id="ligera", title="De Musica Ligera", album_id="animal", duration=213),
            Song(id="luz", title="Un Millon de Anos Luz", album_id="animal"),
            Song(id="zoom", title="Zoom", album_id="sueno"),
            Song(id="zamba", title="Zamba para no morir", album_id="cantora", is_favorite=True),
            Song(id="loose", title="Loose Demo"),
        ])


@pytest.fixture
def statements(database: Database) -> list:
    """Records every SQL statement sent to the database while the test runs."""
    recorded = []

    def record(conn, cursor, statement, parameters, context, executemany):
        recorded.append(statement)

    event.listen(database.engine.sync_engine, "before_cursor_execute", record)
    yield recorded
    event.remove(database.engine.sync_engine, "before_cursor_execute", record)
