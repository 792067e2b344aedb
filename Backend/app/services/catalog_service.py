import asyncio
import logging
from typing import Iterable, Sequence

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload

from app.core.exceptions import DuplicateError, NotFoundException
from app.models.album import Album
from app.models.album_genre import album_genre
from app.models.artist import Artist
from app.models.genre import Genre
from app.models.song import Song
from app.schemas.album import AlbumCreate
from app.schemas.artist import ArtistCreate
from app.schemas.genre import GenreCreate
from app.schemas.song import SongCreate
from app.services.database import Database

logger = logging.getLogger(__name__)


def _songs_with_album():
    """Base song query, eager-loading album -> artist for the nested response."""
    return (
        select(Song)
        .options(selectinload(Song.album).selectinload(Album.artist))
        .order_by(Song.title, Song.id)
    )


def _albums_with_artist():
    return select(Album).options(selectinload(Album.artist)).order_by(Album.title, Album.id)


# --- Songs ---

async def list_songs(db: AsyncSession) -> Sequence[Song]:
    result = await db.execute(_songs_with_album())
    return result.scalars().all()


async def list_songs_by_ids(db: AsyncSession, song_ids: Iterable[str]) -> Sequence[Song]:
    song_ids = [song_id for song_id in song_ids if song_id]
    if not song_ids:
        return []
    result = await db.execute(_songs_with_album().where(Song.id.in_(song_ids)))
    return result.scalars().all()


async def list_favorite_songs(db: AsyncSession) -> Sequence[Song]:
    result = await db.execute(_songs_with_album().where(Song.is_favorite == True))
    return result.scalars().all()


async def get_song(db: AsyncSession, song_id: str) -> Song | None:
    result = await db.execute(
        _songs_with_album()
        .where(Song.id == song_id)
        .execution_options(populate_existing=True)
    )
    return result.scalar_one_or_none()


async def create_song(db: AsyncSession, song_data: SongCreate) -> Song:
    if song_data.id and await db.get(Song, song_data.id):
        raise DuplicateError("Song", song_data.id)

    song = Song(**song_data.model_dump(exclude_none=True))
    db.add(song)
    await db.commit()
    logger.info(f"Created song {song.id} ('{song.title}')")
    return await get_song(db, song.id)


async def set_song_favorite(db: AsyncSession, song_id: str, favorite: bool) -> Song | None:
    """Set the favorite flag to the given value. Returns None when the song does not exist."""
    song = await db.get(Song, song_id)
    if song is None:
        return None
    song.is_favorite = favorite
    await db.commit()
    logger.info(f"Song {song_id} favorite set to {favorite}")
    return await get_song(db, song_id)


# --- Artists ---

async def list_artists(db: AsyncSession) -> Sequence[Artist]:
    result = await db.execute(select(Artist).order_by(Artist.name, Artist.id))
    return result.scalars().all()


async def get_artist(db: AsyncSession, artist_id: str) -> Artist | None:
    return await db.get(Artist, artist_id)


async def create_artist(db: AsyncSession, artist_data: ArtistCreate) -> Artist:
    if artist_data.id and await db.get(Artist, artist_data.id):
        raise DuplicateError("Artist", artist_data.id)

    artist = Artist(**artist_data.model_dump(exclude_none=True))
    db.add(artist)
    await db.commit()
    await db.refresh(artist)
    logger.info(f"Created artist {artist.id} ('{artist.name}')")
    return artist


async def list_songs_by_artist(db: AsyncSession, artist_id: str) -> Sequence[Song]:
    """All songs on albums owned by the artist, resolved with a single join."""
    result = await db.execute(
        _songs_with_album().join(Song.album).where(Album.artist_id == artist_id)
    )
    return result.scalars().all()


# --- Albums ---

async def list_albums(db: AsyncSession) -> Sequence[Album]:
    result = await db.execute(_albums_with_artist())
    return result.scalars().all()


async def get_album(db: AsyncSession, album_id: str) -> Album | None:
    """Fetch one album with its artist, songs and genres."""
    result = await db.execute(
        select(Album)
        .options(
            selectinload(Album.artist),
            selectinload(Album.songs),
            selectinload(Album.genres),
        )
        .where(Album.id == album_id)
        .execution_options(populate_existing=True)
    )
    return result.scalar_one_or_none()


async def create_album(db: AsyncSession, album_data: AlbumCreate) -> Album:
    if album_data.id and await db.get(Album, album_data.id):
        raise DuplicateError("Album", album_data.id)

    genres = []
    if album_data.genre_ids:
        wanted = set(album_data.genre_ids)
        result = await db.execute(select(Genre).where(Genre.id.in_(wanted)))
        genres = list(result.scalars().all())
        missing = wanted - {genre.id for genre in genres}
        if missing:
            raise NotFoundException("Genre", min(missing))

    album = Album(**album_data.model_dump(exclude_none=True, exclude={"genre_ids"}))
    album.genres = genres
    db.add(album)
    await db.commit()
    logger.info(f"Created album {album.id} ('{album.title}') with {len(genres)} genres")
    return await get_album(db, album.id)


async def list_songs_by_album(db: AsyncSession, album_id: str) -> Sequence[Song]:
    result = await db.execute(_songs_with_album().where(Song.album_id == album_id))
    return result.scalars().all()


# --- Genres ---

async def list_genres(db: AsyncSession) -> Sequence[Genre]:
    result = await db.execute(select(Genre).order_by(Genre.name, Genre.id))
    return result.scalars().all()


async def get_genre(db: AsyncSession, genre_id: int) -> Genre | None:
    return await db.get(Genre, genre_id)


async def create_genre(db: AsyncSession, genre_data: GenreCreate) -> Genre:
    if genre_data.id and await db.get(Genre, genre_data.id):
        raise DuplicateError("Genre", genre_data.id)
    result = await db.execute(select(Genre).where(Genre.name == genre_data.name))
    if result.scalar_one_or_none():
        raise DuplicateError("Genre name", genre_data.name)

    genre = Genre(**genre_data.model_dump(exclude_none=True))
    db.add(genre)
    await db.commit()
    await db.refresh(genre)
    logger.info(f"Created genre {genre.id} ('{genre.name}')")
    return genre


async def list_songs_by_genre(db: AsyncSession, genre_id: int) -> Sequence[Song]:
    """All songs on albums tagged with the genre, resolved with a single join."""
    result = await db.execute(
        _songs_with_album()
        .join(album_genre, album_genre.c.album_id == Song.album_id)
        .where(album_genre.c.genre_id == genre_id)
    )
    return result.scalars().all()


# --- Search ---

async def _search_artists(database: Database, term: str) -> Sequence[Artist]:
    async with database.session() as db:
        result = await db.execute(
            select(Artist)
            .where(Artist.name.icontains(term, autoescape=True))
            .order_by(Artist.name, Artist.id)
        )
        return result.scalars().all()


async def _search_albums(database: Database, term: str) -> Sequence[Album]:
    async with database.session() as db:
        result = await db.execute(
            _albums_with_artist().where(Album.title.icontains(term, autoescape=True))
        )
        return result.scalars().all()


async def _search_songs(database: Database, term: str) -> Sequence[Song]:
    async with database.session() as db:
        result = await db.execute(
            _songs_with_album().where(Song.title.icontains(term, autoescape=True))
        )
        return result.scalars().all()


async def search_catalog(database: Database, term: str) -> dict:
    """
    Case-insensitive substring search over artist names, album titles and song titles.
    The three lookups run concurrently, each on its own session.
    """
    artists, albums, songs = await asyncio.gather(
        _search_artists(database, term),
        _search_albums(database, term),
        _search_songs(database, term),
    )
    logger.debug(f"Search '{term}': {len(artists)} artists, {len(albums)} albums, {len(songs)} songs")
    return {"artists": artists, "albums": albums, "songs": songs}
