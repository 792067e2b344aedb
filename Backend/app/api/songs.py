import logging
from typing import List, Optional

from fastapi import Depends, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.routing import SpecificityRouter
from app.core.exceptions import NotFoundException, StorageError
from app.schemas.song import FavoriteUpdate, SongCreate, SongResponse
from app.services import catalog_service
from app.services.database import get_db

logger = logging.getLogger(__name__)

router = SpecificityRouter()


@router.get("/songs", response_model=List[SongResponse])
async def list_songs(db: AsyncSession = Depends(get_db)) -> List[SongResponse]:
    """List all songs with their album and the album's artist"""
    try:
        return await catalog_service.list_songs(db)
    except SQLAlchemyError as e:
        logger.error(f"Error listing songs: {str(e)}")
        raise StorageError("Could not load the songs") from e


@router.get("/songs/{song_id}", response_model=SongResponse)
async def get_song(song_id: str, db: AsyncSession = Depends(get_db)) -> SongResponse:
    try:
        song = await catalog_service.get_song(db, song_id)
    except SQLAlchemyError as e:
        logger.error(f"Error fetching song {song_id}: {str(e)}")
        raise StorageError("Could not load the song") from e
    if not song:
        logger.warning(f"Song with ID {song_id} not found")
        raise NotFoundException("Song", song_id)
    return song


@router.get("/songs/by-ids", response_model=List[SongResponse])
async def list_songs_by_ids(ids: Optional[str] = None, db: AsyncSession = Depends(get_db)) -> List[SongResponse]:
    """
    Get several songs at once, e.g. to rebuild a listening history.
    `ids` is a comma separated list; unknown ids are simply left out.
    """
    if not ids:
        return []
    song_ids = [song_id.strip() for song_id in ids.split(",") if song_id.strip()]
    try:
        return await catalog_service.list_songs_by_ids(db, song_ids)
    except SQLAlchemyError as e:
        logger.error(f"Error fetching songs by ids {song_ids}: {str(e)}")
        raise StorageError("Could not load the songs by ids") from e


@router.get("/songs/favorites", response_model=List[SongResponse])
async def list_favorite_songs(db: AsyncSession = Depends(get_db)) -> List[SongResponse]:
    try:
        return await catalog_service.list_favorite_songs(db)
    except SQLAlchemyError as e:
        logger.error(f"Error listing favorite songs: {str(e)}")
        raise StorageError("Could not load the favorite songs") from e


@router.post("/songs", response_model=SongResponse, status_code=status.HTTP_201_CREATED)
async def create_song(song_data: SongCreate, db: AsyncSession = Depends(get_db)) -> SongResponse:
    try:
        return await catalog_service.create_song(db, song_data)
    except SQLAlchemyError as e:
        logger.error(f"Error creating song: {str(e)}")
        raise StorageError("Could not create the song") from e


@router.put("/songs/{song_id}/favorite", response_model=SongResponse)
async def set_song_favorite(song_id: str, favorite_data: FavoriteUpdate, db: AsyncSession = Depends(get_db)) -> SongResponse:
    """Set the song's favorite flag to the value sent by the client"""
    try:
        song = await catalog_service.set_song_favorite(db, song_id, favorite_data.favorite)
    except SQLAlchemyError as e:
        logger.error(f"Error updating favorite for song {song_id}: {str(e)}")
        raise StorageError("Could not update the favorite state") from e
    if not song:
        raise NotFoundException("Song", song_id)
    return song
