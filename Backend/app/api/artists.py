import logging
from typing import List

from fastapi import Depends, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.routing import SpecificityRouter
from app.core.exceptions import NotFoundException, StorageError
from app.schemas.artist import ArtistCreate, ArtistResponse
from app.schemas.song import SongResponse
from app.services import catalog_service
from app.services.database import get_db

logger = logging.getLogger(__name__)

router = SpecificityRouter()


@router.get("/artists", response_model=List[ArtistResponse])
async def list_artists(db: AsyncSession = Depends(get_db)) -> List[ArtistResponse]:
    try:
        return await catalog_service.list_artists(db)
    except SQLAlchemyError as e:
        logger.error(f"Error listing artists: {str(e)}")
        raise StorageError("Could not load the artists") from e


@router.get("/artists/{artist_id}", response_model=ArtistResponse)
async def get_artist(artist_id: str, db: AsyncSession = Depends(get_db)) -> ArtistResponse:
    try:
        artist = await catalog_service.get_artist(db, artist_id)
    except SQLAlchemyError as e:
        logger.error(f"Error fetching artist {artist_id}: {str(e)}")
        raise StorageError("Could not load the artist") from e
    if not artist:
        logger.warning(f"Artist with ID {artist_id} not found")
        raise NotFoundException("Artist", artist_id)
    return artist


@router.post("/artists", response_model=ArtistResponse, status_code=status.HTTP_201_CREATED)
async def create_artist(artist_data: ArtistCreate, db: AsyncSession = Depends(get_db)) -> ArtistResponse:
    try:
        return await catalog_service.create_artist(db, artist_data)
    except SQLAlchemyError as e:
        logger.error(f"Error creating artist: {str(e)}")
        raise StorageError("Could not create the artist") from e


@router.get("/artists/{artist_id}/songs", response_model=List[SongResponse])
async def list_artist_songs(artist_id: str, db: AsyncSession = Depends(get_db)) -> List[SongResponse]:
    """Songs from every album owned by the artist. An artist without albums yields []."""
    try:
        return await catalog_service.list_songs_by_artist(db, artist_id)
    except SQLAlchemyError as e:
        logger.error(f"Error listing songs for artist {artist_id}: {str(e)}")
        raise StorageError("Could not load the artist's songs") from e
