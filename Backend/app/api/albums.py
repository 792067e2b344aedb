import logging
from typing import List

from fastapi import Depends, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.routing import SpecificityRouter
from app.core.exceptions import NotFoundException, StorageError
from app.schemas.album import AlbumCreate, AlbumDetailResponse, AlbumResponse
from app.schemas.song import SongResponse
from app.services import catalog_service
from app.services.database import get_db

logger = logging.getLogger(__name__)

router = SpecificityRouter()


@router.get("/albums", response_model=List[AlbumResponse])
async def list_albums(db: AsyncSession = Depends(get_db)) -> List[AlbumResponse]:
    """List all albums with their artist"""
    try:
        return await catalog_service.list_albums(db)
    except SQLAlchemyError as e:
        logger.error(f"Error listing albums: {str(e)}")
        raise StorageError("Could not load the albums") from e


@router.get("/albums/{album_id}", response_model=AlbumDetailResponse)
async def get_album(album_id: str, db: AsyncSession = Depends(get_db)) -> AlbumDetailResponse:
    """Get one album with its artist, songs and genres"""
    try:
        album = await catalog_service.get_album(db, album_id)
    except SQLAlchemyError as e:
        logger.error(f"Error fetching album {album_id}: {str(e)}")
        raise StorageError("Could not load the album") from e
    if not album:
        logger.warning(f"Album with ID {album_id} not found")
        raise NotFoundException("Album", album_id)
    return album


@router.post("/albums", response_model=AlbumDetailResponse, status_code=status.HTTP_201_CREATED)
async def create_album(album_data: AlbumCreate, db: AsyncSession = Depends(get_db)) -> AlbumDetailResponse:
    try:
        return await catalog_service.create_album(db, album_data)
    except SQLAlchemyError as e:
        logger.error(f"Error creating album: {str(e)}")
        raise StorageError("Could not create the album") from e


@router.get("/albums/{album_id}/songs", response_model=List[SongResponse])
async def list_album_songs(album_id: str, db: AsyncSession = Depends(get_db)) -> List[SongResponse]:
    try:
        return await catalog_service.list_songs_by_album(db, album_id)
    except SQLAlchemyError as e:
        logger.error(f"Error listing songs for album {album_id}: {str(e)}")
        raise StorageError("Could not load the album's songs") from e
