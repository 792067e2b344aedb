import logging
from typing import List, Optional

from fastapi import Depends, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.routing import SpecificityRouter
from app.core.exceptions import NotFoundException, StorageError
from app.schemas.genre import GenreCreate, GenreResponse
from app.schemas.song import SongResponse
from app.services import catalog_service
from app.services.database import get_db

logger = logging.getLogger(__name__)

router = SpecificityRouter()


# Genre.id is a signed 32-bit INTEGER column
GENRE_ID_MIN = -2**31
GENRE_ID_MAX = 2**31 - 1


def parse_genre_id(raw_id: str) -> Optional[int]:
    """Genre ids are 32-bit integers; anything else can never match a row."""
    try:
        genre_id = int(raw_id)
    except ValueError:
        return None
    if not GENRE_ID_MIN <= genre_id <= GENRE_ID_MAX:
        return None
    return genre_id


@router.get("/genres", response_model=List[GenreResponse])
async def list_genres(db: AsyncSession = Depends(get_db)) -> List[GenreResponse]:
    try:
        return await catalog_service.list_genres(db)
    except SQLAlchemyError as e:
        logger.error(f"Error listing genres: {str(e)}")
        raise StorageError("Could not load the genres") from e


@router.get("/genres/{genre_id}", response_model=GenreResponse)
async def get_genre(genre_id: str, db: AsyncSession = Depends(get_db)) -> GenreResponse:
    parsed_id = parse_genre_id(genre_id)
    genre = None
    if parsed_id is not None:
        try:
            genre = await catalog_service.get_genre(db, parsed_id)
        except SQLAlchemyError as e:
            logger.error(f"Error fetching genre {genre_id}: {str(e)}")
            raise StorageError("Could not load the genre") from e
    if not genre:
        logger.warning(f"Genre with ID {genre_id} not found")
        raise NotFoundException("Genre", genre_id)
    return genre


@router.post("/genres", response_model=GenreResponse, status_code=status.HTTP_201_CREATED)
async def create_genre(genre_data: GenreCreate, db: AsyncSession = Depends(get_db)) -> GenreResponse:
    try:
        return await catalog_service.create_genre(db, genre_data)
    except SQLAlchemyError as e:
        logger.error(f"Error creating genre: {str(e)}")
        raise StorageError("Could not create the genre") from e


@router.get("/genres/{genre_id}/songs", response_model=List[SongResponse])
async def list_genre_songs(genre_id: str, db: AsyncSession = Depends(get_db)) -> List[SongResponse]:
    """Songs on every album tagged with the genre"""
    parsed_id = parse_genre_id(genre_id)
    if parsed_id is None:
        return []
    try:
        return await catalog_service.list_songs_by_genre(db, parsed_id)
    except SQLAlchemyError as e:
        logger.error(f"Error listing songs for genre {genre_id}: {str(e)}")
        raise StorageError("Could not load the genre's songs") from e
