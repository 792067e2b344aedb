import logging
from typing import Optional

from fastapi import Depends
from sqlalchemy.exc import SQLAlchemyError

from app.api.routing import SpecificityRouter
from app.core.exceptions import BadRequestError, StorageError
from app.schemas.search import SearchResponse
from app.services import catalog_service
from app.services.database import Database, get_database

logger = logging.getLogger(__name__)

router = SpecificityRouter()


@router.get("/search", response_model=SearchResponse)
async def search(query: Optional[str] = None, database: Database = Depends(get_database)) -> SearchResponse:
    """Search artists by name, albums by title and songs by title (case-insensitive)"""
    if not query or not query.strip():
        raise BadRequestError("A search term is required")
    try:
        return await catalog_service.search_catalog(database, query.strip())
    except SQLAlchemyError as e:
        logger.error(f"Error searching the catalog for '{query}': {str(e)}")
        raise StorageError("Could not complete the search") from e
