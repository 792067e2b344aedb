from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from app.api import albums, artists, genres, search, songs
from app.core.config import Settings, get_settings
from app.core.exceptions import CatalogException
from app.services.database import Database, get_database
import traceback
import logging
import uvicorn # For running programmatically


logger = logging.getLogger("app")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    # Configure logging
    logging.basicConfig(level=settings.LOG_LEVEL)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # The database handle lives exactly as long as the process serves requests
        database = Database(settings)
        if settings.CREATE_TABLES_ON_STARTUP:
            await database.create_all()
        app.state.database = database
        logger.info("Database engine created")
        try:
            yield
        finally:
            await database.dispose()

    app = FastAPI(title="Rondo Catalog API", debug=settings.DEBUG, lifespan=lifespan)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(CatalogException)
    async def catalog_exception_handler(request: Request, exc: CatalogException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=exc.headers,
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        error_detail = traceback.format_exc()
        logger.error(f"Unhandled exception: {str(exc)}\n{error_detail}")
        content = {"error": "Internal server error"}
        if settings.DEBUG:
            content["detail"] = error_detail
            content["path"] = request.url.path
        return JSONResponse(status_code=500, content=content)

    # Include routes
    app.include_router(songs.router, prefix="/catalog", tags=["songs"])
    app.include_router(artists.router, prefix="/catalog", tags=["artists"])
    app.include_router(albums.router, prefix="/catalog", tags=["albums"])
    app.include_router(genres.router, prefix="/catalog", tags=["genres"])
    app.include_router(search.router, prefix="/catalog", tags=["search"])

    @app.get("/")
    async def root():
        return {"message": "Welcome to Rondo Catalog API"}

    @app.get("/health")
    async def health(database: Database = Depends(get_database)):
        try:
            await database.ping()
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"Database health check failed: {str(e)}")
            return JSONResponse(status_code=503, content={"status": "unavailable"})
        return {"status": "ok"}

    return app


app = create_app()


if __name__ == "__main__":
    # Use 0.0.0.0 and PORT from the environment so the same entry point works when deployed
    uvicorn.run("main:app", host="0.0.0.0", port=get_settings().PORT, log_level="info")
