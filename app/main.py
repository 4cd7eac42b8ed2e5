from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging

from app.core.config import settings
from app.core.database import Database
from app.middleware.error_handler import register_exception_handlers
from app.middleware.logging import configure_logging
from app.services.upload_service import UploadStorage
from app.api.v1 import api_router, files_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    logger.info("Démarrage de l'application...")

    database = Database(settings.DATABASE_URL).connect()
    database.create_all()
    app.state.database = database

    UploadStorage(settings.UPLOAD_DIR).ensure_directory()
    logger.info(f"Uploads stored in {settings.UPLOAD_DIR}")

    yield

    logger.info("Arrêt de l'application...")
    database.dispose()


app = FastAPI(title=settings.APP_NAME, version=settings.VERSION, lifespan=lifespan)


app.add_middleware(
    CORSMiddleware,
    allow_origin_regex=settings.ALLOWED_ORIGIN_REGEX,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

register_exception_handlers(app)

app.include_router(api_router)
app.include_router(files_router)


@app.get("/")
async def root():
    return {"message": settings.APP_NAME, "version": settings.VERSION, "docs": "/docs"}


@app.get("/health")
async def health_check():
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
