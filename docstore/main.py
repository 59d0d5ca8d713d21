import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from docstore.api.http import documents_router
from docstore.config import Settings, settings as default_settings
from docstore.domains.documents.services import DocumentService


def create_app(settings: Optional[Settings] = None, service: Optional[DocumentService] = None) -> FastAPI:
    """Сборка приложения с одним хранилищем документов на экземпляр"""
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logging.basicConfig(level=settings.log_level)
        yield

    app = FastAPI(
        title=settings.app_title,
        description="Хранилище документов в памяти с поиском по фильтрам",
        version=settings.app_version,
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.document_service = service or DocumentService()
    app.include_router(documents_router)

    @app.get("/")
    async def root():
        return {
            "message": f"{settings.app_title} API",
            "version": settings.app_version,
            "docs": "/docs"
        }

    return app


app = create_app()
