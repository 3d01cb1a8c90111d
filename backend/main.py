"""
Dossier Directory - FastAPI Backend
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.dossiers import router as dossiers_router
from config import BackendConfig, Settings, create_dossier_backend, get_settings
from middleware.auth import Authenticator, SharedSecretAuthenticator
from repositories.dossier_repository import DossierRepository
from services.dossier_backend import DossierBackend
from services.query_resolver import QueryResolver
from services.summarizer import ArchiveSummarizer, Summarizer

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    backend: Optional[DossierBackend] = None,
    summarizer: Optional[Summarizer] = None,
    authenticator: Optional[Authenticator] = None,
) -> FastAPI:
    """
    Build the application.

    Backend, summarizer and authenticator are chosen once here and shared by
    every request. Missing configuration selects demo-mode collaborators.
    """
    settings = settings or get_settings()
    backend = backend or create_dossier_backend(BackendConfig.from_settings(settings))
    summarizer = summarizer or ArchiveSummarizer(
        api_key=settings.openai_api_key,
        model=settings.summary_model,
        temperature=settings.summary_temperature,
    )
    authenticator = authenticator or SharedSecretAuthenticator(settings.admin_secret)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        await backend.close()

    app = FastAPI(
        title="Dossier Directory",
        description="Localized directory of people and organizations",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.repository = DossierRepository(backend, language=settings.default_language)
    app.state.resolver = QueryResolver(summarizer)
    app.state.authenticator = authenticator

    # Enable CORS for webapp
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(dossiers_router)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    @app.get("/api/health")
    async def api_health():
        return {
            "status": "ok",
            "service": "dossier-directory",
            "mode": "live" if backend.is_configured else "demo",
        }

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
