import logging
from contextlib import asynccontextmanager

import requests
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app import schemas
from app.config import Settings, settings as default_settings
from app.core.exceptions import JokeServiceError
from app.core.http import create_http_session
from app.core.logger import setup_logger
from app.routers import jokes
from app.services.jokes import JokeClient

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    if app.state.owns_session:
        app.state.http_session.close()


def create_app(settings: Settings | None = None, session: requests.Session | None = None) -> FastAPI:
    settings = settings or default_settings
    setup_logger(settings.log_level)

    app = FastAPI(title=settings.app_name, lifespan=lifespan)

    app.state.owns_session = session is None
    app.state.http_session = session or create_http_session(settings)
    app.state.joke_client = JokeClient(
        app.state.http_session,
        url=settings.joke_api_url,
        timeout=settings.joke_api_timeout,
    )

    @app.exception_handler(JokeServiceError)
    async def handle_joke_service_error(request: Request, exc: JokeServiceError):
        logger.warning("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})

    app.include_router(jokes.router)

    @app.get("/health", response_model=schemas.HealthResponse)
    def health():
        return {"status": "ok", "app": settings.app_name}

    return app


app = create_app()
