import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.engine import Engine

from app import models  # noqa: F401  registers the jokes table
from app.config import Settings, settings as default_settings
from app.database import JokeStore, create_db_engine
from app.exceptions import JokeServiceError
from app.routers import jokes
from app.services.joke_source import ExternalJokeSource

logger = logging.getLogger(__name__)

PUBLIC_DIR = Path(__file__).resolve().parent.parent / "public"


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.store.open()
    try:
        yield
    finally:
        app.state.store.close()


def create_app(
    settings: Settings | None = None,
    engine: Engine | None = None,
    joke_source: ExternalJokeSource | None = None,
) -> FastAPI:
    settings = settings or default_settings
    app = FastAPI(title=settings.app_name, lifespan=lifespan)

    app.state.settings = settings
    app.state.store = JokeStore(engine or create_db_engine(settings.sqlalchemy_url))
    app.state.joke_source = joke_source or ExternalJokeSource(settings.joke_api_url, settings.joke_api_timeout)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(JokeServiceError)
    async def handle_joke_service_error(request: Request, exc: JokeServiceError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": "Invalid request", "errors": jsonable_encoder(exc.errors())},
        )

    if PUBLIC_DIR.exists():
        app.mount("/static", StaticFiles(directory=PUBLIC_DIR), name="static")

        @app.get("/", include_in_schema=False)
        def serve_index():
            return FileResponse(PUBLIC_DIR / "index.html")

    app.include_router(jokes.router)

    @app.get("/health")
    def health():
        return {"status": "ok", "app": settings.app_name}

    return app


app = create_app()
