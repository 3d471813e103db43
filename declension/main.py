from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from declension import __version__
from declension.api import inflection, languages
from declension.core.config import Settings, get_settings
from declension.core.errors.handlers import register_error_handlers
from declension.core.logging import api_logger, configure_logging
from declension.core.middleware import CORRELATION_HEADER, CorrelationMiddleware
from declension.facade import Declension
from declension.languages.registry import build_registry

log = api_logger()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the HTTP app; logging is configured and the registry frozen before the first request."""
    settings = settings or get_settings()
    configure_logging(level=settings.LOG_LEVEL, json_logs=settings.LOG_JSON)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        log.info("startup", languages=app.state.registry.codes(), default_policy=settings.DEFAULT_POLICY)
        yield
        log.info("shutdown")

    app = FastAPI(
        title="Declension API",
        description="Rule-based case inflection of Russian and Kazakh words, names and phrases",
        version=__version__,
        lifespan=lifespan,
    )

    registry = build_registry(settings)
    app.state.registry = registry
    app.state.declension = Declension(registry, default_policy=settings.DEFAULT_POLICY)

    register_error_handlers(app)

    app.add_middleware(CorrelationMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
        expose_headers=[CORRELATION_HEADER],
    )

    app.include_router(inflection.router, prefix="/api/inflect", tags=["inflection"])
    app.include_router(languages.router, prefix="/api/languages", tags=["languages"])

    @app.get("/health")
    async def health_check():
        return {"status": "healthy", "version": __version__}

    return app


def run() -> None:
    import uvicorn

    settings = get_settings()
    configure_logging(level=settings.LOG_LEVEL, json_logs=settings.LOG_JSON)
    log.info("server_config", host=settings.HOST, port=settings.PORT, reload=settings.APP_DEBUG)
    uvicorn.run(
        "declension.main:create_app",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.APP_DEBUG,
        log_config=None,  # create_app installs our handlers
    )


if __name__ == "__main__":
    run()
