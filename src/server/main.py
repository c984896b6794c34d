"""FastAPI entrypoint."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pdfgen.config import settings as engine_settings
from pdfgen.engine import PdfEngine
from pdfgen.logging_utils import configure_logging
from pdfgen.template import TemplateBinder

from server.config import settings
from server.conversion.router import router as conversion_router
from server.exceptions import AppError
from server.web.router import router as web_router

logger = logging.getLogger(__name__)


def create_app(engine: PdfEngine | None = None) -> FastAPI:
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.engine = engine or PdfEngine(binder=TemplateBinder(engine_settings.template_dir))
        logger.info("%s started (%s)", settings.app_name, settings.environment)
        try:
            yield
        finally:
            await app.state.engine.close()
            logger.info("%s stopped", settings.app_name)

    app = FastAPI(title=settings.app_name, version=settings.version, lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(AppError)
    async def app_error_handler(_, exc: AppError):
        content = {"error": exc.code, "message": exc.message}
        if exc.details:
            content["details"] = exc.details
        return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)

    @app.get("/health")
    async def health_check():
        return {"status": "ok", "environment": settings.environment, "version": settings.version}

    app.include_router(web_router)
    app.include_router(conversion_router, prefix=settings.api_prefix)
    return app


app = create_app()
