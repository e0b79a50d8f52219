import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from .api.routes.assets import router as assets_router
from .api.routes.categories import router as categories_router
from .api.routes.depreciation import router as depreciation_router
from .api.routes.export import router as export_router
from .config import get_settings
from .logging_config import configure_logging
from .services.register import RegisterStorageError

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Build FastAPI instance with registered routers."""
    configure_logging(get_settings().log_level)

    app = FastAPI(
        title="Assetbook API",
        version="0.1.0",
        description="Fixed-asset depreciation schedules, asset register and schedule exports.",
    )

    app.include_router(depreciation_router, prefix="/depreciation", tags=["Depreciation"])
    app.include_router(categories_router, prefix="/categories", tags=["Asset Categories"])
    app.include_router(assets_router, prefix="/assets", tags=["Asset Register"])
    app.include_router(export_router, prefix="/export", tags=["Export"])

    @app.exception_handler(RegisterStorageError)
    async def handle_storage_error(request: Request, exc: RegisterStorageError) -> JSONResponse:
        logger.error("Register storage failure on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"detail": str(exc)})

    @app.get("/health", tags=["Health"])
    def health_check() -> dict[str, str]:
        """Simple readiness check endpoint."""
        return {"status": "ok"}

    return app


app = create_app()
