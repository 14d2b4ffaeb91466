import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from core.config import get_settings
from core.database import init_database, dispose_database, get_database_manager
from core.errors import StorageFault
from core.logging import setup_logging
from routes.api_v1 import api_v1_router

settings = get_settings()
setup_logging(settings)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name)

app.include_router(api_v1_router)


@app.exception_handler(StorageFault)
async def storage_fault_handler(request: Request, exc: StorageFault) -> JSONResponse:
    """Unrecovered storage faults (including exhausted retries) are server errors."""
    logger.error("Storage fault on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": "Storage failure"})


@app.on_event("startup")
async def on_startup() -> None:
    """Application startup hook."""
    await init_database(settings.database_url)
    await get_database_manager().create_all()
    logger.info("Application startup complete")


@app.on_event("shutdown")
async def on_shutdown() -> None:
    """Application shutdown hook."""
    await dispose_database()
    logger.info("Application shutdown complete")


@app.get("/health")
async def health() -> dict:
    """Simple health check endpoint."""
    return {"status": "ok"}
