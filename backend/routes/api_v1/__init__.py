"""API v1: clubs, coaches, footballers, stadiums, tournaments and meta endpoints."""

from fastapi import APIRouter

from .clubs import router as clubs_router
from .coaches import router as coaches_router
from .footballers import router as footballers_router
from .meta import router as meta_router
from .stadiums import router as stadiums_router
from .tournaments import router as tournaments_router

router = APIRouter(prefix="/api/v1", tags=["api_v1"])
router.include_router(clubs_router)
router.include_router(coaches_router)
router.include_router(footballers_router)
router.include_router(stadiums_router)
router.include_router(tournaments_router)
router.include_router(meta_router)

api_v1_router = router
