"""Main router for API v1."""

from fastapi import APIRouter

from repeater.api.v1 import generate, health, options, styles

router = APIRouter(prefix="/v1")

# Include sub-routers
router.include_router(health.router, tags=["health"])
router.include_router(generate.router, prefix="/generate", tags=["generate"])
router.include_router(styles.router, prefix="/styles", tags=["styles"])
router.include_router(options.router, prefix="/options", tags=["options"])
