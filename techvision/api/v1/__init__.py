"""Site API routes."""

from fastapi import APIRouter

from techvision.api.v1 import auth, contact, content, health

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, tags=["auth"])
router.include_router(content.router, tags=["content"])
router.include_router(contact.router, tags=["contact"])
