"""
API v1 router.
"""
from fastapi import APIRouter

from simple_nat.api.v1.endpoints import health, rules, translate

api_router = APIRouter()

# Health check endpoint (no prefix, so it's /api/v1/health)
api_router.include_router(health.router, tags=["health"])

api_router.include_router(rules.router, prefix="/rules", tags=["rules"])
api_router.include_router(translate.router, prefix="/translate", tags=["translate"])
