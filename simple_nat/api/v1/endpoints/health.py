"""
Health check endpoint for monitoring and diagnostics.
"""
import logging
from fastapi import APIRouter, Depends

from simple_nat.core.config import settings
from simple_nat.core.table_state import get_translation_table
from simple_nat.services.translation_service import TranslationTable

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
async def health_check(table: TranslationTable = Depends(get_translation_table)):
    """
    Health check endpoint that reports:
    - API is running
    - Number of rules loaded into the translation table

    Returns:
        {
            "ok": true,
            "rules_loaded": 3,
            "environment": "local"
        }
    """
    return {
        "ok": True,
        "rules_loaded": len(table),
        "environment": settings.APP_ENV,
    }
