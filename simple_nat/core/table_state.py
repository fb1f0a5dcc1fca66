"""
Translation table lifecycle for the HTTP service.

The table is built once during application startup and then only read by
request handlers.
"""
import logging
from pathlib import Path
from typing import Optional

from fastapi import HTTPException, Request, status

from simple_nat.core.config import settings
from simple_nat.services.batch_service import BatchTranslator
from simple_nat.services.translation_service import TranslationTable

logger = logging.getLogger(__name__)


def build_table(rules_file: Optional[str] = None) -> TranslationTable:
    """
    Build a translation table from the configured rule file.

    A missing rule file yields an empty table so the service can still start
    and report rules_loaded=0 from the health endpoint.
    """
    path = Path(rules_file or settings.RULES_FILE)
    translator = BatchTranslator()
    if not path.exists():
        logger.warning(f"Rule file {path} not found, starting with an empty translation table")
        return translator.table

    translator.load_rules_file(path)
    return translator.table


def get_translation_table(request: Request) -> TranslationTable:
    """Dependency returning the table owned by the running application."""
    table = getattr(request.app.state, "translation_table", None)
    if table is None:
        # Only the lifespan hook builds the table; requests never load rules
        logger.error("Translation table requested before startup loaded it")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Translation table not loaded"
        )
    return table
