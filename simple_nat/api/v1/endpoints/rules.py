"""
Read-only listing of the rules loaded into the translation table.
"""
import logging
from fastapi import APIRouter, Depends

from simple_nat.core.table_state import get_translation_table
from simple_nat.schemas.translation import RuleListItem, RuleListResponse
from simple_nat.services.translation_service import TranslationTable

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=RuleListResponse)
async def list_rules(table: TranslationTable = Depends(get_translation_table)):
    """
    List loaded rules sorted by source key.

    Rules are loaded from the rule file at startup; there is no endpoint for
    adding or changing them.
    """
    items = [
        RuleListItem(source=source, destination=destination)
        for source, destination in sorted(table.items())
    ]
    return RuleListResponse(items=items, total=len(items))
