"""Pydantic schemas."""
from simple_nat.schemas.translation import (
    TranslationStatus,
    RuleResult,
    TranslationResult,
    TranslateRequest,
    BatchTranslateRequest,
    TranslationResponse,
    RuleListItem,
    RuleListResponse,
    FlowUploadResponse,
)

__all__ = [
    "TranslationStatus",
    "RuleResult",
    "TranslationResult",
    "TranslateRequest",
    "BatchTranslateRequest",
    "TranslationResponse",
    "RuleListItem",
    "RuleListResponse",
    "FlowUploadResponse",
]
