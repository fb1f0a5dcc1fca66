"""Schemas for rule definition and translation results."""
import enum
from typing import List, Optional
from pydantic import BaseModel, Field


class TranslationStatus(str, enum.Enum):
    """Outcome of a table operation."""
    OK = "ok"
    INVALID = "invalid"
    NO_MATCH = "no_match"


class RuleResult(BaseModel):
    """Result of defining one rule."""
    status: TranslationStatus
    rule: str
    reason: Optional[str] = None  # set when status is INVALID

    @property
    def ok(self) -> bool:
        return self.status == TranslationStatus.OK


class TranslationResult(BaseModel):
    """Result of translating one query."""
    status: TranslationStatus
    query: str
    destination: Optional[str] = None
    matched_key: Optional[str] = None  # table key that produced the destination

    @property
    def ok(self) -> bool:
        return self.status == TranslationStatus.OK


# API schemas

class TranslateRequest(BaseModel):
    """Request body for a single translation."""
    query: str = Field(..., description="Concrete endpoint, e.g. 10.0.1.1:8080")


class BatchTranslateRequest(BaseModel):
    """Request body for batch translation."""
    queries: List[str]


class TranslationResponse(BaseModel):
    """Response schema for one translated query."""
    query: str
    status: TranslationStatus
    destination: Optional[str] = None
    matched_key: Optional[str] = None
    message: str  # same text the batch driver writes to its output file


class RuleListItem(BaseModel):
    """A loaded rule."""
    source: str
    destination: str


class RuleListResponse(BaseModel):
    """Response schema for the rule listing endpoint."""
    items: List[RuleListItem]
    total: int


class FlowUploadResponse(BaseModel):
    """Response schema for an uploaded flow file."""
    filename: str
    total: int
    lines: List[str]
