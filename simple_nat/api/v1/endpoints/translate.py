"""
Translation query endpoints.

Every translation outcome (ok, invalid, no_match) is returned with HTTP 200;
the status field carries the result. HTTP errors are reserved for requests the
service refuses to process (oversized batches or uploads, undecodable files).
"""
import io
import logging
from typing import List
from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status

from simple_nat.core.config import settings
from simple_nat.core.table_state import get_translation_table
from simple_nat.schemas.translation import (
    BatchTranslateRequest,
    FlowUploadResponse,
    TranslateRequest,
    TranslationResult,
    TranslationResponse,
)
from simple_nat.services.batch_service import BatchTranslator, format_result
from simple_nat.services.translation_service import TranslationTable

logger = logging.getLogger(__name__)

router = APIRouter()


def _to_response(result: TranslationResult) -> TranslationResponse:
    return TranslationResponse(
        query=result.query,
        status=result.status,
        destination=result.destination,
        matched_key=result.matched_key,
        message=format_result(result),
    )


@router.post("", response_model=TranslationResponse)
async def translate_query(
    payload: TranslateRequest,
    table: TranslationTable = Depends(get_translation_table),
):
    """Translate a single concrete '<address>:<port>' query."""
    result = table.translate(payload.query)
    logger.info(f"Translate: query={result.query}, status={result.status.value}")
    return _to_response(result)


@router.post("/batch", response_model=List[TranslationResponse])
async def translate_batch(
    payload: BatchTranslateRequest,
    table: TranslationTable = Depends(get_translation_table),
):
    """
    Translate a list of queries in order.

    Empty queries are skipped and produce no entry in the response.
    """
    if len(payload.queries) > settings.MAX_BATCH_SIZE:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Batch exceeds maximum of {settings.MAX_BATCH_SIZE} queries"
        )

    results = BatchTranslator(table).process_flows(payload.queries)
    logger.info(f"Batch translate: submitted={len(payload.queries)}, processed={len(results)}")
    return [_to_response(result) for result in results]


@router.post("/upload", response_model=FlowUploadResponse)
async def translate_flow_file(
    file: UploadFile = File(...),
    table: TranslationTable = Depends(get_translation_table),
):
    """
    Translate an uploaded flow file (one query per line).

    Returns the lines the batch driver would write to its output file.
    """
    content = await file.read()

    if len(content) > settings.MAX_UPLOAD_SIZE:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"File size exceeds maximum allowed size of {settings.MAX_UPLOAD_SIZE} bytes"
        )

    try:
        text = content.decode("utf-8")
    except UnicodeDecodeError:
        logger.warning(f"Rejected flow upload {file.filename!r}: not valid UTF-8")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Flow file must be UTF-8 text"
        )

    results = BatchTranslator(table).process_flows(io.StringIO(text, newline="\n"))
    lines = [format_result(result) for result in results]
    logger.info(f"Flow upload translated: filename={file.filename}, queries={len(lines)}")

    return FlowUploadResponse(filename=file.filename or "", total=len(lines), lines=lines)
