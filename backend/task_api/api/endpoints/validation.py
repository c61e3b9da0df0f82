"""Parenthesis validation endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, File, HTTPException, UploadFile

from ...analyzers.batch import BatchCaseError, evaluate_batch, evaluate_case
from ...models import BatchRequest, BatchResponse, TestCase, ValidateStringResponse
from ...parsers import get_parser
from ...validators import UnsupportedCharacterError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["validation"])


def _run_batch(cases) -> BatchResponse:
    try:
        batch = evaluate_batch(cases)
    except BatchCaseError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    logger.info(
        "Batch validated: total=%d passed=%d failed=%d",
        batch.summary.total,
        batch.summary.passed,
        batch.summary.failed,
    )
    return BatchResponse(results=batch.results, summary=batch.summary)


@router.post("/validate-string", response_model=ValidateStringResponse)
async def validate_string(payload: TestCase):
    """Validate one string and label it passed or failed."""
    try:
        result = evaluate_case(payload)
    except UnsupportedCharacterError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return ValidateStringResponse(
        test_string=result.test_string,
        description=result.description,
        is_valid=result.is_valid,
        result=result.result,
        message=f"{result.description} {result.result}",
    )


@router.post("/validate-batch", response_model=BatchResponse)
async def validate_batch(payload: BatchRequest):
    """Validate a list of test cases, preserving their order."""
    return _run_batch(payload.test_cases)


@router.post("/validate-batch/upload", response_model=BatchResponse)
async def validate_batch_upload(suite: UploadFile = File(...)):
    """Validate a test suite uploaded as a CSV or YAML file."""
    filename = suite.filename or ""
    try:
        parser = get_parser(filename)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    raw = await suite.read()
    try:
        source = raw.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise HTTPException(status_code=400, detail="Suite file must be UTF-8 encoded.") from exc

    try:
        cases = parser.parse(source)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    logger.info("Parsed %d test cases from %s", len(cases), filename)
    return _run_batch(cases)
