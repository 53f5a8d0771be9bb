"""
Reference Handler

Read-only API fundamentals: HTTP methods, status codes and a glossary.
No authentication required.
"""

from typing import Optional

from fastapi import APIRouter, Path, Query

from src.shared.models.enums import StatusCategory
from src.shared.schemas.reference import GlossaryTerm, HttpMethodInfo, StatusCodeInfo
from src.shared.services.reference_service import ReferenceService


router = APIRouter()


@router.get("/http-methods", response_model=list[HttpMethodInfo])
async def list_http_methods():
    return ReferenceService.list_methods()


@router.get("/http-methods/{method}", response_model=HttpMethodInfo)
async def get_http_method(method: str):
    """Look up one HTTP method, case-insensitively."""
    return ReferenceService.get_method(method)


@router.get("/status-codes", response_model=list[StatusCodeInfo])
async def list_status_codes(
    category: Optional[StatusCategory] = Query(None, description="Filter by outcome class"),
):
    return ReferenceService.list_status_codes(category)


@router.get("/status-codes/{code}", response_model=StatusCodeInfo)
async def get_status_code(code: int = Path(..., ge=100, le=599)):
    """
    Raises:
        404: Valid code that is not catalogued
        422: Outside 100..599
    """
    return ReferenceService.get_status_code(code)


@router.get("/glossary", response_model=list[GlossaryTerm])
async def get_glossary():
    return ReferenceService.glossary()
