"""
Company management endpoints
"""

import re
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session
import structlog

from app.core.auth import ensure_logged_in
from app.core.database import get_db
from app.core.exceptions import BadRequestError
from app.core.validation import read_json, validate
from app.models.user import User
from app.schemas.company import (
    CompanyDeletedOut,
    CompanyDetailOut,
    CompanyListOut,
    CompanyNew,
    CompanyOut,
    CompanyResponse,
    CompanySearchFilters,
    CompanyUpdate,
    CompanyWithJobsResponse,
)
from app.services.company_service import CompanyService

router = APIRouter()
logger = structlog.get_logger(__name__)

_INTEGER = re.compile(r"\s*[+-]?[0-9]+\s*")
_NUMERIC_FILTERS = ("minEmployees", "maxEmployees")


def _coerce_filters(query: Dict[str, str]) -> Dict[str, Any]:
    """Convert numeric query bounds from text before schema validation"""
    filters: Dict[str, Any] = dict(query)
    for key in _NUMERIC_FILTERS:
        if key in filters:
            raw = filters[key]
            if not _INTEGER.fullmatch(raw):
                raise BadRequestError(f"{key} must be a number.")
            filters[key] = int(raw)
    return filters


@router.post("", response_model=CompanyOut, status_code=status.HTTP_201_CREATED)
async def create_company(
    request: Request,
    current_user: User = Depends(ensure_logged_in),
    db: Session = Depends(get_db)
):
    """
    Create a company

    Body is { handle, name, description?, numEmployees?, logoUrl? }.
    Authorization required: login
    """
    company_in = validate(CompanyNew, await read_json(request))
    company = CompanyService(db).create(company_in.model_dump())
    return {"company": CompanyResponse.model_validate(company)}


@router.get("", response_model=CompanyListOut)
async def get_companies(request: Request, db: Session = Depends(get_db)):
    """
    List companies, optionally filtered by nameLike, minEmployees, maxEmployees

    Authorization required: none
    """
    filters = validate(CompanySearchFilters, _coerce_filters(dict(request.query_params)))
    logger.info("Listing companies", filters=filters.model_dump(exclude_none=True, by_alias=True))

    companies = CompanyService(db).find_all(filters)
    return {"companies": [CompanyResponse.model_validate(c) for c in companies]}


@router.get("/{handle}", response_model=CompanyDetailOut)
async def get_company(handle: str, db: Session = Depends(get_db)):
    """Get company by handle, including its jobs"""
    company = CompanyService(db).get(handle)
    return {"company": CompanyWithJobsResponse.model_validate(company)}


@router.patch("/{handle}", response_model=CompanyOut)
async def update_company(
    handle: str,
    request: Request,
    current_user: User = Depends(ensure_logged_in),
    db: Session = Depends(get_db)
):
    """
    Patch company data

    Fields can be { name, description, numEmployees, logoUrl }; handle is fixed.
    Authorization required: login
    """
    patch = validate(CompanyUpdate, await read_json(request))
    company = CompanyService(db).update(handle, patch.model_dump(exclude_unset=True))
    return {"company": CompanyResponse.model_validate(company)}


@router.delete("/{handle}", response_model=CompanyDeletedOut)
async def delete_company(
    handle: str,
    current_user: User = Depends(ensure_logged_in),
    db: Session = Depends(get_db)
):
    """Delete company. Authorization required: login"""
    CompanyService(db).remove(handle)
    return {"deleted": handle}
