"""
Company persistence service
"""

import structlog
from typing import Any, Dict, List, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from app.core.exceptions import BadRequestError, ConflictError, NotFoundError
from app.models.company import Company
from app.models.job import Job  # noqa: F401  (registers Company.jobs target)
from app.schemas.company import CompanySearchFilters

logger = structlog.get_logger(__name__)


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class CompanyService:
    """Service for company storage and lookup"""
    
    def __init__(self, db: Session):
        self.db = db
    
    def create(self, data: Dict[str, Any]) -> Company:
        """
        Create a company
        
        Args:
            data: Column values keyed by model attribute (handle, name, ...)
            
        Returns:
            Created Company
            
        Raises:
            ConflictError: If the handle or name is already taken
        """
        handle = data["handle"]
        if self.db.get(Company, handle) is not None:
            raise ConflictError(f"Duplicate company: {handle}")
        
        company = Company(**data)
        self.db.add(company)
        self._commit(f"Duplicate company: {handle}")
        self.db.refresh(company)
        
        logger.info("Company created", handle=handle)
        return company
    
    def find_all(self, filters: Optional[CompanySearchFilters] = None) -> List[Company]:
        """
        List companies ordered by name, optionally filtered
        
        nameLike matches case-insensitively anywhere in the name;
        employee bounds are inclusive.
        """
        query = self.db.query(Company)
        
        if filters is not None:
            if filters.min_employees is not None and filters.max_employees is not None:
                if filters.min_employees > filters.max_employees:
                    raise BadRequestError("minEmployees cannot be greater than maxEmployees.")
            if filters.name_like:
                pattern = f"%{_escape_like(filters.name_like)}%"
                query = query.filter(Company.name.ilike(pattern, escape="\\"))
            if filters.min_employees is not None:
                query = query.filter(Company.num_employees >= filters.min_employees)
            if filters.max_employees is not None:
                query = query.filter(Company.num_employees <= filters.max_employees)
        
        return query.order_by(Company.name).all()
    
    def get(self, handle: str) -> Company:
        """Get a company with its jobs loaded, or raise NotFoundError"""
        company = (
            self.db.query(Company)
            .options(selectinload(Company.jobs))
            .filter(Company.handle == handle)
            .first()
        )
        if company is None:
            raise NotFoundError(f"No company: {handle}")
        return company
    
    def update(self, handle: str, data: Dict[str, Any]) -> Company:
        """
        Apply a partial update
        
        Only keys present in ``data`` are written; ``None`` clears a nullable column.
        
        Raises:
            BadRequestError: If ``data`` is empty
            NotFoundError: If no company has this handle
            ConflictError: If the new name belongs to another company
        """
        if not data:
            raise BadRequestError("No data")
        
        company = self.db.get(Company, handle)
        if company is None:
            raise NotFoundError(f"No company: {handle}")
        
        for field, value in data.items():
            setattr(company, field, value)
        self._commit(f"Duplicate company name: {data.get('name')}")
        self.db.refresh(company)
        
        logger.info("Company updated", handle=handle, fields=sorted(data))
        return company
    
    def remove(self, handle: str) -> None:
        """Delete a company (and its jobs), or raise NotFoundError"""
        company = self.db.get(Company, handle)
        if company is None:
            raise NotFoundError(f"No company: {handle}")
        
        self.db.delete(company)
        self.db.commit()
        logger.info("Company removed", handle=handle)
    
    def _commit(self, conflict_detail: str) -> None:
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning("Company write rejected", err=str(e.orig))
            raise ConflictError(conflict_detail)
