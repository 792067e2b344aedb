from fastapi import HTTPException
from typing import Any, Dict, Optional

class CatalogException(HTTPException):
    """Base exception for the catalog API"""
    def __init__(
        self,
        status_code: int,
        detail: str,
        headers: Optional[Dict[str, Any]] = None
    ):
        super().__init__(status_code=status_code, detail=detail, headers=headers)

class NotFoundException(CatalogException):
    """Resource not found"""
    def __init__(self, resource: str, resource_id: Any):
        super().__init__(
            status_code=404,
            detail=f"{resource} with id {resource_id} not found"
        )

class BadRequestError(CatalogException):
    """Request is missing something the handler needs"""
    def __init__(self, message: str):
        super().__init__(status_code=400, detail=message)

class DuplicateError(CatalogException):
    """Resource already exists"""
    def __init__(self, field: str, value: Any):
        super().__init__(
            status_code=400,
            detail=f"{field} '{value}' already exists"
        )

class StorageError(CatalogException):
    """The database failed while serving the request"""
    def __init__(self, message: str):
        super().__init__(status_code=500, detail=message)
