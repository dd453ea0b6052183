"""
HTTP error types raised by routes and services
"""

from typing import List, Union

from fastapi import HTTPException, status


class BadRequestError(HTTPException):
    """Input failed shape/type checks; detail is a message or list of messages"""

    def __init__(self, detail: Union[str, List[str]] = "Bad Request"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class UnauthorizedError(HTTPException):
    """Caller lacks valid credentials"""

    def __init__(self, detail: str = "Unauthorized"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class NotFoundError(HTTPException):
    """Referenced record does not exist"""

    def __init__(self, detail: str = "Not Found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class ConflictError(HTTPException):
    """Record collides with an existing unique key"""

    def __init__(self, detail: str = "Conflict"):
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)
