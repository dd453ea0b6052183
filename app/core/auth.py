"""
Authentication dependencies
"""

from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.exceptions import UnauthorizedError
from app.models.user import User
from app.services.auth_service import AuthService

# HTTP Bearer security scheme
security = HTTPBearer(auto_error=False)


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db)
) -> Optional[User]:
    """
    Get current user from the Authorization header or session cookie
    
    Returns:
        User object if authenticated, None otherwise
    """
    token = None
    if credentials:
        token = credentials.credentials
    else:
        token = request.cookies.get("session_token")
    
    if not token:
        return None
    return AuthService(db).validate_session(token)


async def ensure_logged_in(
    current_user: Optional[User] = Depends(get_current_user)
) -> User:
    """Require authentication: return User or raise 401"""
    if current_user is None:
        raise UnauthorizedError("Authentication required")
    return current_user
