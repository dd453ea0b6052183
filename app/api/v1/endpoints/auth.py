"""
Authentication endpoints
"""

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session
import structlog

from app.core.database import get_db
from app.core.exceptions import UnauthorizedError
from app.core.validation import read_json, validate
from app.schemas.auth import TokenResponse, UserLogin, UserRegister
from app.services.auth_service import AuthService

router = APIRouter()
logger = structlog.get_logger(__name__)


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
async def register(request: Request, db: Session = Depends(get_db)):
    """Register a user and return a bearer token"""
    user_in = validate(UserRegister, await read_json(request))
    auth_service = AuthService(db)
    user = auth_service.register_user(user_in.username, user_in.email, user_in.password)
    session = auth_service.create_session(user.id)
    return {"token": session.token}


@router.post("/token", response_model=TokenResponse)
async def login(request: Request, db: Session = Depends(get_db)):
    """Exchange username/password for a bearer token"""
    credentials = validate(UserLogin, await read_json(request))
    auth_service = AuthService(db)
    user = auth_service.authenticate(credentials.username, credentials.password)
    if not user:
        raise UnauthorizedError("Invalid username/password")
    session = auth_service.create_session(user.id)
    logger.info("User logged in", username=user.username)
    return {"token": session.token}
