"""
Authentication service for user management and sessions
"""

import secrets
from datetime import timedelta
from typing import Optional

import bcrypt
import structlog
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.exceptions import ConflictError
from app.models.user import User, Session as UserSession
from app.utils.datetime_utils import utc_now

logger = structlog.get_logger(__name__)


class AuthService:
    """Service for user authentication and session management"""
    
    def __init__(self, db: Session):
        self.db = db
        self.session_duration_hours = settings.SESSION_DURATION_HOURS
    
    def register_user(self, username: str, email: str, password: str) -> User:
        """
        Register a new user
        
        Args:
            username: Username
            email: Email address
            password: Plain text password
            
        Returns:
            Created User object
            
        Raises:
            ConflictError: If username or email already exists
        """
        if self.db.query(User).filter(User.username == username).first():
            raise ConflictError(f"Duplicate username: {username}")
        if self.db.query(User).filter(User.email == email).first():
            raise ConflictError(f"Duplicate email: {email}")
        
        user = User(
            username=username,
            email=email,
            password_hash=self._hash_password(password),
            is_active=True
        )
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise ConflictError(f"Duplicate username: {username}")
        self.db.refresh(user)
        
        logger.info("Registered new user", username=username)
        return user
    
    def authenticate(self, username: str, password: str) -> Optional[User]:
        """
        Authenticate a user by username and password
        
        Returns:
            User object if authentication successful, None otherwise
        """
        user = self.db.query(User).filter(User.username == username).first()
        
        if not user:
            logger.warning("Authentication failed: unknown user", username=username)
            return None
        if not user.is_active:
            logger.warning("Authentication failed: inactive user", username=username)
            return None
        if not self._verify_password(password, user.password_hash):
            logger.warning("Authentication failed: invalid password", username=username)
            return None
        
        user.last_login = utc_now()
        self.db.commit()
        return user
    
    def create_session(self, user_id: int, duration_hours: Optional[int] = None) -> UserSession:
        """Create a new bearer session for a user"""
        hours = duration_hours if duration_hours is not None else self.session_duration_hours
        session = UserSession(
            user_id=user_id,
            token=secrets.token_urlsafe(32),
            expires_at=utc_now() + timedelta(hours=hours)
        )
        self.db.add(session)
        self.db.commit()
        self.db.refresh(session)
        return session
    
    def validate_session(self, token: str) -> Optional[User]:
        """
        Resolve a session token to its user
        
        Expired sessions are deleted. Inactive users are treated as logged out.
        """
        session = self.db.query(UserSession).filter(UserSession.token == token).first()
        if not session:
            return None
        
        if session.expires_at < utc_now():
            self.db.delete(session)
            self.db.commit()
            return None
        
        user = session.user
        if not user or not user.is_active:
            return None
        return user
    
    def logout(self, token: str) -> bool:
        """Delete a session; returns False if it did not exist"""
        session = self.db.query(UserSession).filter(UserSession.token == token).first()
        if not session:
            return False
        self.db.delete(session)
        self.db.commit()
        return True
    
    @staticmethod
    def _hash_password(password: str) -> str:
        salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")
    
    @staticmethod
    def _verify_password(password: str, password_hash: str) -> bool:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
