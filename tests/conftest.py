"""
Pytest configuration and fixtures
"""
import os
from decimal import Decimal

# Point the app at a throwaway in-memory database before it is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from app.core.database import Base, SessionLocal, engine
from app.main import app
from app.models.company import Company
from app.models.job import Job
from app.models.user import User  # noqa: F401
from app.services.auth_service import AuthService


@pytest.fixture(scope="function")
def db() -> Session:
    """Create a database session on a clean schema"""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture(scope="function")
def client(db: Session):
    """Create test client"""
    return TestClient(app)


@pytest.fixture
def auth_token(db: Session) -> str:
    """Register a user and return a live session token"""
    auth_service = AuthService(db)
    user = auth_service.register_user("u1", "user1@user.com", "password1")
    return auth_service.create_session(user.id).token


@pytest.fixture
def auth_headers(auth_token: str) -> dict:
    return {"Authorization": f"Bearer {auth_token}"}


@pytest.fixture
def companies(db: Session):
    """Seed three companies; c1 has two jobs"""
    db.add_all([
        Company(handle="c1", name="C1", description="Desc1", num_employees=1, logo_url="http://c1.img"),
        Company(handle="c2", name="C2", description="Desc2", num_employees=2, logo_url="http://c2.img"),
        Company(handle="c3", name="C3", description="Desc3", num_employees=3, logo_url="http://c3.img"),
    ])
    db.commit()
    db.add_all([
        Job(title="J1", salary=100, equity=Decimal("0.1"), company_handle="c1"),
        Job(title="J2", salary=200, equity=Decimal("0.2"), company_handle="c1"),
    ])
    db.commit()
    return ["c1", "c2", "c3"]
