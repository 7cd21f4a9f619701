import os
import tempfile

os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="venue-logs-"))

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from app.core.dependencies import get_db
from app.core.security import create_admin_token, hash_password
from app.db.session import Base
from app.main import app
from app.models.admin import Admin
from app.models.venue import Venue

# Use an in-memory SQLite database for testing
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(autouse=True)
def setup_database():
    """Fresh schema for every test."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    db: Session = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


def override_get_db():
    db: Session = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def admin(db_session: Session) -> Admin:
    admin = Admin(
        name="Test Admin",
        email="admin@example.com",
        password_hash=hash_password("secret123"),
    )
    db_session.add(admin)
    db_session.commit()
    db_session.refresh(admin)
    return admin


@pytest.fixture
def admin_headers(admin: Admin) -> dict[str, str]:
    token = create_admin_token(admin.email)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def make_venue(db_session: Session):
    """Factory inserting a venue straight into the database."""

    def _make(**overrides) -> Venue:
        fields = {
            "name": "Grand Ballroom",
            "description": "Ballroom for weddings",
            "location": "Downtown",
            "capacity": 100,
            "price_per_day": 2500.0,
            "amenities": ["Parking"],
            "images": [],
            "owner": "admin",
            "is_active": True,
        }
        fields.update(overrides)
        venue = Venue(**fields)
        db_session.add(venue)
        db_session.commit()
        db_session.refresh(venue)
        return venue

    return _make


@pytest.fixture
def customer() -> dict:
    return {
        "customer_name": "Jane Doe",
        "customer_email": "jane@example.com",
        "customer_phone": "555-0100",
        "event_type": "Wedding",
    }
