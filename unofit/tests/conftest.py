"""
Pytest configuration and fixtures
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from unofit.main import app
from unofit.db.base import Base
from unofit.db.init_db import init_db
from unofit.core.deps import get_db

# Import all models to ensure they're registered with Base.metadata
from unofit.models import SystemState, User, IncomeRecord, ActivityLog  # noqa


# Use in-memory SQLite for testing
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db():
    """Create a fresh, seeded database for each test"""
    Base.metadata.drop_all(bind=engine)

    db = TestingSessionLocal()
    init_db(db)
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db):
    """Test client fixture with database override"""
    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def activity_actions(db):
    """Helper returning the logged action tags, oldest first"""
    def _actions():
        db.expire_all()
        return [a.action for a in db.query(ActivityLog).order_by(ActivityLog.id).all()]
    return _actions


@pytest.fixture(scope="function")
def empty_engine():
    """The test engine with no tables, for exercising initialization from scratch"""
    Base.metadata.drop_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def session_factory(empty_engine):
    return TestingSessionLocal
