import copy
from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import StaticPool, create_engine
from sqlalchemy.dialects.sqlite import base as sqlite_base
from sqlalchemy.orm import sessionmaker

import squad_feedback.models  # noqa: F401 register models with Base.metadata
from squad_feedback.core.database import Base, get_db
from squad_feedback.main import app as fastapi_app
from squad_feedback.models import Event, Form, Template, User
from squad_feedback.services.catalog import get_default_template

# ---------------------------------------------------------------------------
# SQLite compatibility for PostgreSQL-specific types (JSONB)
# ---------------------------------------------------------------------------
sqlite_base.SQLiteTypeCompiler.visit_JSONB = lambda self, type_, **kw: self.visit_JSON(type_, **kw)

# In-memory SQLite for tests, no PostgreSQL dependency needed
TEST_DATABASE_URL = "sqlite://"

engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(autouse=True)
def setup_db():
    """Create all tables before each test, drop after."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    """Provide a test database session."""
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db):
    """TestClient with overridden DB dependency."""

    def _override_get_db():
        try:
            yield db
        finally:
            pass

    fastapi_app.dependency_overrides[get_db] = _override_get_db
    yield TestClient(fastapi_app)
    fastapi_app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Domain fixtures
# ---------------------------------------------------------------------------


def _add(db, obj):
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return obj


@pytest.fixture
def coach(db) -> User:
    return _add(db, User(name="Alex Morgan", role="coach", club="Riverside FC"))


@pytest.fixture
def player(db) -> User:
    return _add(
        db,
        User(name="Sam Carter", role="player", club="Riverside FC", position="Goalkeeper", jersey_number=1),
    )


@pytest.fixture
def event(db) -> Event:
    return _add(
        db,
        Event(
            name="League Match vs Hillside United",
            type="match",
            opponent="Hillside United",
            date=datetime(2026, 10, 18, 15, 0),
            club="Riverside FC",
            location="Riverside Park",
        ),
    )


@pytest.fixture
def template(db) -> Template:
    """The post-match catalog template stored as a plain template row."""
    entry = get_default_template("post_match_standard")
    return _add(
        db,
        Template(
            name=entry.name,
            description=entry.description,
            type=entry.type,
            estimated_time=entry.estimated_time,
            icon=entry.icon,
            structure=entry.structure,
        ),
    )


@pytest.fixture
def form(db, template, event) -> Form:
    """An active, anonymous-friendly form built from ``template``."""
    return _add(
        db,
        Form(
            name="Post-Match Standard Review - 10/18/2026",
            template_id=template.id,
            event_id=event.id,
            structure=copy.deepcopy(template.structure),
            status="active",
            allow_anonymous=True,
        ),
    )
