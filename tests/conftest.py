"""
MatchDB test configuration: pytest fixtures

- Flask app + test client met een tijdelijke frontend build
- API client met een in-memory token store
- SQLite in-memory sessie voor het schema

Upstream en API calls worden gemockt met requests_mock.
"""

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker

from matchdb import create_app
from matchdb.client.api import ApiClient
from matchdb.client.storage import MemoryTokenStore
from matchdb.models import Base, Company, Job, Profile, User, UserRole, EmploymentType

API_URL = "http://localhost:4000/api"
UPSTREAM = "http://localhost:4000"
INDEX_HTML = "<!doctype html><html><body><div id=\"root\"></div></body></html>"


# ============================================================================
# SERVER
# ============================================================================

@pytest.fixture
def frontend_dist(tmp_path):
    dist = tmp_path / "public"
    (dist / "assets").mkdir(parents=True)
    (dist / "index.html").write_text(INDEX_HTML, encoding="utf-8")
    (dist / "assets" / "app.js").write_text("console.log('matchdb');", encoding="utf-8")
    return dist


@pytest.fixture
def app(frontend_dist):
    return create_app({
        "TESTING": True,
        "APP_ENV": "production",
        "FRONTEND_DIST": str(frontend_dist),
        "UPSTREAM_HOST": "localhost",
        "UPSTREAM_PORT": 4000,
    })


@pytest.fixture
def client(app):
    return app.test_client()


# ============================================================================
# CLIENT
# ============================================================================

@pytest.fixture
def token_store():
    return MemoryTokenStore()


@pytest.fixture
def api_client(token_store):
    api = ApiClient(API_URL, token_store)
    yield api
    api.close()


# ============================================================================
# DATABASE
# ============================================================================

@pytest.fixture
def db_engine():
    engine = create_engine("sqlite://", future=True)

    @event.listens_for(engine, "connect")
    def enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(db_engine):
    Session = sessionmaker(bind=db_engine, future=True)
    session = Session()
    yield session
    session.close()


@pytest.fixture
def company_user(db_session):
    user = User(email="hiring@acme.test", first_name="Ada", role=UserRole.company)
    db_session.add(user)
    db_session.commit()
    return user


@pytest.fixture
def consultant_profile(db_session):
    user = User(email="peer@matchdb.test", first_name="Lin", role=UserRole.consultant)
    profile = Profile(user=user, title="Senior Data Engineer")
    db_session.add(profile)
    db_session.commit()
    return profile


@pytest.fixture
def company_with_job(db_session, company_user):
    company = Company(name="Acme Analytics", created_by=company_user)
    job = Job(
        company=company,
        title="Lakehouse migration lead",
        description="Move the warehouse to Delta Lake.",
        type=EmploymentType.contract,
        posted_by=company_user,
    )
    db_session.add_all([company, job])
    db_session.commit()
    return company, job
