"""Pytest configuration and fixtures for taskflow.

Environment is set before taskflow is imported so Settings validates against
an in-memory SQLite URL. Repository and API tests share one aiosqlite session
per test (StaticPool keeps the in-memory database alive across connections).
Shared constants and fakes live in support.py.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("AUTH_MODE", "header")
os.environ.setdefault("RESEND_API_KEY", "")
os.environ.setdefault("FRONTEND_ORIGIN", "app.example.org")
os.environ.setdefault("NOTIFICATION_DELIVERY", "inline")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from support import (  # noqa: E402
    ADMIN_ID,
    ASSIGNEE_ID,
    MEMBER_ID,
    OTHER_PROJECT_ID,
    OTHER_WORKSPACE_ID,
    OUTSIDER_ID,
    OWNER_ID,
    PROJECT_ID,
    SECOND_PROJECT_ID,
    WORKSPACE_ID,
    RecordingEmailClient,
)
from taskflow.api.v1.dependencies import get_email_client  # noqa: E402
from taskflow.core.config import get_settings  # noqa: E402
from taskflow.core.limiter import limiter  # noqa: E402
from taskflow.domain.enums import Role  # noqa: E402
from taskflow.infrastructure.persistence.database import (  # noqa: E402
    Base,
    get_db,
    get_db_transactional,
)
from taskflow.infrastructure.persistence.models import (  # noqa: E402
    Member,
    Project,
    User,
    Workspace,
)
from taskflow.main import app  # noqa: E402


@pytest.fixture
async def db_session() -> AsyncSession:
    """Session on a fresh in-memory SQLite database with all tables created."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = async_sessionmaker(bind=engine, expire_on_commit=False)
    async with factory() as session:
        yield session
    await engine.dispose()


@pytest.fixture
async def seeded(db_session: AsyncSession) -> AsyncSession:
    """Two workspaces with projects, and a member of every role in the first."""
    db_session.add_all(
        [
            User(id=OWNER_ID, name="Olivia Owner", email="owner@example.org"),
            User(id=ADMIN_ID, name="Adam Admin", email="admin@example.org"),
            User(id=MEMBER_ID, name="Mia Member", email="member@example.org"),
            User(id=ASSIGNEE_ID, name="Bob", email="bob@example.org"),
            User(id=OUTSIDER_ID, name="Otto Outsider", email="otto@example.org"),
            Workspace(id=WORKSPACE_ID, name="Alpha", owner_id=OWNER_ID),
            Workspace(id=OTHER_WORKSPACE_ID, name="Beta", owner_id=OUTSIDER_ID),
        ]
    )
    await db_session.flush()
    db_session.add_all(
        [
            Member(workspace_id=WORKSPACE_ID, user_id=OWNER_ID, role=Role.OWNER.value),
            Member(workspace_id=WORKSPACE_ID, user_id=ADMIN_ID, role=Role.ADMIN.value),
            Member(workspace_id=WORKSPACE_ID, user_id=MEMBER_ID, role=Role.MEMBER.value),
            Member(
                workspace_id=WORKSPACE_ID, user_id=ASSIGNEE_ID, role=Role.MEMBER.value
            ),
            Member(
                workspace_id=OTHER_WORKSPACE_ID,
                user_id=OUTSIDER_ID,
                role=Role.OWNER.value,
            ),
            Project(id=PROJECT_ID, workspace_id=WORKSPACE_ID, name="Website"),
            Project(id=SECOND_PROJECT_ID, workspace_id=WORKSPACE_ID, name="API"),
            Project(id=OTHER_PROJECT_ID, workspace_id=OTHER_WORKSPACE_ID, name="Beta"),
        ]
    )
    await db_session.commit()
    return db_session


@pytest.fixture
def email_client() -> RecordingEmailClient:
    return RecordingEmailClient()


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI), no dependency overrides."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def api_client(
    seeded: AsyncSession, email_client: RecordingEmailClient
) -> AsyncClient:
    """HTTP client whose DB dependencies use the seeded session and whose email is recorded."""

    async def _db():
        yield seeded

    async def _db_transactional():
        try:
            yield seeded
        except Exception:
            await seeded.rollback()
            raise
        else:
            await seeded.commit()

    app.dependency_overrides[get_db] = _db
    app.dependency_overrides[get_db_transactional] = _db_transactional
    app.dependency_overrides[get_email_client] = lambda: email_client
    limiter.enabled = False
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()
        limiter.enabled = True


@pytest.fixture
def outbox_mode():
    """Switch NOTIFICATION_DELIVERY to outbox for one test."""
    previous = os.environ.get("NOTIFICATION_DELIVERY")
    os.environ["NOTIFICATION_DELIVERY"] = "outbox"
    get_settings.cache_clear()
    yield
    if previous is None:
        os.environ.pop("NOTIFICATION_DELIVERY", None)
    else:
        os.environ["NOTIFICATION_DELIVERY"] = previous
    get_settings.cache_clear()
