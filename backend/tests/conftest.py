import os

os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import Session, SQLModel, create_engine  # noqa: E402

from ladder.database import get_session  # noqa: E402
from ladder.main import app  # noqa: E402

TEST_DATABASE_URL = "sqlite:///:memory:"

# ============================================================================
# Test Database Setup with StaticPool
# ============================================================================
# 1. sqlite:///:memory: with StaticPool so ALL sessions share the same DB
# 2. check_same_thread=False required for TestClient/threaded access
# 3. All models imported before create_all() (see session_fixture)
# 4. Tables dropped after every test so each test starts empty
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


def override_get_session():
    """Override session to use test engine"""
    with Session(test_engine) as session:
        yield session


@pytest.fixture(name="session", scope="function")
def session_fixture():
    """Provide a test database session on a fresh schema"""
    from ladder.models.ladder_day import LadderDay  # noqa: F401
    from ladder.models.ladder_match import LadderMatch  # noqa: F401
    from ladder.models.ladder_player import LadderPlayerInMatch  # noqa: F401
    from ladder.models.ladder_registered_team import LadderRegisteredTeam  # noqa: F401
    from ladder.models.user import User  # noqa: F401

    SQLModel.metadata.create_all(test_engine)

    with Session(test_engine) as session:
        yield session

    SQLModel.metadata.drop_all(test_engine)


@pytest.fixture(name="client")
def client_fixture(session: Session):
    """Provide a test client with overridden database session

    Override is set BEFORE TestClient() and stays in place for the
    entire duration, so the app never uses its own engine.
    """
    app.dependency_overrides[get_session] = override_get_session

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def make_team(session: Session):
    """Factory: register a team with *size* fresh users, returns the team"""
    from ladder.models.ladder_registered_team import LadderRegisteredTeam
    from ladder.models.user import User

    counter = {"n": 0}

    def _make(size: int = 4) -> LadderRegisteredTeam:
        users = []
        for _ in range(size):
            counter["n"] += 1
            n = counter["n"]
            user = User(discord_id=f"{100000 + n}", username=f"player{n}")
            session.add(user)
            users.append(user)
        session.flush()

        team = LadderRegisteredTeam(owner_id=users[0].id)
        session.add(team)
        session.flush()

        for user in users:
            user.ladder_team_id = team.id
            session.add(user)
        session.commit()
        session.refresh(team)
        return team

    return _make
