"""
Configuración de fixtures para pytest.

Este módulo contiene fixtures reutilizables para todos los tests.
"""

import pytest
import os
from typing import Generator, Dict, List
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

# Configurar para usar base de datos en memoria para tests
os.environ["DATABASE_URL"] = "sqlite:///:memory:"

from database.db import Base
from database.models import MemberORM, TeamORM


class StatementCounter:
    """Registra las sentencias SQL que el engine envía a la base de datos."""

    def __init__(self):
        self.statements: List[str] = []

    def clear(self) -> None:
        self.statements.clear()

    @property
    def selects(self) -> List[str]:
        return [s for s in self.statements if s.lstrip().upper().startswith("SELECT")]

    @property
    def count_queries(self) -> List[str]:
        return [s for s in self.selects if "count(" in s.lower()]


# ==================== Database Fixtures ====================

@pytest.fixture(scope="function")
def db_engine():
    """Create an in-memory SQLite database engine for testing."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Enable foreign keys for SQLite
    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(db_engine) -> Generator[Session, None, None]:
    """Create a new database session for a test."""
    TestingSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=db_engine
    )
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def statement_counter(db_engine) -> Generator[StatementCounter, None, None]:
    """Count the SQL statements executed by the engine during a test."""
    counter = StatementCounter()

    def record(conn, cursor, statement, parameters, context, executemany):
        counter.statements.append(statement)

    event.listen(db_engine, "before_cursor_execute", record)
    yield counter
    event.remove(db_engine, "before_cursor_execute", record)


# ==================== Team / Member Fixtures ====================

@pytest.fixture
def teams(db_session: Session) -> Dict[str, TeamORM]:
    """Create teamA and teamB."""
    team_a = TeamORM("teamA")
    team_b = TeamORM("teamB")
    db_session.add_all([team_a, team_b])
    db_session.commit()
    return {"teamA": team_a, "teamB": team_b}


@pytest.fixture
def members(db_session: Session, teams: Dict[str, TeamORM]) -> List[MemberORM]:
    """Create member1..member4 (ages 10, 20, 30, 40), two per team."""
    created = [
        MemberORM("member1", 10, teams["teamA"]),
        MemberORM("member2", 20, teams["teamA"]),
        MemberORM("member3", 30, teams["teamB"]),
        MemberORM("member4", 40, teams["teamB"]),
    ]
    db_session.add_all(created)
    db_session.commit()
    return created


@pytest.fixture
def member_without_team(db_session: Session) -> MemberORM:
    """Create a member that does not belong to any team."""
    member = MemberORM("loner", 25)
    db_session.add(member)
    db_session.commit()
    return member
