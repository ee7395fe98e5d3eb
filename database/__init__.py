from .db import (
    SessionLocal,
    create_tables,
    engine,
    get_db,
    get_database_url,
    Base,
    TeamORM,
    MemberORM,
)

__all__ = [
    "SessionLocal",
    "create_tables",
    "engine",
    "get_db",
    "get_database_url",
    "Base",
    "TeamORM",
    "MemberORM",
]
