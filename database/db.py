"""módulo de base de datos con manejo de errores y configuración centralizada."""
from typing import Generator
import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.exc import SQLAlchemyError

# import ORM classes and Base from models.py
from .models import (
    Base,
    TeamORM,
    MemberORM,
)

#import configuration
from config import settings

logger = logging.getLogger(__name__)

#engine / session con configuración centralizada
engine = create_engine(
    settings.database_url,
    echo=settings.debug_mode,
    future=True,
    pool_pre_ping=True,  #verifica conexiones antes de usarlas
    connect_args={"check_same_thread": False} if settings.is_sqlite else {},
)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)


def get_db() -> Generator[Session, None, None]:
    """provee una sesión con manejo de errores.

    Yields:
        Session: Sesión de SQLAlchemy

    Nota:
        - Hace rollback automático si hay excepciones SQLAlchemy
        - Cierra la sesión de forma segura
    """
    db = SessionLocal()
    try:
        yield db
    except SQLAlchemyError as e:
        logger.error(f"Error de base de datos en sesión: {e}")
        db.rollback()
        raise
    finally:
        db.close()


def create_tables() -> None:
    """Crear tablas ORM en la base de datos.

    Raises:
        SQLAlchemyError: Si hay error al crear las tablas
    """
    try:
        Base.metadata.create_all(bind=engine)
        logger.info("Tablas de base de datos creadas/verificadas exitosamente")
    except SQLAlchemyError as e:
        logger.error(f"Error al crear tablas: {e}", exc_info=True)
        raise


def get_database_url() -> str:
    """Obtiene la URL de la base de datos (sin credenciales sensibles)."""
    return engine.url.render_as_string(hide_password=True)
