"""
Repositorio para la entidad Member.
Gestiona la búsqueda dinámica de miembros con su equipo y la paginación.
"""

from typing import List, Optional, Sequence
from sqlalchemy.orm import Session, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy import func
import logging

from repositories.base_repository import BaseRepository
from repositories.predicates import Predicate, compose_predicate, describe_predicate
from database.models import MemberORM, TeamORM
from models.members import MemberSearchCondition, MemberTeamView
from core.exceptions import ExecutionFailed
from core.pagination import (
    Page,
    PaginationStrategy,
    build_page,
    calculate_skip,
    validate_page_request,
)
from config import settings

logger = logging.getLogger(__name__)

# orden estable por defecto para paginar
DEFAULT_PAGE_ORDER = (MemberORM.id.asc(),)


class MemberRepository(BaseRepository[MemberORM]):
    """Repositorio para la entidad Member."""

    def __init__(self, db: Session):
        """
        Inicializa el repositorio de miembros.

        Args:
            db: SQLAlchemy session
        """
        super().__init__(db, MemberORM)

    def find_by_username(self, username: str) -> List[MemberORM]:
        """
        Busca los miembros con un username exacto.

        Args:
            username: Nombre de usuario

        Returns:
            Lista de miembros, ordenada por ID
        """
        try:
            return (
                self.db.query(MemberORM)
                .filter(MemberORM.username == username)
                .order_by(MemberORM.id.asc())
                .all()
            )
        except SQLAlchemyError as e:
            logger.error(f"Error finding members by username {username}: {e}")
            raise ExecutionFailed("Error al buscar miembros por username") from e

    # ---------------------------------------------------------------
    # Búsqueda: members LEFT JOIN teams + filtro + proyección
    # ---------------------------------------------------------------

    def _member_team_query(self, predicate: Optional[Predicate]) -> Query:
        query = (
            self.db.query(
                MemberORM.id.label("member_id"),
                MemberORM.username.label("username"),
                MemberORM.age.label("age"),
                TeamORM.id.label("team_id"),
                TeamORM.name.label("team_name"),
            )
            .select_from(MemberORM)
            .outerjoin(MemberORM.team)
        )
        if predicate is not None:
            query = query.filter(predicate)
        return query

    def _count_query(self, predicate: Optional[Predicate]) -> Query:
        query = (
            self.db.query(func.count(MemberORM.id))
            .select_from(MemberORM)
            .outerjoin(MemberORM.team)
        )
        if predicate is not None:
            query = query.filter(predicate)
        return query

    @staticmethod
    def _to_views(rows) -> List[MemberTeamView]:
        return [MemberTeamView(**row._asdict()) for row in rows]

    def search(
        self,
        condition: Optional[MemberSearchCondition] = None,
        order_by: Optional[Sequence] = None
    ) -> List[MemberTeamView]:
        """
        Busca miembros con su equipo según una condición opcional.

        Los miembros sin equipo también se devuelven (con team_id/team_name en None)
        salvo que la condición filtre por nombre de equipo.

        Args:
            condition: Condición de búsqueda; campos vacíos no filtran
            order_by: Expresiones de orden; sin ellas se usa el orden del motor

        Returns:
            Lista de MemberTeamView

        Raises:
            ExecutionFailed: Si el motor no pudo ejecutar la consulta
        """
        predicate = compose_predicate(condition)
        logger.debug(f"Searching members where {describe_predicate(predicate)}")

        try:
            query = self._member_team_query(predicate)
            if order_by:
                query = query.order_by(*order_by)
            return self._to_views(query.all())
        except SQLAlchemyError as e:
            logger.error(f"Error searching members: {e}")
            raise ExecutionFailed("Error al buscar miembros") from e

    def count_matching(self, condition: Optional[MemberSearchCondition] = None) -> int:
        """
        Cuenta los miembros que cumplen la condición (mismo join y filtro que search).

        Raises:
            ExecutionFailed: Si el motor no pudo ejecutar la consulta
        """
        return self._count(compose_predicate(condition))

    def _count(self, predicate: Optional[Predicate]) -> int:
        try:
            return self._count_query(predicate).scalar() or 0
        except SQLAlchemyError as e:
            logger.error(f"Error counting members: {e}")
            raise ExecutionFailed("Error al contar miembros") from e

    # ---------------------------------------------------------------
    # Paginación
    # ---------------------------------------------------------------

    def search_page(
        self,
        condition: Optional[MemberSearchCondition],
        page: int = 0,
        size: Optional[int] = None,
        strategy: Optional[PaginationStrategy] = None,
        order_by: Optional[Sequence] = None
    ) -> Page[MemberTeamView]:
        """
        Busca una página de miembros con el total de resultados.

        Args:
            condition: Condición de búsqueda
            page: Número de página (0-indexed)
            size: Items por página (por defecto settings.default_page_size)
            strategy: Estrategia de conteo (por defecto la configurada)
            order_by: Orden determinístico; por defecto member_id ascendente

        Returns:
            Page con el contenido y el total

        Raises:
            InvalidPageRequest: Si page < 0 o size <= 0 (antes de consultar)
            ExecutionFailed: Si el motor no pudo ejecutar alguna consulta
        """
        if size is None:
            size = settings.default_page_size
        validate_page_request(page, size)
        strategy = strategy or settings.pagination_strategy

        predicate = compose_predicate(condition)
        logger.debug(
            f"Searching page {page} (size {size}, {strategy.value}) "
            f"where {describe_predicate(predicate)}"
        )

        try:
            query = (
                self._member_team_query(predicate)
                .order_by(*(order_by or DEFAULT_PAGE_ORDER))
                .offset(calculate_skip(page, size))
                .limit(size)
            )
            content = self._to_views(query.all())
        except SQLAlchemyError as e:
            logger.error(f"Error searching member page {page}: {e}")
            raise ExecutionFailed("Error al buscar página de miembros") from e

        return build_page(
            content,
            page,
            size,
            lambda: self._count(predicate),
            strategy=strategy,
        )

    def search_page_simple(
        self,
        condition: Optional[MemberSearchCondition],
        page: int = 0,
        size: Optional[int] = None,
        order_by: Optional[Sequence] = None
    ) -> Page[MemberTeamView]:
        """Página de miembros consultando siempre el total."""
        return self.search_page(
            condition, page, size,
            strategy=PaginationStrategy.ALWAYS_COUNT,
            order_by=order_by,
        )

    def search_page_complex(
        self,
        condition: Optional[MemberSearchCondition],
        page: int = 0,
        size: Optional[int] = None,
        order_by: Optional[Sequence] = None
    ) -> Page[MemberTeamView]:
        """Página de miembros; el conteo se omite si la página vino incompleta."""
        return self.search_page(
            condition, page, size,
            strategy=PaginationStrategy.COUNT_AVOIDANCE,
            order_by=order_by,
        )
