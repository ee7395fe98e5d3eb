"""
Repositorio para la entidad Team.
"""

from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
import logging

from repositories.base_repository import BaseRepository
from database.models import TeamORM, MemberORM
from core.exceptions import ExecutionFailed

logger = logging.getLogger(__name__)


class TeamRepository(BaseRepository[TeamORM]):
    """Repositorio para la entidad Team."""

    def __init__(self, db: Session):
        super().__init__(db, TeamORM)

    def find_by_name(self, name: str) -> Optional[TeamORM]:
        """
        Busca un equipo por nombre exacto.

        Args:
            name: Nombre del equipo

        Returns:
            El primer equipo con ese nombre o None
        """
        try:
            return (
                self.db.query(TeamORM)
                .filter(TeamORM.name == name)
                .order_by(TeamORM.id.asc())
                .first()
            )
        except SQLAlchemyError as e:
            logger.error(f"Error finding team by name {name}: {e}")
            raise ExecutionFailed("Error al buscar equipo por nombre") from e

    def find_members(self, team_id: int) -> List[MemberORM]:
        """
        Obtiene los miembros de un equipo.

        El equipo no mantiene una colección propia; se consulta por team_id.

        Args:
            team_id: ID del equipo

        Returns:
            Lista de miembros ordenada por ID
        """
        try:
            return (
                self.db.query(MemberORM)
                .filter(MemberORM.team_id == team_id)
                .order_by(MemberORM.id.asc())
                .all()
            )
        except SQLAlchemyError as e:
            logger.error(f"Error finding members of team {team_id}: {e}")
            raise ExecutionFailed("Error al buscar miembros del equipo") from e

    def add_member(self, team: TeamORM, member: MemberORM) -> MemberORM:
        """
        Asigna un miembro al equipo y lo persiste.

        Returns:
            El miembro actualizado
        """
        member.change_team(team)
        return self.save(member)
