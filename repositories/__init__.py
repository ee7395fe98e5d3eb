"""
Capa de repositorio para el acceso a datos.
Este paquete contiene clases de repositorio que gestionan todas las operaciones de la base de datos.
Los repositorios proporcionan una abstracción sobre el ORM y no deben contener
lógica de negocio.

"""

from .base_repository import BaseRepository
from .member_repository import MemberRepository
from .team_repository import TeamRepository
from .predicates import compose_predicate

__all__ = [
    "BaseRepository",
    "MemberRepository",
    "TeamRepository",
    "compose_predicate",
]
