"""
Repositorio base con operaciones comunes por clave:
Este repositorio genérico proporciona operaciones de base de datos estándar
que se pueden reutilizar en los repositorios de entidades.
La sesión (commit/rollback/cierre) la administra quien la inyecta.
"""

from typing import TypeVar, Generic, List, Optional, Type, Any
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy import desc, asc
import logging

from core.exceptions import NotFoundException, ExecutionFailed

logger = logging.getLogger(__name__)

T = TypeVar('T')


class BaseRepository(Generic[T]):
    """
    Repositorio genérico que proporciona operaciones estándar por clave.

    Esta clase debe ser heredada por repositorios de entidades específicos.
    """

    def __init__(self, db: Session, model_class: Type[T]):
        """
        Inicializa el repositorio.

        Args:
            db: Sesión SQLAlchemy
            model_class: Clase del modelo ORM para este repositorio
        """
        self.db = db
        self.model_class = model_class

    def get_by_id(self, id: Any) -> Optional[T]:
        """
        Obtiene una entidad por su ID.

        Args:
            id: ID de la entidad

        Returns:
            The entity or None if not found
        """
        try:
            return self.db.get(self.model_class, id)
        except SQLAlchemyError as e:
            logger.error(f"Error getting {self.model_class.__name__} by id {id}: {e}")
            raise ExecutionFailed(f"Error al obtener {self.model_class.__name__}") from e

    def get_by_id_or_fail(self, id: Any) -> T:
        """
        Obtiene una entidad por su ID o lanza una excepción si no se encuentra.

        Raises:
            NotFoundException: If entity is not found
        """
        entity = self.get_by_id(id)
        if entity is None:
            raise NotFoundException(
                resource=self.model_class.__name__,
                identifier=str(id)
            )
        return entity

    def get_all(
        self,
        skip: int = 0,
        limit: Optional[int] = None,
        order_by: Optional[str] = None,
        order_desc: bool = False
    ) -> List[T]:
        """
        Obtiene todas las entidades.

        Args:
            skip: Número de registros a saltar
            limit: Número máximo de registros a devolver (None = sin límite)
            order_by: Field name to order by
            order_desc: Whether to order descending

        Returns:
            List of entities
        """
        try:
            query = self.db.query(self.model_class)

            # Apply ordering
            if order_by and hasattr(self.model_class, order_by):
                order_field = getattr(self.model_class, order_by)
                if order_desc:
                    query = query.order_by(desc(order_field))
                else:
                    query = query.order_by(asc(order_field))

            if skip:
                query = query.offset(skip)
            if limit is not None:
                query = query.limit(limit)
            return query.all()
        except SQLAlchemyError as e:
            logger.error(f"Error getting all {self.model_class.__name__}: {e}")
            raise ExecutionFailed(f"Error al listar {self.model_class.__name__}") from e

    def count(self, **filters) -> int:
        """
        Cuenta las entidades que coinciden con los filtros.

        Args:
            **filters: Filtros de igualdad como keyword arguments

        Returns:
            Count of matching entities
        """
        try:
            query = self.db.query(self.model_class)

            for field, value in filters.items():
                if hasattr(self.model_class, field) and value is not None:
                    query = query.filter(getattr(self.model_class, field) == value)

            return query.count()
        except SQLAlchemyError as e:
            logger.error(f"Error counting {self.model_class.__name__}: {e}")
            raise ExecutionFailed(f"Error al contar {self.model_class.__name__}") from e

    def save(self, entity: T) -> T:
        """
        Persiste una entidad nueva o modificada.

        Hace flush para que el motor asigne el ID; no hace commit.

        Args:
            entity: La entidad a guardar

        Returns:
            La entidad guardada
        """
        try:
            self.db.add(entity)
            self.db.flush()
            return entity
        except SQLAlchemyError as e:
            logger.error(f"Error saving {self.model_class.__name__}: {e}")
            self.db.rollback()
            raise ExecutionFailed(f"Error al guardar {self.model_class.__name__}") from e

    def delete(self, entity: T) -> None:
        """Elimina una entidad."""
        try:
            self.db.delete(entity)
            self.db.flush()
        except SQLAlchemyError as e:
            logger.error(f"Error deleting {self.model_class.__name__}: {e}")
            self.db.rollback()
            raise ExecutionFailed(f"Error al eliminar {self.model_class.__name__}") from e

    def exists(self, id: Any) -> bool:
        return self.get_by_id(id) is not None

    def commit(self) -> None:
        """Realiza el commit de la transacción actual."""
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            logger.error(f"Error committing transaction: {e}")
            self.db.rollback()
            raise ExecutionFailed("Error al guardar cambios en la base de datos") from e

    def rollback(self) -> None:
        """Realiza el rollback de la transacción actual."""
        self.db.rollback()

    def refresh(self, entity: T) -> T:
        """
        Refresca una entidad desde la base de datos.

        Args:
            entity: La entidad a refrescar

        Returns:
            La entidad refrescada
        """
        self.db.refresh(entity)
        return entity
