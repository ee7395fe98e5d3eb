"""
Composición de filtros dinámicos para la búsqueda de miembros.

Cada campo de la condición tiene su propio constructor que devuelve una
expresión SQLAlchemy o ``None`` si el campo viene vacío. La composición
combina con AND solo las expresiones presentes.
"""

from functools import reduce
from typing import Callable, Iterable, List, Optional, Any

from sqlalchemy import and_
from sqlalchemy.sql.elements import ColumnElement

from database.models import MemberORM, TeamORM
from models.members import MemberSearchCondition

Predicate = ColumnElement[bool]


def has_text(value: Optional[str]) -> bool:
    """True si el valor es un string con al menos un carácter no blanco."""
    return isinstance(value, str) and value.strip() != ""


def username_eq(username: Optional[str]) -> Optional[Predicate]:
    return MemberORM.username == username if has_text(username) else None


def team_name_eq(team_name: Optional[str]) -> Optional[Predicate]:
    # requiere el join members -> teams
    return TeamORM.name == team_name if has_text(team_name) else None


def age_goe(age_min: Optional[int]) -> Optional[Predicate]:
    return MemberORM.age >= age_min if age_min is not None else None


def age_loe(age_max: Optional[int]) -> Optional[Predicate]:
    return MemberORM.age <= age_max if age_max is not None else None


def conjunction(predicates: Iterable[Optional[Predicate]]) -> Optional[Predicate]:
    """
    Combina con AND las expresiones presentes, omitiendo las ``None``.

    Args:
        predicates: Expresiones opcionales, en orden

    Returns:
        Una sola expresión, o None si no quedó ninguna
    """
    present = [p for p in predicates if p is not None]
    if not present:
        return None
    return reduce(and_, present)


def age_between(age_min: Optional[int], age_max: Optional[int]) -> Optional[Predicate]:
    return conjunction([age_goe(age_min), age_loe(age_max)])


# orden en que se aplican los filtros de la condición
CONDITION_FILTERS: List[Callable[[MemberSearchCondition], Optional[Predicate]]] = [
    lambda c: username_eq(c.username),
    lambda c: team_name_eq(c.team_name),
    lambda c: age_goe(c.age_min),
    lambda c: age_loe(c.age_max),
]


def compose_predicate(condition: Optional[MemberSearchCondition]) -> Optional[Predicate]:
    """
    Convierte una condición de búsqueda en un único filtro.

    Los campos ausentes (o strings en blanco) se omiten sin afectar a los demás.
    Si todos están ausentes devuelve None, que significa "sin filtro".

    Args:
        condition: Condición de búsqueda (None equivale a una condición vacía)

    Returns:
        Expresión booleana para el WHERE, o None
    """
    if condition is None:
        return None
    return conjunction(build(condition) for build in CONDITION_FILTERS)


def describe_predicate(predicate: Optional[Any]) -> str:
    """Representación legible del filtro, para logs."""
    if predicate is None:
        return "<sin filtro>"
    return str(predicate.compile(compile_kwargs={"literal_binds": True}))
