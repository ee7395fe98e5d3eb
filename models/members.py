from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class MemberSearchCondition(BaseModel):
    """Condición de búsqueda: cualquier combinación de campos puede venir vacía."""
    username: Optional[str] = None
    team_name: Optional[str] = None
    age_min: Optional[int] = Field(None, description="Edad mínima (inclusive)")
    age_max: Optional[int] = Field(None, description="Edad máxima (inclusive)")


class MemberTeamView(BaseModel):
    """Proyección de solo lectura de un miembro con su equipo (si tiene)."""
    member_id: int
    username: Optional[str] = None
    age: int
    team_id: Optional[int] = None
    team_name: Optional[str] = None

    model_config = ConfigDict(frozen=True, from_attributes=True)
