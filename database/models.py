from typing import Optional

from sqlalchemy import Column, String, Integer, ForeignKey, CheckConstraint
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()


#ORM: Teams
class TeamORM(Base):
    __tablename__ = "teams"
    #columna en DB: team_id, atributo python: id
    id = Column("team_id", Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)

    def __init__(self, name: str):
        self.name = name

    def __repr__(self) -> str:
        return f"TeamORM(id={self.id}, name={self.name!r})"


#ORM: Members
class MemberORM(Base):
    __tablename__ = "members"
    id = Column("member_id", Integer, primary_key=True, autoincrement=True)
    username = Column(String(100), nullable=True)
    age = Column(Integer, CheckConstraint("age >= 0", name="ck_members_age_non_negative"), nullable=False, default=0)
    team_id = Column(Integer, ForeignKey("teams.team_id"), nullable=True, index=True)
    # solo Member -> Team; los miembros de un equipo se obtienen por consulta
    team = relationship("TeamORM", lazy="select")

    def __init__(self, username: Optional[str] = None, age: int = 0, team: Optional[TeamORM] = None):
        self.username = username
        self.age = age
        if team is not None:
            self.change_team(team)

    def change_team(self, team: Optional[TeamORM]) -> None:
        """Cambia el equipo del miembro (None lo deja sin equipo)."""
        self.team = team

    def __repr__(self) -> str:
        return f"MemberORM(id={self.id}, username={self.username!r}, age={self.age})"
