"""
Tests for the dynamic filter composition.

Tests cover:
- Blank string handling
- Individual filter builders
- Conjunction of present filters only
"""

import pytest

from models.members import MemberSearchCondition
from repositories.predicates import (
    has_text,
    username_eq,
    team_name_eq,
    age_goe,
    age_loe,
    age_between,
    conjunction,
    compose_predicate,
    describe_predicate,
)


class TestHasText:
    """Tests for has_text."""

    @pytest.mark.parametrize("value", [None, "", " ", "\t\n  "])
    def test_has_text_vacio(self, value):
        assert has_text(value) is False

    @pytest.mark.parametrize("value", ["a", " member1 "])
    def test_has_text_con_texto(self, value):
        assert has_text(value) is True


class TestFilterBuilders:
    """Tests for each optional filter builder."""

    def test_username_eq(self):
        sql = describe_predicate(username_eq("member1"))

        assert sql == "members.username = 'member1'"

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_username_eq_en_blanco(self, value):
        assert username_eq(value) is None

    def test_team_name_eq(self):
        sql = describe_predicate(team_name_eq("teamA"))

        assert sql == "teams.name = 'teamA'"

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_team_name_eq_en_blanco(self, value):
        assert team_name_eq(value) is None

    def test_age_goe(self):
        assert describe_predicate(age_goe(20)) == "members.age >= 20"

    def test_age_loe(self):
        assert describe_predicate(age_loe(30)) == "members.age <= 30"

    def test_age_cero_no_es_ausente(self):
        """Zero is a real bound, not an absent value."""
        assert age_goe(0) is not None
        assert age_loe(0) is not None

    def test_age_ausente(self):
        assert age_goe(None) is None
        assert age_loe(None) is None

    def test_age_between(self):
        sql = describe_predicate(age_between(20, 30))

        assert "members.age >= 20" in sql
        assert "members.age <= 30" in sql

    def test_age_between_un_solo_limite(self):
        assert describe_predicate(age_between(None, 30)) == "members.age <= 30"


class TestComposePredicate:
    """Tests for composing a search condition into one filter."""

    def test_condicion_vacia_sin_filtro(self):
        assert compose_predicate(MemberSearchCondition()) is None

    def test_condicion_none_sin_filtro(self):
        assert compose_predicate(None) is None

    def test_condicion_solo_blancos_sin_filtro(self):
        condition = MemberSearchCondition(username="  ", team_name="")

        assert compose_predicate(condition) is None
        assert describe_predicate(compose_predicate(condition)) == "<sin filtro>"

    def test_un_solo_campo(self):
        condition = MemberSearchCondition(age_min=35)

        assert describe_predicate(compose_predicate(condition)) == "members.age >= 35"

    def test_campos_ausentes_no_anulan_los_presentes(self):
        """Blank username must not drop the team and age filters."""
        condition = MemberSearchCondition(username="", team_name="teamB", age_max=30)
        sql = describe_predicate(compose_predicate(condition))

        assert "members.username" not in sql
        assert "teams.name = 'teamB'" in sql
        assert "members.age <= 30" in sql

    def test_todos_los_campos(self):
        condition = MemberSearchCondition(
            username="member1",
            team_name="teamA",
            age_min=10,
            age_max=40,
        )
        sql = describe_predicate(compose_predicate(condition))

        assert "members.username = 'member1'" in sql
        assert "teams.name = 'teamA'" in sql
        assert "members.age >= 10" in sql
        assert "members.age <= 40" in sql
        assert sql.count(" AND ") == 3

    def test_conjunction_vacia(self):
        assert conjunction([None, None]) is None

    def test_composicion_sin_efectos(self):
        """Composing does not modify the condition."""
        condition = MemberSearchCondition(username="member1", age_min=10)
        before = condition.model_dump()

        compose_predicate(condition)
        compose_predicate(condition)

        assert condition.model_dump() == before
