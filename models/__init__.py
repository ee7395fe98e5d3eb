from .members import MemberSearchCondition, MemberTeamView

__all__ = [
    "MemberSearchCondition",
    "MemberTeamView",
]
