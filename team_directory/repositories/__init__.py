# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Repository package — re-exports TeamMemberRepository."""
from team_directory.repositories.team_member_repository import (
    ConstraintViolation,
    TeamMemberRepository,
)

__all__ = ["ConstraintViolation", "TeamMemberRepository"]
