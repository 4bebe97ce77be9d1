# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""FastAPI dependency injection wiring."""
from team_directory.core.database import engine
from team_directory.repositories.team_member_repository import TeamMemberRepository
from team_directory.services.team_member_service import TeamMemberService

_repo = TeamMemberRepository(engine)
_service = TeamMemberService(_repo)


def get_team_member_repo() -> TeamMemberRepository:
    return _repo


def get_team_member_service() -> TeamMemberService:
    return _service
