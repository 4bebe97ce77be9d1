# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""ORM models — re-exports TeamMember."""
from team_directory.models.team_member import TeamMember

__all__ = ["TeamMember"]
