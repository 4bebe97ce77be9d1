# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""ORM mapping for the team_member table."""
from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from team_directory.core.database import Base


class TeamMember(Base):
    """A single team member record.

    ``id`` is the storage key and never leaves the service; callers address
    records by ``member_id``.
    """

    __tablename__ = "team_member"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    member_id: Mapped[str] = mapped_column(String(64), unique=True, nullable=False)
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(320), unique=True, nullable=False)

    def __repr__(self) -> str:
        return f"TeamMember(member_id={self.member_id!r}, email={self.email!r})"
