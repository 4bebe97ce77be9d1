# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Data-access layer for team members."""
from typing import List, Optional

from sqlalchemy import delete, func, select, text, update
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import sessionmaker

from team_directory.core.logging import get_logger
from team_directory.models import TeamMember

logger = get_logger(__name__)

MEMBER_COLS = "id, member_id, first_name, last_name, email"

_NATIVE_BY_MEMBER_ID = text(
    f"SELECT {MEMBER_COLS} FROM team_member WHERE member_id = :member_id"
)
_NATIVE_BY_NAME = text(
    f"SELECT {MEMBER_COLS} FROM team_member "
    "WHERE first_name = :first_name AND last_name = :last_name ORDER BY id"
)


class ConstraintViolation(Exception):
    """A write was rejected by a unique or not-null constraint."""


class TeamMemberRepository:
    def __init__(self, engine: Engine):
        self._engine = engine
        # returned entities are detached, keep their loaded state readable
        self._session = sessionmaker(bind=engine, expire_on_commit=False)

    # ── Write ──────────────────────────────────────────────────────────

    def insert(self, member: TeamMember) -> TeamMember:
        try:
            with self._session() as session, session.begin():
                session.add(member)
        except IntegrityError as exc:
            logger.warning("Insert rejected member_id=%s: %s", member.member_id, exc.orig)
            raise ConstraintViolation(str(exc.orig)) from exc
        return member

    def update(self, member: TeamMember) -> Optional[TeamMember]:
        """Overwrite the row with the member's storage key; None if that row is gone."""
        try:
            with self._session() as session, session.begin():
                result = session.execute(
                    update(TeamMember)
                    .where(TeamMember.id == member.id)
                    .values(first_name=member.first_name, last_name=member.last_name,
                            email=member.email)
                )
        except IntegrityError as exc:
            logger.warning("Update rejected member_id=%s: %s", member.member_id, exc.orig)
            raise ConstraintViolation(str(exc.orig)) from exc
        if not result.rowcount:
            logger.info("Update skipped, member_id=%s no longer stored", member.member_id)
            return None
        return member

    def delete_by_member_id(self, member_id: str) -> int:
        with self._session() as session, session.begin():
            result = session.execute(
                delete(TeamMember).where(TeamMember.member_id == member_id)
            )
        return result.rowcount or 0

    # ── Read ───────────────────────────────────────────────────────────

    def find_all(self) -> List[TeamMember]:
        with self._session() as session:
            return list(session.scalars(select(TeamMember).order_by(TeamMember.id)))

    def find_by_member_id(self, member_id: str) -> Optional[TeamMember]:
        with self._session() as session:
            return session.scalars(
                select(TeamMember).where(TeamMember.member_id == member_id)
            ).first()

    def find_by_email(self, email: str) -> Optional[TeamMember]:
        with self._session() as session:
            return session.scalars(
                select(TeamMember).where(TeamMember.email == email)
            ).first()

    def find_by_name(self, first_name: str, last_name: str) -> Optional[TeamMember]:
        """Earliest stored member with this exact name; names are not unique."""
        with self._session() as session:
            return session.scalars(
                select(TeamMember)
                .where(TeamMember.first_name == first_name, TeamMember.last_name == last_name)
                .order_by(TeamMember.id)
                .limit(1)
            ).first()

    def find_all_by_name(self, first_name: str, last_name: str) -> List[TeamMember]:
        with self._session() as session:
            return list(session.scalars(
                select(TeamMember)
                .where(TeamMember.first_name == first_name, TeamMember.last_name == last_name)
                .order_by(TeamMember.id)
            ))

    def find_by_member_id_native(self, member_id: str) -> Optional[TeamMember]:
        with self._session() as session:
            return session.scalars(
                select(TeamMember).from_statement(_NATIVE_BY_MEMBER_ID),
                {"member_id": member_id},
            ).first()

    def find_by_name_native(self, first_name: str, last_name: str) -> Optional[TeamMember]:
        with self._session() as session:
            return session.scalars(
                select(TeamMember).from_statement(_NATIVE_BY_NAME),
                {"first_name": first_name, "last_name": last_name},
            ).first()

    def count(self) -> int:
        with self._session() as session:
            return session.scalar(select(func.count()).select_from(TeamMember)) or 0

    def verify_connection(self):
        with self._engine.connect() as conn:
            conn.execute(text("SELECT 1"))

    def dispose(self):
        self._engine.dispose()
