# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Business rules for team members.

Expected failures on create come back as values rather than exceptions::

    outcome = service.create_team_member("TM1", "Ada", "Lovelace", "ada@example.com")
    if isinstance(outcome, Created):
        ...
"""
from dataclasses import dataclass
from typing import List, Optional, Union

from team_directory.core.logging import get_logger
from team_directory.metrics import (
    TEAM_MEMBERS_CREATED, TEAM_MEMBERS_DELETED, TEAM_MEMBER_REJECTIONS, TEAM_MEMBERS_TOTAL,
)
from team_directory.models import TeamMember
from team_directory.repositories.team_member_repository import (
    ConstraintViolation, TeamMemberRepository,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class Created:
    member: TeamMember


@dataclass(frozen=True)
class DuplicateEmail:
    email: str


@dataclass(frozen=True)
class DuplicateMemberId:
    member_id: str


@dataclass(frozen=True)
class InvalidMember:
    reason: str


CreateOutcome = Union[Created, DuplicateEmail, DuplicateMemberId, InvalidMember]


class TeamMemberService:
    def __init__(self, repo: TeamMemberRepository):
        self._repo = repo

    def seed_gauges(self):
        TEAM_MEMBERS_TOTAL.set(self._repo.count())
        logger.info("Prometheus gauges loaded from DB")

    def create_team_member(self, member_id: str, first_name: str, last_name: str,
                           email: str) -> CreateOutcome:
        for field, value in (("memberId", member_id), ("firstName", first_name),
                             ("lastName", last_name), ("email", email)):
            if not value or not value.strip():
                TEAM_MEMBER_REJECTIONS.labels(reason="invalid").inc()
                return InvalidMember(f"{field} must not be blank")

        if self._repo.find_by_email(email) is not None:
            return self._reject_email(email)
        if self._repo.find_by_member_id(member_id) is not None:
            TEAM_MEMBER_REJECTIONS.labels(reason="duplicate_member_id").inc()
            logger.warning("Create rejected, member id taken member_id=%s", member_id)
            return DuplicateMemberId(member_id)

        candidate = TeamMember(member_id=member_id, first_name=first_name,
                               last_name=last_name, email=email)
        try:
            member = self._repo.insert(candidate)
        except ConstraintViolation:
            # lost a race with a concurrent create; report whichever key is now taken
            if self._repo.find_by_email(email) is not None:
                return self._reject_email(email)
            TEAM_MEMBER_REJECTIONS.labels(reason="duplicate_member_id").inc()
            return DuplicateMemberId(member_id)

        TEAM_MEMBERS_CREATED.inc()
        TEAM_MEMBERS_TOTAL.inc()
        logger.info("Team member created member_id=%s", member_id)
        return Created(member)

    def list_team_members(self) -> List[TeamMember]:
        return self._repo.find_all()

    def get_team_member(self, member_id: str) -> Optional[TeamMember]:
        return self._repo.find_by_member_id(member_id)

    def update_team_member(self, existing: TeamMember, first_name: str, last_name: str,
                           email: str) -> Optional[TeamMember]:
        """Overwrite the mutable fields of an already-located member and persist it.

        Returns None when the record was deleted after it was located; nothing
        is recreated in that case.
        """
        existing.first_name = first_name
        existing.last_name = last_name
        existing.email = email
        updated = self._repo.update(existing)
        if updated is None:
            return None
        logger.info("Team member updated member_id=%s", updated.member_id)
        return updated

    def delete_team_member(self, member_id: str) -> bool:
        if self._repo.find_by_member_id(member_id) is None:
            logger.info("Delete of unknown member_id=%s ignored", member_id)
            return False
        removed = self._repo.delete_by_member_id(member_id) > 0
        if removed:
            TEAM_MEMBERS_DELETED.inc()
            TEAM_MEMBERS_TOTAL.dec()
            logger.info("Team member deleted member_id=%s", member_id)
        return removed

    def _reject_email(self, email: str) -> DuplicateEmail:
        TEAM_MEMBER_REJECTIONS.labels(reason="duplicate_email").inc()
        logger.warning("Create rejected, email already registered email=%s", email)
        return DuplicateEmail(email)
