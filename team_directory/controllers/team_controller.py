# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Controller: team member CRUD."""
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse

from team_directory.core.dependencies import get_team_member_service
from team_directory.repositories.team_member_repository import ConstraintViolation
from team_directory.schemas import ErrorResponse, TeamMemberCreate, TeamMemberOut, TeamMemberUpdate
from team_directory.services.team_member_service import (
    Created, DuplicateEmail, DuplicateMemberId, InvalidMember, TeamMemberService,
)

router = APIRouter(prefix="/api/team", tags=["Team"])

DELETED_MESSAGE = "Team member deleted successfully!"

_NOT_FOUND = {404: {"model": ErrorResponse}}
_CONFLICT = {400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}}


@router.post("", status_code=201, response_model=TeamMemberOut, responses=_CONFLICT)
def create_team_member(body: TeamMemberCreate,
                       service: TeamMemberService = Depends(get_team_member_service)):
    outcome = service.create_team_member(
        member_id=body.member_id, first_name=body.first_name,
        last_name=body.last_name, email=body.email,
    )
    if isinstance(outcome, Created):
        return TeamMemberOut.model_validate(outcome.member)
    if isinstance(outcome, DuplicateEmail):
        raise HTTPException(
            status_code=409,
            detail=f"A team member already exists with the given email: {outcome.email}",
        )
    if isinstance(outcome, DuplicateMemberId):
        raise HTTPException(
            status_code=409,
            detail=f"A team member already exists with the given memberId: {outcome.member_id}",
        )
    if isinstance(outcome, InvalidMember):
        raise HTTPException(status_code=400, detail=outcome.reason)
    raise TypeError(f"Unexpected create outcome: {outcome!r}")


@router.get("", response_model=List[TeamMemberOut])
def list_team_members(service: TeamMemberService = Depends(get_team_member_service)):
    return [TeamMemberOut.model_validate(m) for m in service.list_team_members()]


@router.get("/{member_id}", response_model=TeamMemberOut, responses=_NOT_FOUND)
def get_team_member(member_id: str,
                    service: TeamMemberService = Depends(get_team_member_service)):
    member = service.get_team_member(member_id)
    if member is None:
        raise HTTPException(status_code=404, detail="Team member not found")
    return TeamMemberOut.model_validate(member)


@router.put("/{member_id}", response_model=TeamMemberOut, responses={**_NOT_FOUND, **_CONFLICT})
def update_team_member(member_id: str, body: TeamMemberUpdate,
                       service: TeamMemberService = Depends(get_team_member_service)):
    existing = service.get_team_member(member_id)
    if existing is None:
        raise HTTPException(status_code=404, detail="Team member not found")
    try:
        updated = service.update_team_member(
            existing, first_name=body.first_name,
            last_name=body.last_name, email=body.email,
        )
    except ConstraintViolation:
        raise HTTPException(
            status_code=409,
            detail=f"A team member already exists with the given email: {body.email}",
        )
    if updated is None:
        raise HTTPException(status_code=404, detail="Team member not found")
    return TeamMemberOut.model_validate(updated)


@router.delete("/{member_id}", response_class=PlainTextResponse)
def delete_team_member(member_id: str,
                       service: TeamMemberService = Depends(get_team_member_service)):
    service.delete_team_member(member_id)
    return DELETED_MESSAGE
