# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Domain-operation tests — TeamMemberService with a mocked record store.
"""
from unittest.mock import MagicMock

import pytest

from team_directory.models import TeamMember
from team_directory.repositories.team_member_repository import (
    ConstraintViolation, TeamMemberRepository,
)
from team_directory.services.team_member_service import (
    Created, DuplicateEmail, DuplicateMemberId, InvalidMember, TeamMemberService,
)


@pytest.fixture
def mock_repo():
    repo = MagicMock(spec=TeamMemberRepository)
    repo.find_by_email.return_value = None
    repo.find_by_member_id.return_value = None
    repo.insert.side_effect = lambda m: m
    repo.update.side_effect = lambda m: m
    return repo


@pytest.fixture
def service(mock_repo):
    return TeamMemberService(mock_repo)


def _member(member_id="TM1", email="ada@example.com"):
    return TeamMember(id=1, member_id=member_id, first_name="Ada",
                      last_name="Lovelace", email=email)


class TestCreate:
    def test_create_inserts_when_email_free(self, service, mock_repo):
        outcome = service.create_team_member("TM1", "Ada", "Lovelace", "ada@example.com")
        assert isinstance(outcome, Created)
        assert outcome.member.member_id == "TM1"
        mock_repo.find_by_email.assert_called_once_with("ada@example.com")
        mock_repo.insert.assert_called_once()

    def test_create_rejects_taken_email(self, service, mock_repo):
        mock_repo.find_by_email.return_value = _member()
        outcome = service.create_team_member("TM2", "Bob", "Smith", "ada@example.com")
        assert outcome == DuplicateEmail("ada@example.com")
        mock_repo.insert.assert_not_called()

    def test_create_rejects_taken_member_id(self, service, mock_repo):
        mock_repo.find_by_member_id.return_value = _member()
        outcome = service.create_team_member("TM1", "Bob", "Smith", "bob@example.com")
        assert outcome == DuplicateMemberId("TM1")
        mock_repo.insert.assert_not_called()

    @pytest.mark.parametrize("args", [
        ("", "Ada", "Lovelace", "ada@example.com"),
        ("TM1", "  ", "Lovelace", "ada@example.com"),
        ("TM1", "Ada", "", "ada@example.com"),
    ])
    def test_create_rejects_blank_fields(self, service, mock_repo, args):
        outcome = service.create_team_member(*args)
        assert isinstance(outcome, InvalidMember)
        mock_repo.find_by_email.assert_not_called()
        mock_repo.insert.assert_not_called()

    def test_create_race_on_email_reports_duplicate_email(self, service, mock_repo):
        # the pre-check passes, then a concurrent create wins the insert
        mock_repo.find_by_email.side_effect = [None, _member("TM9")]
        mock_repo.insert.side_effect = ConstraintViolation("UNIQUE constraint failed: team_member.email")
        outcome = service.create_team_member("TM1", "Ada", "Lovelace", "ada@example.com")
        assert outcome == DuplicateEmail("ada@example.com")

    def test_create_race_on_member_id_reports_duplicate_member_id(self, service, mock_repo):
        mock_repo.insert.side_effect = ConstraintViolation("UNIQUE constraint failed: team_member.member_id")
        outcome = service.create_team_member("TM1", "Ada", "Lovelace", "ada@example.com")
        assert outcome == DuplicateMemberId("TM1")


class TestRead:
    def test_list_returns_store_result_verbatim(self, service, mock_repo):
        members = [_member("TM1", "a@example.com"), _member("TM2", "b@example.com")]
        mock_repo.find_all.return_value = members
        assert service.list_team_members() is members

    def test_get_present(self, service, mock_repo):
        mock_repo.find_by_member_id.return_value = _member()
        assert service.get_team_member("TM1").email == "ada@example.com"

    def test_get_absent_is_none(self, service, mock_repo):
        assert service.get_team_member("missing") is None


class TestUpdate:
    def test_update_copies_mutable_fields(self, service, mock_repo):
        existing = _member()
        updated = service.update_team_member(existing, "Grace", "Hopper", "grace@example.com")
        assert (updated.member_id, updated.first_name, updated.last_name, updated.email) == (
            "TM1", "Grace", "Hopper", "grace@example.com",
        )
        mock_repo.update.assert_called_once_with(existing)
        mock_repo.find_by_email.assert_not_called()

    def test_update_returns_none_when_record_vanished(self, service, mock_repo):
        mock_repo.update.side_effect = None
        mock_repo.update.return_value = None
        assert service.update_team_member(_member(), "Grace", "Hopper", "grace@example.com") is None

    def test_update_propagates_constraint_violation(self, service, mock_repo):
        mock_repo.update.side_effect = ConstraintViolation("UNIQUE constraint failed: team_member.email")
        with pytest.raises(ConstraintViolation):
            service.update_team_member(_member(), "Grace", "Hopper", "taken@example.com")


class TestDelete:
    def test_delete_existing(self, service, mock_repo):
        mock_repo.find_by_member_id.return_value = _member()
        mock_repo.delete_by_member_id.return_value = 1
        assert service.delete_team_member("TM1") is True
        mock_repo.delete_by_member_id.assert_called_once_with("TM1")

    def test_delete_missing_is_silent_noop(self, service, mock_repo):
        assert service.delete_team_member("ghost") is False
        mock_repo.delete_by_member_id.assert_not_called()


def test_seed_gauges_reads_count(service, mock_repo):
    mock_repo.count.return_value = 7
    service.seed_gauges()
    mock_repo.count.assert_called_once()
