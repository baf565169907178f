"""Tests for the document update policy."""

import itertools

import pytest

from signdesk.domains.documents.entities import DocumentVisibility
from signdesk.domains.documents.policy import (
    ALLOW,
    UPDATE_PERMISSION_DENIED,
    VISIBILITY_PERMISSION_DENIED,
    evaluate_update_policy,
)
from signdesk.domains.teams.entities import TeamMemberRole

VISIBILITIES = list(DocumentVisibility)
REQUESTED = [None, *VISIBILITIES]
ROLES = [None, *TeamMemberRole]


class TestOwnerOverride:
    """Owners bypass every role and visibility restriction."""

    @pytest.mark.parametrize(
        "role,current,requested", list(itertools.product(ROLES, VISIBILITIES, REQUESTED))
    )
    def test_owner_is_always_allowed(self, role, current, requested) -> None:
        """Should allow the owner for any role and visibility combination."""
        verdict = evaluate_update_policy(True, role, current, requested)
        assert verdict == ALLOW


class TestAdmin:
    @pytest.mark.parametrize("current,requested", list(itertools.product(VISIBILITIES, REQUESTED)))
    def test_admin_is_allowed(self, current, requested) -> None:
        """Should allow a non-owner admin regardless of visibility."""
        assert evaluate_update_policy(False, TeamMemberRole.ADMIN, current, requested).allowed


class TestManager:
    def test_allowed_within_manager_tiers(self) -> None:
        """Should allow moving between EVERYONE and MANAGER_AND_ABOVE."""
        verdict = evaluate_update_policy(
            False,
            TeamMemberRole.MANAGER,
            DocumentVisibility.EVERYONE,
            DocumentVisibility.MANAGER_AND_ABOVE,
        )
        assert verdict.allowed

    def test_allowed_without_visibility_request(self) -> None:
        """Should allow edits of a manager-visible document when visibility is untouched."""
        verdict = evaluate_update_policy(
            False, TeamMemberRole.MANAGER, DocumentVisibility.MANAGER_AND_ABOVE
        )
        assert verdict.allowed

    def test_denied_when_requesting_admin_visibility(self) -> None:
        """Should deny raising visibility to ADMIN."""
        verdict = evaluate_update_policy(
            False,
            TeamMemberRole.MANAGER,
            DocumentVisibility.EVERYONE,
            DocumentVisibility.ADMIN,
        )
        assert not verdict.allowed
        assert verdict.reason == VISIBILITY_PERMISSION_DENIED

    def test_denied_on_admin_document_even_without_visibility_change(self) -> None:
        """Should treat the current ADMIN visibility as a standing constraint."""
        verdict = evaluate_update_policy(False, TeamMemberRole.MANAGER, DocumentVisibility.ADMIN)
        assert not verdict.allowed
        assert verdict.reason == VISIBILITY_PERMISSION_DENIED


class TestMember:
    def test_allowed_on_everyone_document(self) -> None:
        verdict = evaluate_update_policy(
            False, TeamMemberRole.MEMBER, DocumentVisibility.EVERYONE, DocumentVisibility.EVERYONE
        )
        assert verdict.allowed

    def test_member_ceiling(self) -> None:
        """Should deny a member raising visibility to MANAGER_AND_ABOVE."""
        verdict = evaluate_update_policy(
            False,
            TeamMemberRole.MEMBER,
            DocumentVisibility.EVERYONE,
            DocumentVisibility.MANAGER_AND_ABOVE,
        )
        assert not verdict.allowed
        assert verdict.reason == VISIBILITY_PERMISSION_DENIED

    @pytest.mark.parametrize(
        "current", [DocumentVisibility.MANAGER_AND_ABOVE, DocumentVisibility.ADMIN]
    )
    def test_denied_on_restricted_document(self, current) -> None:
        """Should deny any edit of a document above the member tier."""
        verdict = evaluate_update_policy(False, TeamMemberRole.MEMBER, current)
        assert not verdict.allowed


class TestDefaultDeny:
    @pytest.mark.parametrize("role", [None, "BILLING"])
    def test_unknown_or_missing_role_is_denied(self, role) -> None:
        """Should deny non-owners without a recognised team role."""
        verdict = evaluate_update_policy(False, role, DocumentVisibility.EVERYONE)
        assert not verdict.allowed
        assert verdict.reason == UPDATE_PERMISSION_DENIED
