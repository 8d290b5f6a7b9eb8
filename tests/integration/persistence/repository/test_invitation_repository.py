"""Integration tests for the invitation-side repositories.

Run against the in-memory implementations by default; pass
``unmock={"persistence"}`` to run them against Postgres with
``supabase/init.sql`` applied.
"""

from datetime import timedelta
from decimal import Decimal
from uuid import uuid4

import pytest

from wedding.domain.model import Comment, Gift
from wedding.domain.repository import (
    CommentRepository,
    GiftRepository,
    InvitationRepository,
)
from wedding.domain.value import Attendance, CommentId, GiftId, Slug
from tests.conftest import make_invitation, make_user_id
from tests.harness import create_env_fixture

# Integration test fixture
integration_env = create_env_fixture()


class TestInvitationRepositoryIntegration:
    """Save and lookup behaviour of InvitationRepository."""

    @pytest.mark.asyncio
    async def test_save_assigns_missing_id(self, integration_env):
        # Arrange
        repo = await integration_env.get(InvitationRepository)
        invitation = make_invitation(custom_slug="no-id-yet").model_copy(
            update={"id": None}
        )

        # Act
        saved = await repo.save(invitation)

        # Assert
        assert saved.id is not None
        assert await repo.find_by_id(saved.id) == saved

    @pytest.mark.asyncio
    async def test_save_updates_existing(self, integration_env):
        repo = await integration_env.get(InvitationRepository)
        saved = await repo.save(make_invitation(custom_slug="update-me"))

        await repo.save(saved.apply_changes(venue="Pendopo"))

        found = await repo.find_by_id(saved.id)
        assert found.venue == "Pendopo"

    @pytest.mark.asyncio
    async def test_find_by_slug(self, integration_env):
        repo = await integration_env.get(InvitationRepository)
        saved = await repo.save(make_invitation(custom_slug="find-me"))

        assert (await repo.find_by_slug(Slug("find-me"))).id == saved.id
        assert await repo.find_by_slug(Slug("missing")) is None

    @pytest.mark.asyncio
    async def test_slug_exists_can_exclude_an_invitation(self, integration_env):
        """An invitation never conflicts with its own slug."""
        # Arrange
        repo = await integration_env.get(InvitationRepository)
        saved = await repo.save(make_invitation(custom_slug="mine"))

        # Act & Assert
        assert await repo.slug_exists(Slug("mine"))
        assert not await repo.slug_exists(Slug("mine"), exclude_id=saved.id)
        assert not await repo.slug_exists(Slug("free"))

    @pytest.mark.asyncio
    async def test_find_by_owner_newest_first(self, integration_env):
        # Arrange
        repo = await integration_env.get(InvitationRepository)
        owner_id = make_user_id()
        older = make_invitation(owner_id=owner_id, custom_slug="older")
        newer = make_invitation(owner_id=owner_id, custom_slug="newer").model_copy(
            update={"created_at": older.created_at + timedelta(days=1)}
        )
        await repo.save(older)
        await repo.save(newer)

        # Act
        found = await repo.find_by_owner(owner_id)

        # Assert
        assert [i.id for i in found] == [newer.id, older.id]


class TestGuestRepositoriesIntegration:
    """Comment and gift persistence."""

    @pytest.mark.asyncio
    async def test_count_by_attendance_fills_missing_answers(self, integration_env):
        # Arrange
        invitations = await integration_env.get(InvitationRepository)
        comments = await integration_env.get(CommentRepository)
        invitation = await invitations.save(make_invitation(custom_slug="counted"))
        await comments.save(
            Comment(
                id=CommentId(uuid4()),
                invitation_id=invitation.id,
                name="Rina",
                message="Hadir",
                attendance=Attendance.YES,
            )
        )

        # Act
        counts = await comments.count_by_attendance(invitation.id)

        # Assert
        assert counts == {Attendance.YES: 1, Attendance.NO: 0, Attendance.MAYBE: 0}

    @pytest.mark.asyncio
    async def test_mark_confirmed(self, integration_env):
        # Arrange
        invitations = await integration_env.get(InvitationRepository)
        gifts = await integration_env.get(GiftRepository)
        invitation = await invitations.save(make_invitation(custom_slug="gifted"))
        gift = await gifts.save(
            Gift(
                id=GiftId(uuid4()),
                invitation_id=invitation.id,
                sender_name="Andi",
                amount=Decimal("75000"),
                bank_account="BCA 0123",
            )
        )

        # Act
        confirmed = await gifts.mark_confirmed(gift.id)

        # Assert
        assert confirmed.confirmed is True
        assert (await gifts.find_by_id(gift.id)).confirmed is True
        assert await gifts.mark_confirmed(GiftId(uuid4())) is None
