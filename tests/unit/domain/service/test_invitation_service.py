"""Unit tests for InvitationService."""

from uuid import uuid4

import pytest

from wedding.domain.error import NotAuthorizedError, NotFoundError, SlugTakenError
from wedding.domain.repository import InvitationRepository
from wedding.domain.service import InvitationService
from wedding.domain.value import InvitationId, InvitationStatus, Slug
from tests.conftest import invitation_fields, make_invitation, make_user_id
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestCreateInvitation:
    """Tests for create_invitation."""

    @pytest.mark.asyncio
    async def test_creates_draft_with_generated_slug(self, unit_env):
        """A new invitation is a saved draft with a slug from the names."""
        # Arrange
        service = await unit_env.get(InvitationService)
        repo = await unit_env.get(InvitationRepository)
        owner_id = make_user_id()

        # Act
        invitation = await service.create_invitation(owner_id, **invitation_fields())

        # Assert
        assert invitation.id is not None
        assert invitation.owner_id == owner_id
        assert invitation.status == InvitationStatus.DRAFT
        assert invitation.slug == Slug("wedding-siti-budi")
        assert await repo.find_by_id(invitation.id) == invitation

    @pytest.mark.asyncio
    async def test_numbers_generated_slug_on_collision(self, unit_env):
        """Couples with the same names get -2, -3, ... suffixes."""
        # Arrange
        service = await unit_env.get(InvitationService)

        # Act
        first = await service.create_invitation(make_user_id(), **invitation_fields())
        second = await service.create_invitation(make_user_id(), **invitation_fields())
        third = await service.create_invitation(make_user_id(), **invitation_fields())

        # Assert
        assert first.slug == Slug("wedding-siti-budi")
        assert second.slug == Slug("wedding-siti-budi-2")
        assert third.slug == Slug("wedding-siti-budi-3")

    @pytest.mark.asyncio
    async def test_custom_slug_is_used(self, unit_env):
        service = await unit_env.get(InvitationService)

        invitation = await service.create_invitation(
            make_user_id(), **invitation_fields(custom_slug="siti-budi")
        )

        assert invitation.slug == Slug("siti-budi")

    @pytest.mark.asyncio
    async def test_taken_custom_slug_is_rejected(self, unit_env):
        """Custom slugs are never renamed; a taken one is an error."""
        # Arrange
        service = await unit_env.get(InvitationService)
        await service.create_invitation(
            make_user_id(), **invitation_fields(custom_slug="siti-budi")
        )

        # Act & Assert
        with pytest.raises(SlugTakenError):
            await service.create_invitation(
                make_user_id(), **invitation_fields(custom_slug="siti-budi")
            )

    @pytest.mark.asyncio
    async def test_custom_slug_cannot_take_a_generated_slug(self, unit_env):
        service = await unit_env.get(InvitationService)
        await service.create_invitation(make_user_id(), **invitation_fields())

        with pytest.raises(SlugTakenError):
            await service.create_invitation(
                make_user_id(), **invitation_fields(custom_slug="wedding-siti-budi")
            )


class TestUpdateInvitation:
    """Tests for update_invitation."""

    @pytest.mark.asyncio
    async def test_owner_can_update(self, unit_env):
        # Arrange
        service = await unit_env.get(InvitationService)
        owner_id = make_user_id()
        invitation = await service.create_invitation(owner_id, **invitation_fields())

        # Act
        updated = await service.update_invitation(
            invitation.id, owner_id, venue="Pendopo", gallery=[]
        )

        # Assert
        assert updated.venue == "Pendopo"
        assert updated.gallery == []
        assert updated.slug == invitation.slug

    @pytest.mark.asyncio
    async def test_non_owner_cannot_update(self, unit_env):
        service = await unit_env.get(InvitationService)
        invitation = await service.create_invitation(
            make_user_id(), **invitation_fields()
        )

        with pytest.raises(NotAuthorizedError):
            await service.update_invitation(
                invitation.id, make_user_id(), venue="Elsewhere"
            )

    @pytest.mark.asyncio
    async def test_missing_invitation(self, unit_env):
        service = await unit_env.get(InvitationService)

        with pytest.raises(NotFoundError):
            await service.update_invitation(
                InvitationId(uuid4()), make_user_id(), venue="x"
            )

    @pytest.mark.asyncio
    async def test_custom_slug_change_checks_uniqueness(self, unit_env):
        # Arrange
        service = await unit_env.get(InvitationService)
        owner_id = make_user_id()
        await service.create_invitation(
            make_user_id(), **invitation_fields(custom_slug="taken")
        )
        invitation = await service.create_invitation(owner_id, **invitation_fields())

        # Act & Assert
        with pytest.raises(SlugTakenError):
            await service.update_invitation(
                invitation.id, owner_id, custom_slug="taken"
            )

    @pytest.mark.asyncio
    async def test_keeping_own_custom_slug_is_allowed(self, unit_env):
        service = await unit_env.get(InvitationService)
        owner_id = make_user_id()
        invitation = await service.create_invitation(
            owner_id, **invitation_fields(custom_slug="ours")
        )

        updated = await service.update_invitation(
            invitation.id, owner_id, custom_slug="ours", venue="Hall"
        )

        assert updated.slug == Slug("ours")
        assert updated.venue == "Hall"

    @pytest.mark.asyncio
    async def test_new_custom_slug_moves_share_slug(self, unit_env):
        service = await unit_env.get(InvitationService)
        owner_id = make_user_id()
        invitation = await service.create_invitation(owner_id, **invitation_fields())

        updated = await service.update_invitation(
            invitation.id, owner_id, custom_slug="our-big-day"
        )

        assert updated.slug == Slug("our-big-day")
        repo = await unit_env.get(InvitationRepository)
        assert await repo.find_by_slug(invitation.slug) is None
        assert (await repo.find_by_slug(Slug("our-big-day"))).id == invitation.id


class TestPublishing:
    """Tests for publish, unpublish and public lookup."""

    @pytest.mark.asyncio
    async def test_publish_makes_invitation_public(self, unit_env):
        # Arrange
        service = await unit_env.get(InvitationService)
        owner_id = make_user_id()
        invitation = await service.create_invitation(owner_id, **invitation_fields())
        assert await service.get_published_by_slug(invitation.slug) is None

        # Act
        published = await service.publish(invitation.id, owner_id)

        # Assert
        assert published.is_published
        found = await service.get_published_by_slug(invitation.slug)
        assert found is not None
        assert found.id == invitation.id

    @pytest.mark.asyncio
    async def test_publish_twice_is_a_no_op(self, unit_env):
        service = await unit_env.get(InvitationService)
        owner_id = make_user_id()
        invitation = await service.create_invitation(owner_id, **invitation_fields())
        first = await service.publish(invitation.id, owner_id)

        second = await service.publish(invitation.id, owner_id)

        assert second == first

    @pytest.mark.asyncio
    async def test_unpublish_hides_invitation(self, unit_env):
        service = await unit_env.get(InvitationService)
        owner_id = make_user_id()
        invitation = await service.create_invitation(owner_id, **invitation_fields())
        await service.publish(invitation.id, owner_id)

        draft = await service.unpublish(invitation.id, owner_id)

        assert draft.status == InvitationStatus.DRAFT
        assert await service.get_published_by_slug(invitation.slug) is None

    @pytest.mark.asyncio
    async def test_non_owner_cannot_publish(self, unit_env):
        service = await unit_env.get(InvitationService)
        invitation = await service.create_invitation(
            make_user_id(), **invitation_fields()
        )

        with pytest.raises(NotAuthorizedError):
            await service.publish(invitation.id, make_user_id())


class TestListForOwner:
    @pytest.mark.asyncio
    async def test_lists_only_own_invitations(self, unit_env):
        # Arrange
        service = await unit_env.get(InvitationService)
        repo = await unit_env.get(InvitationRepository)
        owner_id = make_user_id()
        await repo.save(make_invitation(owner_id=owner_id))
        await repo.save(make_invitation(owner_id=owner_id, custom_slug="second"))
        await repo.save(make_invitation(custom_slug="someone-else"))

        # Act
        invitations = await service.list_for_owner(owner_id)

        # Assert
        assert len(invitations) == 2
        assert all(i.owner_id == owner_id for i in invitations)
