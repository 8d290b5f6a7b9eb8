"""Unit tests for the invitation use cases."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from wedding.application.usecase.invitation import (
    CreateInvitationRequest,
    CreateInvitationUseCase,
    GetInvitationRequest,
    GetInvitationUseCase,
    GetPublicInvitationRequest,
    GetPublicInvitationUseCase,
    ListInvitationsRequest,
    ListInvitationsUseCase,
    PublishInvitationRequest,
    PublishInvitationUseCase,
    UpdateInvitationRequest,
    UpdateInvitationUseCase,
)
from wedding.config import Settings
from wedding.domain.error import NotAuthorizedError, NotFoundError
from wedding.domain.value import InvitationStatus
from tests.conftest import invitation_fields, make_user_id
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _create(unit_env, owner_id, **overrides):
    use_case = await unit_env.get(CreateInvitationUseCase)
    response = await use_case.execute(
        CreateInvitationRequest(
            owner_id=str(owner_id), **invitation_fields(**overrides)
        )
    )
    return response.invitation


class TestCreateInvitationUseCase:
    """Tests for CreateInvitationUseCase."""

    @pytest.mark.asyncio
    async def test_returns_draft_with_share_url(self, unit_env):
        # Arrange
        settings = await unit_env.get(Settings)
        owner_id = make_user_id()

        # Act
        item = await _create(unit_env, owner_id, custom_slug="siti-budi")

        # Assert
        assert item.owner_id == str(owner_id)
        assert item.status == InvitationStatus.DRAFT
        assert item.slug == "siti-budi"
        assert item.share_url == (
            f"{settings.sharing.public_base_url.rstrip('/')}/siti-budi"
        )

    @pytest.mark.asyncio
    async def test_markup_is_sanitized_in_response(self, unit_env):
        item = await _create(
            unit_env,
            make_user_id(),
            message="<p>Datang ya</p><script>x()</script>",
            google_maps_embed='<iframe src="https://evil.example/"></iframe>',
        )

        assert item.message == "<p>Datang ya</p>"
        assert "evil.example" not in item.google_maps_embed

    @pytest.mark.asyncio
    async def test_absent_optional_fields_stay_absent(self, unit_env):
        item = await _create(unit_env, make_user_id(), gallery=[])

        assert item.gallery == []
        assert item.bank_accounts is None
        assert item.social_links is None
        assert item.google_maps_embed is None

    def test_request_rejects_invalid_custom_slug(self):
        with pytest.raises(ValidationError):
            CreateInvitationRequest(
                owner_id=str(uuid4()), **invitation_fields(custom_slug="Not OK")
            )


class TestUpdateInvitationUseCase:
    """Tests for UpdateInvitationUseCase."""

    @pytest.mark.asyncio
    async def test_only_set_fields_change(self, unit_env):
        # Arrange
        owner_id = make_user_id()
        created = await _create(
            unit_env, owner_id, opening_text="Bismillah", gallery=["a.jpg"]
        )
        use_case = await unit_env.get(UpdateInvitationUseCase)

        # Act
        response = await use_case.execute(
            UpdateInvitationRequest(
                invitation_id=created.invitation_id,
                user_id=str(owner_id),
                venue="Masjid Agung",
                gallery=None,
            )
        )

        # Assert
        updated = response.invitation
        assert updated.venue == "Masjid Agung"
        assert updated.gallery is None
        assert updated.opening_text == "Bismillah"
        assert updated.bride_names == created.bride_names

    @pytest.mark.asyncio
    async def test_non_owner_is_rejected(self, unit_env):
        created = await _create(unit_env, make_user_id())
        use_case = await unit_env.get(UpdateInvitationUseCase)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                UpdateInvitationRequest(
                    invitation_id=created.invitation_id,
                    user_id=str(make_user_id()),
                    venue="Elsewhere",
                )
            )


class TestGetInvitationUseCases:
    """Tests for the owner and public views."""

    @pytest.mark.asyncio
    async def test_owner_sees_draft(self, unit_env):
        owner_id = make_user_id()
        created = await _create(unit_env, owner_id)
        use_case = await unit_env.get(GetInvitationUseCase)

        response = await use_case.execute(
            GetInvitationRequest(
                invitation_id=created.invitation_id, user_id=str(owner_id)
            )
        )

        assert response.invitation.invitation_id == created.invitation_id

    @pytest.mark.asyncio
    async def test_other_user_cannot_see_draft(self, unit_env):
        created = await _create(unit_env, make_user_id())
        use_case = await unit_env.get(GetInvitationUseCase)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                GetInvitationRequest(
                    invitation_id=created.invitation_id, user_id=str(make_user_id())
                )
            )

    @pytest.mark.asyncio
    async def test_public_view_requires_publication(self, unit_env):
        # Arrange
        owner_id = make_user_id()
        created = await _create(unit_env, owner_id)
        public = await unit_env.get(GetPublicInvitationUseCase)
        publish = await unit_env.get(PublishInvitationUseCase)

        # Act & Assert - draft is hidden
        with pytest.raises(NotFoundError):
            await public.execute(GetPublicInvitationRequest(slug=created.slug))

        # Act & Assert - published is visible
        await publish.execute(
            PublishInvitationRequest(
                invitation_id=created.invitation_id, user_id=str(owner_id)
            )
        )
        response = await public.execute(GetPublicInvitationRequest(slug=created.slug))
        assert response.invitation.status == InvitationStatus.PUBLISHED

    @pytest.mark.asyncio
    async def test_unpublish(self, unit_env):
        owner_id = make_user_id()
        created = await _create(unit_env, owner_id)
        publish = await unit_env.get(PublishInvitationUseCase)
        await publish.execute(
            PublishInvitationRequest(
                invitation_id=created.invitation_id, user_id=str(owner_id)
            )
        )

        response = await publish.execute(
            PublishInvitationRequest(
                invitation_id=created.invitation_id,
                user_id=str(owner_id),
                publish=False,
            )
        )

        assert response.invitation.status == InvitationStatus.DRAFT


class TestListInvitationsUseCase:
    @pytest.mark.asyncio
    async def test_lists_owner_invitations(self, unit_env):
        owner_id = make_user_id()
        await _create(unit_env, owner_id)
        await _create(unit_env, owner_id, custom_slug="second")
        await _create(unit_env, make_user_id(), custom_slug="other")
        use_case = await unit_env.get(ListInvitationsUseCase)

        response = await use_case.execute(ListInvitationsRequest(owner_id=str(owner_id)))

        assert response.total == 2
        assert {i.owner_id for i in response.invitations} == {str(owner_id)}
