"""Invitation domain service."""

from typing import Any
from uuid import uuid4

import logfire

from wedding.domain.error import (
    BusinessRuleViolationError,
    NotAuthorizedError,
    NotFoundError,
    SlugTakenError,
)
from wedding.domain.model.invitation import Invitation
from wedding.domain.repository import InvitationRepository
from wedding.domain.value import InvitationId, Slug, UserId

from .base import Service

# Upper bound on numbered variants tried for a generated slug
MAX_SLUG_ATTEMPTS = 1000


class InvitationService(Service):
    """Domain service for invitation operations."""

    def __init__(self, invitation_repository: InvitationRepository) -> None:
        """Initialize invitation service.

        Args:
            invitation_repository: Invitation repository
        """
        self.invitation_repository = invitation_repository

    async def create_invitation(self, owner_id: UserId, **fields: Any) -> Invitation:
        """Create a draft invitation.

        The share slug is the custom slug when one is given. Otherwise it is
        generated from the couple's names and numbered on collision.

        Args:
            owner_id: Owner user ID
            **fields: Invitation fields

        Returns:
            Created invitation

        Raises:
            SlugTakenError: If the custom slug is already in use
            pydantic.ValidationError: If the fields don't form a valid invitation
        """
        with logfire.span(
            "invitation_service.create_invitation",
            owner_id=str(owner_id),
            custom_slug=str(fields.get("custom_slug") or ""),
        ):
            invitation = Invitation(
                **fields, id=InvitationId(uuid4()), owner_id=owner_id
            )

            if invitation.custom_slug is not None:
                if await self.invitation_repository.slug_exists(invitation.slug):
                    logfire.warn("Custom slug taken", slug=str(invitation.slug))
                    raise SlugTakenError(str(invitation.slug))
            else:
                slug = await self._available_slug(invitation.slug)
                invitation = invitation.model_copy(update={"slug": slug})

            saved = await self.invitation_repository.save(invitation)
            logfire.info(
                "Invitation created",
                invitation_id=str(saved.id),
                owner_id=str(owner_id),
                slug=str(saved.slug),
            )
            return saved

    async def update_invitation(
        self, invitation_id: InvitationId, user_id: UserId, **changes: Any
    ) -> Invitation:
        """Apply changes to an invitation the user owns.

        Args:
            invitation_id: Invitation ID
            user_id: Acting user ID
            **changes: Fields to replace

        Returns:
            Updated invitation

        Raises:
            NotFoundError: If the invitation doesn't exist
            NotAuthorizedError: If the user isn't the owner
            SlugTakenError: If a new custom slug is already in use
        """
        with logfire.span(
            "invitation_service.update_invitation",
            invitation_id=str(invitation_id),
            user_id=str(user_id),
            fields=sorted(changes),
        ):
            invitation = await self.get_owned(invitation_id, user_id)

            if changes.get("custom_slug"):
                custom_slug = Slug.model_validate(changes["custom_slug"])
                if custom_slug != invitation.slug and (
                    await self.invitation_repository.slug_exists(
                        custom_slug, exclude_id=invitation_id
                    )
                ):
                    logfire.warn("Custom slug taken", slug=str(custom_slug))
                    raise SlugTakenError(str(custom_slug))

            updated = invitation.apply_changes(**changes)
            saved = await self.invitation_repository.save(updated)
            logfire.info(
                "Invitation updated",
                invitation_id=str(invitation_id),
                slug=str(saved.slug),
            )
            return saved

    async def publish(self, invitation_id: InvitationId, user_id: UserId) -> Invitation:
        """Publish an invitation so guests can see it.

        Raises:
            NotFoundError: If the invitation doesn't exist
            NotAuthorizedError: If the user isn't the owner
        """
        with logfire.span(
            "invitation_service.publish",
            invitation_id=str(invitation_id),
            user_id=str(user_id),
        ):
            invitation = await self.get_owned(invitation_id, user_id)
            if invitation.is_published:
                return invitation

            saved = await self.invitation_repository.save(invitation.publish())
            logfire.info("Invitation published", invitation_id=str(invitation_id))
            return saved

    async def unpublish(
        self, invitation_id: InvitationId, user_id: UserId
    ) -> Invitation:
        """Move an invitation back to draft."""
        with logfire.span(
            "invitation_service.unpublish",
            invitation_id=str(invitation_id),
            user_id=str(user_id),
        ):
            invitation = await self.get_owned(invitation_id, user_id)
            if not invitation.is_published:
                return invitation

            saved = await self.invitation_repository.save(invitation.unpublish())
            logfire.info("Invitation unpublished", invitation_id=str(invitation_id))
            return saved

    async def get_by_id(self, invitation_id: InvitationId) -> Invitation | None:
        """Get an invitation by ID.

        Args:
            invitation_id: Invitation ID

        Returns:
            Invitation if found, None otherwise
        """
        with logfire.span(
            "invitation_service.get_by_id", invitation_id=str(invitation_id)
        ):
            invitation = await self.invitation_repository.find_by_id(invitation_id)
            if invitation:
                logfire.info("Invitation found", invitation_id=str(invitation_id))
            else:
                logfire.warn("Invitation not found", invitation_id=str(invitation_id))
            return invitation

    async def get_owned(
        self, invitation_id: InvitationId, user_id: UserId
    ) -> Invitation:
        """Get an invitation, requiring the user to own it.

        Raises:
            NotFoundError: If the invitation doesn't exist
            NotAuthorizedError: If the user isn't the owner
        """
        invitation = await self.get_by_id(invitation_id)
        if invitation is None:
            raise NotFoundError("Invitation", str(invitation_id))
        if not invitation.is_owned_by(user_id):
            logfire.warn(
                "Invitation access denied",
                invitation_id=str(invitation_id),
                user_id=str(user_id),
            )
            raise NotAuthorizedError("invitation", str(invitation_id), str(user_id))
        return invitation

    async def get_published_by_slug(self, slug: Slug) -> Invitation | None:
        """Get the invitation guests see at a share slug.

        Drafts are treated as missing.

        Args:
            slug: Share slug

        Returns:
            Published invitation if found, None otherwise
        """
        with logfire.span("invitation_service.get_published_by_slug", slug=str(slug)):
            invitation = await self.invitation_repository.find_by_slug(slug)
            if invitation is None or not invitation.is_published:
                logfire.warn("Published invitation not found", slug=str(slug))
                return None
            return invitation

    async def list_for_owner(self, owner_id: UserId) -> list[Invitation]:
        """List an owner's invitations, newest first."""
        with logfire.span(
            "invitation_service.list_for_owner", owner_id=str(owner_id)
        ):
            invitations = await self.invitation_repository.find_by_owner(owner_id)
            logfire.info(
                "Invitations retrieved for owner",
                owner_id=str(owner_id),
                count=len(invitations),
            )
            return invitations

    async def _available_slug(self, base: Slug) -> Slug:
        """First of ``base``, ``base-2``, ``base-3``, ... not in use."""
        if not await self.invitation_repository.slug_exists(base):
            return base

        for counter in range(2, MAX_SLUG_ATTEMPTS + 2):
            candidate = base.with_suffix(counter)
            if not await self.invitation_repository.slug_exists(candidate):
                return candidate

        logfire.error("No free slug variant", base=str(base))
        raise BusinessRuleViolationError(f"No available slug for {base}")
