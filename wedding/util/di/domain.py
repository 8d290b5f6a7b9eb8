"""Domain layer DI providers."""

from dishka import Scope, provide

from wedding.adapter.backend import BackendSchemaClient
from wedding.config import AuthSettings
from wedding.domain.repository import (
    CommentRepository,
    GiftRepository,
    InvitationRepository,
)
from wedding.domain.service import (
    CommentService,
    GiftService,
    InvitationService,
    JWTService,
    SchemaService,
)
from wedding.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_invitation_service(
        self, invitation_repository: InvitationRepository
    ) -> InvitationService:
        """Provide invitation domain service."""
        return InvitationService(invitation_repository=invitation_repository)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        invitation_repository: InvitationRepository,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            invitation_repository=invitation_repository,
        )

    @provide
    def get_gift_service(
        self,
        gift_repository: GiftRepository,
        invitation_repository: InvitationRepository,
    ) -> GiftService:
        """Provide gift domain service."""
        return GiftService(
            gift_repository=gift_repository,
            invitation_repository=invitation_repository,
        )

    @provide
    def get_schema_service(self, schema_client: BackendSchemaClient) -> SchemaService:
        """Provide schema provisioning domain service."""
        return SchemaService(schema_client=schema_client)
