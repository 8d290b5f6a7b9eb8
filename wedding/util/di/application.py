"""Application layer DI providers."""

from dishka import Scope, provide

from wedding.application.usecase.comment import (
    CreateCommentUseCase,
    GetCommentsUseCase,
)
from wedding.application.usecase.gift import (
    ConfirmGiftUseCase,
    GetGiftsUseCase,
    RecordGiftUseCase,
)
from wedding.application.usecase.invitation import (
    CreateInvitationUseCase,
    GetInvitationUseCase,
    GetPublicInvitationUseCase,
    ListInvitationsUseCase,
    PublishInvitationUseCase,
    UpdateInvitationUseCase,
)
from wedding.application.usecase.schema import BootstrapSchemaUseCase
from wedding.config import Settings
from wedding.domain.service import (
    CommentService,
    GiftService,
    InvitationService,
    SchemaService,
)
from wedding.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Invitation use cases
    @provide(scope=Scope.REQUEST)
    def get_create_invitation_use_case(
        self, invitation_service: InvitationService, settings: Settings
    ) -> CreateInvitationUseCase:
        """Provide create invitation use case."""
        return CreateInvitationUseCase(
            invitation_service=invitation_service, settings=settings
        )

    @provide(scope=Scope.REQUEST)
    def get_update_invitation_use_case(
        self, invitation_service: InvitationService, settings: Settings
    ) -> UpdateInvitationUseCase:
        """Provide update invitation use case."""
        return UpdateInvitationUseCase(
            invitation_service=invitation_service, settings=settings
        )

    @provide(scope=Scope.REQUEST)
    def get_get_invitation_use_case(
        self, invitation_service: InvitationService, settings: Settings
    ) -> GetInvitationUseCase:
        """Provide get invitation use case."""
        return GetInvitationUseCase(
            invitation_service=invitation_service, settings=settings
        )

    @provide(scope=Scope.REQUEST)
    def get_get_public_invitation_use_case(
        self, invitation_service: InvitationService, settings: Settings
    ) -> GetPublicInvitationUseCase:
        """Provide get public invitation use case."""
        return GetPublicInvitationUseCase(
            invitation_service=invitation_service, settings=settings
        )

    @provide(scope=Scope.REQUEST)
    def get_list_invitations_use_case(
        self, invitation_service: InvitationService, settings: Settings
    ) -> ListInvitationsUseCase:
        """Provide list invitations use case."""
        return ListInvitationsUseCase(
            invitation_service=invitation_service, settings=settings
        )

    @provide(scope=Scope.REQUEST)
    def get_publish_invitation_use_case(
        self, invitation_service: InvitationService, settings: Settings
    ) -> PublishInvitationUseCase:
        """Provide publish invitation use case."""
        return PublishInvitationUseCase(
            invitation_service=invitation_service, settings=settings
        )

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self,
        comment_service: CommentService,
        invitation_service: InvitationService,
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service,
            invitation_service=invitation_service,
        )

    # Gift use cases
    @provide(scope=Scope.REQUEST)
    def get_record_gift_use_case(self, gift_service: GiftService) -> RecordGiftUseCase:
        """Provide record gift use case."""
        return RecordGiftUseCase(gift_service=gift_service)

    @provide(scope=Scope.REQUEST)
    def get_get_gifts_use_case(
        self, gift_service: GiftService, invitation_service: InvitationService
    ) -> GetGiftsUseCase:
        """Provide get gifts use case."""
        return GetGiftsUseCase(
            gift_service=gift_service, invitation_service=invitation_service
        )

    @provide(scope=Scope.REQUEST)
    def get_confirm_gift_use_case(
        self, gift_service: GiftService, invitation_service: InvitationService
    ) -> ConfirmGiftUseCase:
        """Provide confirm gift use case."""
        return ConfirmGiftUseCase(
            gift_service=gift_service, invitation_service=invitation_service
        )

    # Schema use cases
    @provide(scope=Scope.REQUEST)
    def get_bootstrap_schema_use_case(
        self, schema_service: SchemaService
    ) -> BootstrapSchemaUseCase:
        """Provide bootstrap schema use case."""
        return BootstrapSchemaUseCase(schema_service=schema_service)
