"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to change an invitation they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class SlugTakenError(BusinessRuleViolationError):
    """Raised when a custom slug is already used by another invitation."""

    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"Slug already in use: {slug}")


class InvitationNotPublishedError(BusinessRuleViolationError):
    """Raised when guests interact with an invitation that is still a draft."""

    def __init__(self, invitation_id: str):
        super().__init__(f"Invitation {invitation_id} is not published")


class CommentsClosedError(BusinessRuleViolationError):
    """Raised when a guest comments on an invitation with comments disabled."""

    def __init__(self, invitation_id: str):
        super().__init__(f"Comments are closed on invitation {invitation_id}")


class RsvpClosedError(BusinessRuleViolationError):
    """Raised when a guest confirms attendance but no more answers are taken."""

    def __init__(self, invitation_id: str, reason: str):
        self.reason = reason
        super().__init__(f"RSVP closed on invitation {invitation_id}: {reason}")
