"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the rules that span an invitation and the
    records guests attach to it.
    """

    pass
