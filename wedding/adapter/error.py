"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class ProviderError(AdapterError):
    """External provider error."""

    pass


class RemoteExecutionError(ProviderError):
    """The backend rejected or failed to execute a submitted statement."""

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        if status_code is not None:
            super().__init__(f"Remote execution failed ({status_code}): {message}")
        else:
            super().__init__(f"Remote execution failed: {message}")
