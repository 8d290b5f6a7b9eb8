"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Required configuration is missing or invalid."""

    pass


class ScriptReadError(UtilError):
    """A local script file could not be read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read script {path}: {reason}")


class DependencyInjectionError(UtilError):
    """Dependency injection error."""

    pass
