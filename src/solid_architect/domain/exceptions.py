"""Custom exceptions for SOLID Architect."""


class SolidArchitectError(Exception):
    """Base exception for all SOLID Architect errors."""

    pass


class MalformedInputError(SolidArchitectError):
    """Raised when a declaration listing cannot form a valid design graph.

    Attributes:
        names: The offending type or method names.
    """

    def __init__(self, message: str, names: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.names = names


class DeclarationSourceError(SolidArchitectError):
    """Raised when the declaration listing cannot be read at all."""

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(message)
        self.path = path


class ConfigurationError(SolidArchitectError):
    """Raised when [tool.solid-architect] holds an invalid value."""

    pass
