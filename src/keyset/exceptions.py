"""Exception types for the jwkset core."""


class KeySetError(Exception):
    """Base exception for all key and key set errors."""
    pass


class DataError(KeySetError):
    """Input is malformed or semantically invalid."""
    def __init__(self, message: str, field: str | None = None, source: str | None = None) -> None:
        super().__init__(message)
        self.field = field
        self.source = source


class OperationError(KeySetError):
    """Operation was invoked in an unsupported way."""
    pass
