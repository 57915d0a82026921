"""Exceptions raised by gql-tsgen."""


class GqlTsgenError(Exception):
    """Base class for all gql-tsgen errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class SchemaLoadError(GqlTsgenError):
    """Raised when a schema source cannot be read or parsed."""

    def __init__(self, message: str, source: str | None = None):
        self.source = source
        if source:
            message = f"{source}: {message}"
        super().__init__(message)


class FoldError(GqlTsgenError):
    """Raised when the AST fold meets a node shape valid input cannot produce."""
