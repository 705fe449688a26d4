"""Normalization errors."""


class ParseError(ValueError):
    """Raised when an API record cannot be normalized into a typed model."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field
