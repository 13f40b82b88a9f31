"""Domain-level exceptions."""


class InvalidRequestError(ValueError):
    """Raised when caller-supplied input fails validation."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
