"""Error types raised at the service and adapter boundaries."""


class RecordValidationError(ValueError):
    """Raised when a create request fails its local preconditions."""


class RecordStoreError(RuntimeError):
    """Raised when a remote record store call fails."""

    def __init__(
        self, message: str, errors: list[dict[str, object]] | None = None
    ) -> None:
        super().__init__(message)
        self.errors = errors or []

    def detail(self) -> dict[str, object]:
        """Return a structured description suitable for logging."""
        return {"message": str(self), "errors": self.errors}


class SessionResolutionError(RuntimeError):
    """Raised when the identity provider cannot resolve a session."""
