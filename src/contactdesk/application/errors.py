"""Store failures. Validation problems are returned as data, never raised."""


class StoreError(Exception):
    """A contact store operation failed (network or backend error)."""

    def __init__(self, operation: str, message: str = "") -> None:
        self.operation = operation
        super().__init__(message or f"Contact store {operation} failed.")
