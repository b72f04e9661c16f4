"""
Exceptions raised by the storage and service layers.
"""


class RecordNotFoundError(LookupError):
    """The target record does not exist."""

    def __init__(self, kind: str, record_id: int):
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"{kind.capitalize()} not found")


class NormalizationError(RuntimeError):
    """
    A write succeeded but the immediate re-read returned no document.

    The store and the read path disagree; callers must treat this as an
    unexpected server error.
    """

    def __init__(self, kind: str, record_id: int):
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"Failed to update {kind} {record_id}")


class OwnershipError(PermissionError):
    """The authenticated account does not own the target record."""
