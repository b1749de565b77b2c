from __future__ import annotations


class ValidationError(ValueError):
    """Raised when catalog data is inconsistent enough that no safe recommendation exists."""

    def __init__(self, message: str, *, pair_id: str | None = None, item_id: str | None = None) -> None:
        super().__init__(message)
        self.pair_id = pair_id
        self.item_id = item_id
