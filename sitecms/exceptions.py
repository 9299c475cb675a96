"""
Error taxonomy for the content store.

``ConstraintViolation`` is the only failure a caller is expected to act
on (duplicate slug).  ``InternalStoreError`` covers everything that means
the store itself is unusable or corrupt; the HTTP layer reports it as an
opaque 500.  "Not found" is never an exception: list reads return an
empty list and slug lookups return ``None``.
"""


class StoreError(Exception):
    """Base class for failures raised by the entity store."""


class ConstraintViolation(StoreError):
    """A uniqueness constraint (e.g. ``slug``) rejected an insert or update."""

    def __init__(self, table: str, detail: str = "") -> None:
        self.table = table
        self.detail = detail
        message = f"Unique constraint violated on {table!r}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class InternalStoreError(StoreError):
    """The store is unavailable or returned data that cannot be trusted."""


class CorruptValueError(InternalStoreError):
    """A persisted value could not be decoded."""


class PrecisionError(ValueError):
    """A money value carries more fractional digits than can be stored exactly."""


class InvalidPagination(ValueError):
    """``page`` or ``limit`` fall outside the accepted range."""
