"""Exceptions for record store operations."""


class RecordStoreError(Exception):
    """Base class for record store errors."""


class DuplicateKeyError(RecordStoreError):
    """Conflict: a row with the same key already exists.

    Attributes:
        table (str): The logical table name (e.g. "orders").
        key (tuple[str, ...]): The conflicting key values.
    """

    def __init__(self, table: str, key: tuple[str, ...], detail: str | None = None):
        message = f"Duplicate key {key!r} in '{table}'."
        if detail:
            message = f"{message} {detail}"
        super().__init__(message)
        self.table = table
        self.key = key


class RecordNotFoundError(RecordStoreError):
    """No row exists for the given key.

    Attributes:
        table (str): The logical table name (e.g. "order_items").
        key (tuple[str, ...]): The missing key values.
    """

    def __init__(self, table: str, key: tuple[str, ...]):
        super().__init__(f"No row with key {key!r} in '{table}'.")
        self.table = table
        self.key = key


class StorageFailureError(RecordStoreError):
    """Operational, driver, or constraint failure not covered by the other errors."""
