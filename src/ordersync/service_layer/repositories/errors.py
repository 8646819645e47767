"""Repository-related error definitions."""


class RepositoryError(Exception):
    """Base class for repository-related errors."""


class DuplicateOrderError(RepositoryError):
    """Raised when creating an order whose identity is already persisted."""

    order_id: str

    def __init__(self, order_id: str):
        super().__init__(f"Order with ID {order_id} already exists.")
        self.order_id = order_id


class OrderNotFoundError(RepositoryError):
    """Raised when updating an order that has never been persisted."""

    order_id: str

    def __init__(self, order_id: str):
        super().__init__(f"Order with ID {order_id} not found.")
        self.order_id = order_id
