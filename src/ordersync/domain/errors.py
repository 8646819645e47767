"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


# ============================================================================
#                         Line item related errors
# ============================================================================


class InvalidQuantityError(DomainError):
    """Raised when a line item is built or changed with a non-positive quantity."""

    def __init__(self, item_id: str, quantity: object) -> None:
        super().__init__(
            f"Line item '{item_id}' quantity must be a positive integer, got {quantity!r}."
        )
        self.item_id = item_id
        self.quantity = quantity


class InvalidPriceError(DomainError):
    """Raised when a line item is built with a negative or non-numeric price."""

    def __init__(self, item_id: str, price: object) -> None:
        super().__init__(
            f"Line item '{item_id}' price must be a non-negative number, got {price!r}."
        )
        self.item_id = item_id
        self.price = price


# ============================================================================
#                           Order related errors
# ============================================================================


class EmptyOrderError(DomainError):
    """Raised when an order is built without any line items."""

    def __init__(self, order_id: str) -> None:
        super().__init__(f"Order '{order_id}' must contain at least one item.")
        self.order_id = order_id


class DuplicateLineItemError(DomainError):
    """Raised when an order holds two line items with the same identity."""

    def __init__(self, order_id: str, item_id: str) -> None:
        super().__init__(
            f"Order '{order_id}' contains line item '{item_id}' more than once."
        )
        self.order_id = order_id
        self.item_id = item_id
