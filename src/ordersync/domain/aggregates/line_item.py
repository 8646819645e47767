"""Line Item entity.

A line item is one product line inside an order. Its identity is unique
within the owning order. Only the quantity may change after construction.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from ordersync.domain.errors import InvalidPriceError, InvalidQuantityError

# pylint: disable=too-many-arguments,too-many-positional-arguments


def _validated_quantity(item_id: str, quantity: object) -> int:
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
        raise InvalidQuantityError(item_id, quantity)
    return quantity


def _validated_price(item_id: str, price: object) -> Decimal:
    if isinstance(price, bool):
        raise InvalidPriceError(item_id, price)
    try:
        # floats go through str() so 10.1 stays 10.1 instead of its binary expansion
        value = price if isinstance(price, Decimal) else Decimal(str(price))
    except (InvalidOperation, ValueError) as e:
        raise InvalidPriceError(item_id, price) from e
    if not value.is_finite() or value < 0:
        raise InvalidPriceError(item_id, price)
    return value


class LineItem:
    """One product line of an order.

    Attributes are read-only; the quantity can only be changed through
    `change_quantity`, which re-validates it.
    """

    __slots__ = ("_id", "_name", "_price", "_product_id", "_quantity")

    def __init__(
        self,
        item_id: str,
        name: str,
        price: Decimal | int | float | str,
        product_id: str,
        quantity: int,
    ) -> None:
        """Create a line item.

        Args:
            item_id: Identity of the item, unique within its order.
            name: Display name of the product line.
            price: Unit price; normalized to `Decimal`.
            product_id: Opaque reference to the product.
            quantity: Number of units; must be a positive integer.

        Raises:
            InvalidQuantityError: If `quantity` is not a positive integer.
            InvalidPriceError: If `price` is negative or not a number.
        """
        self._id = item_id
        self._name = name
        self._price = _validated_price(item_id, price)
        self._product_id = product_id
        self._quantity = _validated_quantity(item_id, quantity)

    # --- Attributes ---

    @property
    def id(self) -> str:  # pylint: disable=invalid-name
        """Identity of the item within its order."""
        return self._id

    @property
    def name(self) -> str:
        """Display name."""
        return self._name

    @property
    def price(self) -> Decimal:
        """Unit price."""
        return self._price

    @property
    def product_id(self) -> str:
        """Reference to the product this line was built from."""
        return self._product_id

    @property
    def quantity(self) -> int:
        """Number of units."""
        return self._quantity

    @property
    def subtotal(self) -> Decimal:
        """Unit price times quantity."""
        return self._price * self._quantity

    # --- Mutation ---

    def change_quantity(self, new_quantity: int) -> None:
        """Change the number of units in place.

        Raises:
            InvalidQuantityError: If `new_quantity` is not a positive integer.
        """
        self._quantity = _validated_quantity(self._id, new_quantity)

    # --- Plumbing ---

    def _key(self) -> tuple[str, str, Decimal, str, int]:
        return (self._id, self._name, self._price, self._product_id, self._quantity)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LineItem):
            return NotImplemented
        return self._key() == other._key()

    __hash__ = None  # type: ignore[assignment]  # mutable

    def __repr__(self) -> str:
        return (
            f"LineItem(item_id={self._id!r}, name={self._name!r}, "
            f"price={self._price!r}, product_id={self._product_id!r}, "
            f"quantity={self._quantity!r})"
        )
