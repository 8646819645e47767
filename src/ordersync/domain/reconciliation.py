"""Line item reconciliation.

Computes the item-level operations that turn a previously persisted item set
into a desired one. Identity is the only matching key:

- a desired item whose id was never saved is a **create**;
- a saved item whose id is still desired is an **update**, carrying the
  desired item's current values (the stored row is overwritten wholesale);
- a saved item whose id is no longer desired is a **delete**.

The three groups touch disjoint identities, so they can be applied in any
order. Running the engine again on the result of a previous run yields no
creates and no deletes.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from ordersync.domain.aggregates import LineItem


@dataclass(frozen=True, slots=True)
class ItemChangeSet:
    """Operations needed to move from the saved items to the desired ones."""

    to_create: tuple[LineItem, ...] = ()
    to_update: tuple[LineItem, ...] = ()
    to_delete: tuple[LineItem, ...] = ()

    @property
    def is_empty(self) -> bool:
        """True when there is nothing to create, update, or delete."""
        return not (self.to_create or self.to_update or self.to_delete)

    def __len__(self) -> int:
        return len(self.to_create) + len(self.to_update) + len(self.to_delete)


def reconcile_items(
    saved_items: Iterable[LineItem], desired_items: Iterable[LineItem]
) -> ItemChangeSet:
    """Diff the saved line items against the desired ones.

    Args:
        saved_items: Items currently persisted for the order, as loaded from storage.
        desired_items: The order aggregate's current items.

    Returns:
        An `ItemChangeSet`. Creates follow the desired order; updates and
        deletes follow the saved order.
    """
    saved_by_id = {item.id: item for item in saved_items}
    desired_by_id = {item.id: item for item in desired_items}

    to_create = tuple(
        item for item_id, item in desired_by_id.items() if item_id not in saved_by_id
    )

    to_update: list[LineItem] = []
    to_delete: list[LineItem] = []
    for item_id, saved in saved_by_id.items():
        if (desired := desired_by_id.get(item_id)) is not None:
            to_update.append(desired)
        else:
            to_delete.append(saved)

    return ItemChangeSet(
        to_create=to_create,
        to_update=tuple(to_update),
        to_delete=tuple(to_delete),
    )
