"""Bootstrap (composition root) for ORDERSYNC.

Assembles the application at runtime: builds engines from configuration,
wires concrete record stores into a unit of work, and hands that unit of work
to the order repository.

Import rules:
- Entry points obtain repositories from *this* package rather than wiring
  adapters themselves.
- This package may import: `ordersync.adapters`, `ordersync.service_layer`,
  `ordersync.interfaces`, `ordersync.domain`, and `ordersync.config`.
- Inner layers must not import `ordersync.bootstrap`.
"""

from .bootstrap import build_order_repository, build_write_uow

__all__ = ["build_order_repository", "build_write_uow"]
