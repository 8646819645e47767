"""Service layer for ORDERSYNC.

Implements the persistence use-cases for the order aggregate: repository
orchestration, row mapping, and transaction boundaries. Calls domain objects
and the ports defined in `ordersync.interfaces`.

Dependency rule: may import `ordersync.domain` and `ordersync.interfaces`,
but not `ordersync.adapters` or `ordersync.entrypoints`.
"""
