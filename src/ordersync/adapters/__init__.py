"""Adapters (infrastructure) for ORDERSYNC.

Provide concrete implementations of the interfaces (record stores, units of
work) plus persistence mapping and related wiring (engines, metadata, column
types).

Dependency rule: may import `ordersync.domain` and `ordersync.interfaces`;
the domain must not import this package.
"""
