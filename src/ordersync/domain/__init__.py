"""Domain layer for ORDERSYNC.

Contains business rules: the order aggregate, its line items, the item
reconciliation engine, and domain errors. This package is deliberately
technology-agnostic.

Dependency rule: do not import from `ordersync.adapters` or `ordersync.entrypoints`.
"""
