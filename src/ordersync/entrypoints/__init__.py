"""Entrypoints (inbound adapters) for ORDERSYNC.

Expose the application to the outside world: currently the `ordersync` CLI.
Parse and validate inputs, call the bootstrap/service layer, and present
results.

Dependency rule: prefer `ordersync.bootstrap` over importing adapters directly.
"""
