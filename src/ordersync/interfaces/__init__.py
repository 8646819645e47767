"""Interfaces (application boundary) for ORDERSYNC.

Defines framework-free application contracts: ABCs and small row DTOs shared
by the service layer and adapters (record stores, unit of work). Business
rules stay out of this package.

Dependency rule: this package is independent. It may be imported by
`ordersync.service_layer`, `ordersync.adapters`, and `ordersync.bootstrap`.
"""
