"""Record store adapters for the order aggregate.

Two interchangeable implementations of the record store interfaces live here:
`sqlalchemy_adapters` (durable, relational) and `in_memory_adapters`
(ephemeral, for tests and prototyping).
"""
