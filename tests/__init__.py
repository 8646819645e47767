"""ORDERSYNC test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- integration/  : Real interactions with a database (SQLite file, Postgres container).
- functional/   : User-visible CLI flows tested at the boundary.
- contract/     : Shared behavior enforced across the in-memory and SQLite backends.
- e2e/          : Logging and global options of the top-level CLI.
- fixtures/     : Shared fixtures registered through `pytest_plugins` (no tests here).

General guidance
- Keep unit fast and deterministic; prefer the in-memory adapters over mocks.
- Contract parametrizes implementations to ensure consistent behavior.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
"""
