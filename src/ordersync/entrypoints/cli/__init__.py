"""The `ordersync` command-line interface."""
