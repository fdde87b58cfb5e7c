"""Business operations: registry, catalog, install-spec parsing and package management."""
