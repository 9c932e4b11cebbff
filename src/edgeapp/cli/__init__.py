"""edgeapp CLI package."""
