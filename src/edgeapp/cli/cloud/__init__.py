"""edgeapp cloud command tree."""
