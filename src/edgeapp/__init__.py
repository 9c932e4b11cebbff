"""edgeapp: command-line tooling for the edge app deployment platform."""
