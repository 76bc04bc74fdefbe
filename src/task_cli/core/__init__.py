"""Application state and ports shared by the CLI."""
