"""Command-line entrypoint, bootstrap and subcommands."""
