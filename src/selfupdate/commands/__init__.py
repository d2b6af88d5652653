"""CLI commands for selfupdate."""
