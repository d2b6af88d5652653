"""Core selection logic and collaborators for selfupdate."""
