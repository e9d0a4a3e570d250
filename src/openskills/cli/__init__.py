"""Command-line interface for OpenSkills."""
