"""Command-line interface for statcore."""
