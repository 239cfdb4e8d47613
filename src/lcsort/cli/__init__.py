"""Command-line interface for lcsort."""
