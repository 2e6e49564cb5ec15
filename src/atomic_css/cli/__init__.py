"""Command-line interface for atomic_css."""
