"""Command-line interface for kitbag."""
