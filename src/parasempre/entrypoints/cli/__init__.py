"""Command-line interface for PARASEMPRE (``parasempre`` console script)."""
