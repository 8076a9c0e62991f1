"""Command-line interface for focusstudy."""
