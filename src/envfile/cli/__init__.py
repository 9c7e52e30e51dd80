"""Command-line tools for envfile."""
