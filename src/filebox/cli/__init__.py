"""Command line interface for filebox."""
