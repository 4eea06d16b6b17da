"""Routers for filebox."""
