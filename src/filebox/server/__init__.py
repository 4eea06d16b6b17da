"""FastAPI server components for filebox."""

from .app import create_app

__all__ = ["create_app"]
