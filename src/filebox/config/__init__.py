"""Configuration for filebox."""

from .models import ServerConfig

__all__ = ["ServerConfig"]
