"""filebox: minimal create-only HTTP file server."""

import logging

__version__ = "0.1.0"
__author__ = "filebox contributors"
__license__ = "MIT"

from filebox.config.models import ServerConfig
from filebox.errors import FileboxError
from filebox.storage import FileStore

# Log output is discarded unless a sink is configured
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ServerConfig",
    "FileStore",
    "FileboxError",
    "__version__",
]
