"""Request dependencies shared by routers."""

from fastapi import Request

from filebox.errors import ConfigurationError
from filebox.storage import FileStore


def get_store(request: Request) -> FileStore:
    """Return the file store bound at startup.

    Raises:
        ConfigurationError: If the app was built without a trusted root
    """
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise ConfigurationError("trusted root is not configured")
    return store
