class AdapterError(Exception):
    """Base class for adapter-level errors."""

    pass


# ------------------------- STORAGE -------------------------


class StorageError(AdapterError):
    """Raised when the key-value store cannot read or write a value."""

    pass


# ------------------------- API -------------------------


class ApiError(AdapterError):
    """Raised when the remote API cannot be reached."""

    pass
