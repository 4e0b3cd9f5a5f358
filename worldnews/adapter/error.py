"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class StorageError(AdapterError):
    """Object storage failed to store or serve an object."""

    pass
