class HelmTakeOwnershipError(Exception):
    pass

class ClientConstructionError(HelmTakeOwnershipError):
    """Raised when no kubernetes client could be configured."""

class StorageDriverError(HelmTakeOwnershipError):
    """Raised when the release storage backend rejects a request."""

class ReleaseExistsError(StorageDriverError):
    def __init__(self, key: str):
        super().__init__(f"release: already exists: {key}")
        self.key = key

class ReleaseNotFoundError(StorageDriverError):
    def __init__(self, key: str):
        super().__init__(f"release: not found: {key}")
        self.key = key
