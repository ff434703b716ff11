"""Error types for the booking utility."""


class BookingError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class StorageError(BookingError):
    pass


class CorruptStoreError(StorageError):
    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"Cannot read {path}: {reason}")
