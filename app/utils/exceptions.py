class StorageError(Exception):
    """
    Error raised by the recurring rule store when a storage operation fails.

    Carries the database message and, when the driver provides one, its
    error code. An error with neither is treated as "nothing to report".
    """

    def __init__(self, message="", code=None):
        super().__init__(message)
        self.message = message
        self.code = code

    @property
    def has_content(self):
        return bool(self.message or self.code)
