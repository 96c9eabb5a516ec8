class StorageError(Exception):
    """
    Raised when a storage adapter cannot be set up, e.g. an unusable data directory
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

    def __str__(self):
        return f"StorageError: {self.message}"
