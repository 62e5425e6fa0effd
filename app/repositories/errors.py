"""Repository errors."""


class RepositoryError(Exception):
    """Base class for data access errors."""

    def __init__(self, message: str = "Repository error"):
        self.message = message
        super().__init__(self.message)


class SourceFetchFailed(RepositoryError):
    """Database query failed."""

    def __init__(self, message: str = "Database query failed"):
        super().__init__(message)


class IntegrityError(RepositoryError):
    """Write rejected by a uniqueness or reference rule."""

    def __init__(self, message: str = "Integrity error"):
        super().__init__(message)
