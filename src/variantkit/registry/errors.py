"""Registry error types."""


class RegistryError(Exception):
    """Raised when a registry, overrides or cache document cannot be used."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        if path:
            message = f"{path}: {message}"
        super().__init__(message)
