"""Theme error types."""


class ThemeError(Exception):
    """Raised when a theme file cannot be read or fails validation."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        if path:
            message = f"{path}: {message}"
        super().__init__(message)
