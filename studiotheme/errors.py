"""Exceptions raised while converting themes."""


class StudioThemeError(Exception):
    """Base class for studiotheme errors."""


class MalformedColorError(StudioThemeError, ValueError):
    """Raised when a theme color is not a valid hex string."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Invalid hex color: {value!r}")


class ThemeFileError(StudioThemeError):
    """Raised when a theme file cannot be read or parsed."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Could not load theme file {path}: {reason}")
