"""Convert VS Code color themes into Roblox Studio script editor themes."""

from studiotheme.document import ThemeDocument, TokenStyle
from studiotheme.errors import MalformedColorError, StudioThemeError, ThemeFileError
from studiotheme.extractor import extract_base_colors, extract_token_colors
from studiotheme.generator import convert, generate
from studiotheme.locator import ThemeDescriptor, get_available_themes, resolve_theme
from studiotheme.table import print_grid

__all__ = [
    "MalformedColorError",
    "StudioThemeError",
    "ThemeDescriptor",
    "ThemeDocument",
    "ThemeFileError",
    "TokenStyle",
    "convert",
    "extract_base_colors",
    "extract_token_colors",
    "generate",
    "get_available_themes",
    "print_grid",
    "resolve_theme",
]
