"""Parsed representation of a VS Code color theme file."""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

import json5

from studiotheme.errors import ThemeFileError
from studiotheme.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class TokenStyle:
    """One entry of a theme's ``tokenColors`` array.

    ``scope`` is ``None`` only when the entry has no ``scope`` key at all,
    which marks the theme's global token style.
    """

    scope: str | tuple[str, ...] | None
    foreground: str | None

    @property
    def is_global(self) -> bool:
        """Whether this entry applies to every token."""
        return self.scope is None

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> TokenStyle:
        """Create a token style from a raw ``tokenColors`` entry.

        Args:
            data: Raw entry from the theme file.

        Returns:
            A TokenStyle instance.
        """
        scope: str | tuple[str, ...] | None
        if "scope" not in data:
            scope = None
        else:
            raw_scope = data["scope"]
            if isinstance(raw_scope, str):
                scope = raw_scope
            elif isinstance(raw_scope, list):
                scope = tuple(item for item in raw_scope if isinstance(item, str))
            else:
                # Present but unusable: never matches, and is not global either
                scope = ()

        settings = data.get("settings")
        foreground = settings.get("foreground") if isinstance(settings, Mapping) else None
        return cls(scope=scope, foreground=foreground or None)


@dataclass(frozen=True)
class ThemeDocument:
    """The parts of a theme file used for conversion."""

    colors: Mapping[str, object] = field(default_factory=dict)
    token_colors: tuple[TokenStyle, ...] = ()

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> ThemeDocument:
        """Create a document from parsed theme JSON.

        Missing ``colors`` or ``tokenColors`` sections are treated as empty.

        Args:
            data: Parsed theme file contents.

        Returns:
            A ThemeDocument instance.
        """
        raw_colors = data.get("colors")
        colors = dict(raw_colors) if isinstance(raw_colors, Mapping) else {}

        raw_tokens = data.get("tokenColors")
        token_colors: tuple[TokenStyle, ...] = ()
        if isinstance(raw_tokens, list):
            token_colors = tuple(
                TokenStyle.from_mapping(token) for token in raw_tokens if isinstance(token, Mapping)
            )

        return cls(colors=colors, token_colors=token_colors)


async def load_theme_document(theme_file: str | Path) -> ThemeDocument:
    """Read and parse a theme file.

    Args:
        theme_file: Path to the theme JSON (comments and trailing commas allowed).

    Returns:
        The parsed ThemeDocument.

    Raises:
        ThemeFileError: If the file cannot be read or is not valid JSON5.
    """
    path = Path(theme_file)
    logger.debug(f"Loading theme file {path}")
    try:
        text = await asyncio.to_thread(path.read_text, encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ThemeFileError(str(path), str(exc)) from exc

    try:
        raw = json5.loads(text)
    except ValueError as exc:
        raise ThemeFileError(str(path), f"invalid JSON: {exc}") from exc

    if not isinstance(raw, dict):
        raise ThemeFileError(str(path), "top-level value is not an object")

    return ThemeDocument.from_mapping(raw)
