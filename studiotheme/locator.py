"""Discovery of color themes contributed by installed VS Code extensions."""

from __future__ import annotations

import asyncio
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

import json5

from studiotheme.constants import DEFAULT_EXTENSIONS_SUBDIR, MANIFEST_FILENAME, THEME_FILE_SUFFIX
from studiotheme.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ThemeDescriptor:
    """An installed theme: its display label and absolute file path."""

    name: str
    path: str


def default_extensions_dir() -> Path:
    """Return the standard VS Code extensions directory for the current user."""
    return Path.home().joinpath(*DEFAULT_EXTENSIONS_SUBDIR)


async def _read_manifest(extension_dir: Path) -> dict[str, object] | None:
    """Read an extension's manifest.

    Returns:
        The parsed manifest, or None if it is missing or unreadable.
    """
    manifest_path = extension_dir / MANIFEST_FILENAME
    try:
        text = await asyncio.to_thread(manifest_path.read_text, encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug(f"No readable manifest in {extension_dir}: {exc}")
        return None

    try:
        manifest = json5.loads(text)
    except ValueError as exc:
        logger.debug(f"Skipping unparseable manifest {manifest_path}: {exc}")
        return None

    if not isinstance(manifest, dict):
        logger.debug(f"Skipping manifest {manifest_path}: not an object")
        return None
    return manifest


async def _extension_themes(extension_dir: Path) -> list[ThemeDescriptor]:
    """Collect the themes contributed by a single extension.

    Any problem with the manifest yields an empty list.
    """
    if not await asyncio.to_thread(extension_dir.is_dir):
        return []

    manifest = await _read_manifest(extension_dir)
    if manifest is None:
        return []

    contributes = manifest.get("contributes")
    if not isinstance(contributes, dict):
        return []

    themes = contributes.get("themes")
    if not isinstance(themes, list):
        return []

    descriptors: list[ThemeDescriptor] = []
    for theme in themes:
        if not isinstance(theme, dict):
            continue
        label = theme.get("label")
        theme_path = theme.get("path")
        if not isinstance(label, str) or not isinstance(theme_path, str):
            logger.debug(f"Skipping incomplete theme entry in {extension_dir}: {theme!r}")
            continue
        descriptors.append(ThemeDescriptor(name=label, path=str((extension_dir / theme_path).resolve())))
    return descriptors


async def get_available_themes(extensions_dir: str | Path | None = None) -> list[ThemeDescriptor]:
    """Scan installed extensions for contributed color themes.

    Themes are returned in directory iteration order, which depends on the
    filesystem.

    Args:
        extensions_dir: Directory holding one subdirectory per extension.
            Defaults to ``~/.vscode/extensions``.

    Returns:
        List of discovered themes.
    """
    root = Path(extensions_dir) if extensions_dir is not None else default_extensions_dir()
    try:
        entries = await asyncio.to_thread(lambda: list(root.iterdir()))
    except OSError as exc:
        logger.warning(f"Cannot read extensions directory {root}: {exc}")
        return []

    available: list[ThemeDescriptor] = []
    for entry in entries:
        available.extend(await _extension_themes(entry))

    logger.debug(f"Found {len(available)} themes in {root}")
    return available


def find_theme(themes: Iterable[ThemeDescriptor], theme_name: str) -> ThemeDescriptor | None:
    """Return the first theme whose label matches ``theme_name``, ignoring case."""
    wanted = theme_name.lower()
    return next((theme for theme in themes if theme.name.lower() == wanted), None)


def theme_names(themes: Iterable[ThemeDescriptor]) -> list[str]:
    """Return theme labels sorted case-insensitively."""
    return sorted((theme.name for theme in themes), key=str.lower)


async def resolve_theme(theme_name: str, extensions_dir: str | Path | None = None) -> str | None:
    """Resolve a theme name or file path to a theme file path.

    A value ending in ``.json`` is treated as a path and returned as-is.

    Args:
        theme_name: Installed theme label or path to a theme file.
        extensions_dir: Directory to scan for installed themes.

    Returns:
        Path to the theme file, or None if no installed theme matches.
    """
    if theme_name.endswith(THEME_FILE_SUFFIX):
        return theme_name

    theme = find_theme(await get_available_themes(extensions_dir), theme_name)
    if theme is None:
        logger.info(f"No installed theme named {theme_name!r}")
        return None
    return theme.path
