"""Extraction of Studio colors from a parsed theme document."""

from collections.abc import Mapping, Sequence

from studiotheme.colors import RGB, hex_to_rgb
from studiotheme.constants import BASE_MAP, TOKEN_SCOPE_MAP
from studiotheme.document import ThemeDocument
from studiotheme.logger import get_logger

logger = get_logger(__name__)

ColorMap = dict[str, RGB]


def get_scope_colors(doc: ThemeDocument) -> dict[str, str]:
    """Index token foreground colors by scope.

    Entries are applied in document order, so a later entry for the same scope
    replaces an earlier one. Entries without a foreground are ignored.

    Args:
        doc: Parsed theme document.

    Returns:
        Mapping of scope name to hex color.
    """
    colors: dict[str, str] = {}

    for token in doc.token_colors:
        if not token.foreground:
            continue
        if isinstance(token.scope, tuple):
            for scope in token.scope:
                colors[scope] = token.foreground
        elif isinstance(token.scope, str):
            colors[token.scope] = token.foreground

    return colors


def get_global_foreground(doc: ThemeDocument) -> str | None:
    """Return the foreground of the first token style without a scope."""
    for token in doc.token_colors:
        if token.is_global:
            return token.foreground
    return None


def extract_base_colors(
    doc: ThemeDocument,
    base_map: Mapping[str, str] = BASE_MAP,
) -> tuple[ColorMap, list[str]]:
    """Resolve Studio UI colors from the theme's ``colors`` section.

    Args:
        doc: Parsed theme document.
        base_map: Studio setting name to theme color key.

    Returns:
        Tuple of (resolved colors, names that could not be resolved).

    Raises:
        MalformedColorError: If a mapped color is not a valid hex string.
    """
    colors: ColorMap = {}
    missing: list[str] = []

    for studio_name, color_key in base_map.items():
        color = doc.colors.get(color_key)
        if color:
            colors[studio_name] = hex_to_rgb(color)
        else:
            missing.append(studio_name)

    logger.debug(f"Resolved {len(colors)} base colors, {len(missing)} missing")
    return colors, missing


def extract_token_colors(
    doc: ThemeDocument,
    scope_map: Mapping[str, Sequence[str]] = TOKEN_SCOPE_MAP,
) -> tuple[ColorMap, list[str]]:
    """Resolve Studio syntax colors from the theme's ``tokenColors`` section.

    Each setting takes the color of the first of its scopes present in the
    theme. Settings with no matching scope fall back to the theme's global
    token style.

    Args:
        doc: Parsed theme document.
        scope_map: Studio setting name to candidate scopes, highest priority first.

    Returns:
        Tuple of (resolved colors, names that could not be resolved).

    Raises:
        MalformedColorError: If a matched color is not a valid hex string.
    """
    scope_colors = get_scope_colors(doc)
    global_color = get_global_foreground(doc)
    colors: ColorMap = {}
    missing: list[str] = []

    for studio_name, scopes in scope_map.items():
        color = next((scope_colors[scope] for scope in scopes if scope in scope_colors), None)

        if color is None and global_color:
            logger.debug(f"No scope matched for {studio_name!r}, using global token color")
            color = global_color

        if color:
            colors[studio_name] = hex_to_rgb(color)
        else:
            missing.append(studio_name)

    logger.debug(f"Resolved {len(colors)} token colors, {len(missing)} missing")
    return colors, missing
