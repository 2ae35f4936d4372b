"""Generation of the Roblox Studio command that applies a converted theme."""

import json
from pathlib import Path

from studiotheme.colors import RGB, format_rgb
from studiotheme.document import ThemeDocument, load_theme_document
from studiotheme.extractor import extract_base_colors, extract_token_colors
from studiotheme.logger import get_logger

logger = get_logger(__name__)

# Pasted into the Studio command bar. {json} is replaced with the color map.
COMMAND_TEMPLATE = """local ChangeHistoryService = game:GetService("ChangeHistoryService")

local json = [[{json}]]
local theme = game.HttpService:JSONDecode(json)

ChangeHistoryService:SetWaypoint("Changing theme")

local studio = settings().Studio

for name, color in pairs(theme) do
    color = Color3.fromRGB(color[1], color[2], color[3])

    local success = pcall(function()
        studio[name] = color
    end)

    if not success then
        warn(("%s is not a valid theme color"):format(name))
    end
end

ChangeHistoryService:SetWaypoint("Theme changed")

print("Successfully changed your Script Editor theme!")"""


def serialize_colors(colors: dict[str, RGB]) -> str:
    """Serialize a color map as compact JSON of ``name -> [r, g, b]``."""
    return json.dumps({name: list(rgb) for name, rgb in colors.items()}, separators=(",", ":"))


def build_command(colors: dict[str, RGB]) -> str:
    """Embed a color map into the Studio command template."""
    return COMMAND_TEMPLATE.format(json=serialize_colors(colors))


def generate(doc: ThemeDocument) -> tuple[str, list[str]]:
    """Build the Studio command for a parsed theme.

    Token colors are merged after base colors, so a token color wins if both
    tables ever name the same setting.

    Args:
        doc: Parsed theme document.

    Returns:
        Tuple of (command text, names of settings with no color in the theme).

    Raises:
        MalformedColorError: If the theme contains an invalid hex color.
    """
    base_colors, missing_base = extract_base_colors(doc)
    token_colors, missing_tokens = extract_token_colors(doc)

    studio_theme = {**base_colors, **token_colors}
    for name, rgb in studio_theme.items():
        logger.debug(f"{name} = {format_rgb(rgb)}")

    return build_command(studio_theme), [*missing_base, *missing_tokens]


async def convert(theme_file: str | Path) -> tuple[str, list[str]]:
    """Read a theme file and build its Studio command.

    Args:
        theme_file: Path to the VS Code theme JSON.

    Returns:
        Tuple of (command text, names of settings with no color in the theme).

    Raises:
        ThemeFileError: If the file cannot be read or parsed.
        MalformedColorError: If the theme contains an invalid hex color.
    """
    doc = await load_theme_document(theme_file)
    command, missing = generate(doc)
    logger.info(f"Converted {theme_file} ({len(missing)} settings without a color)")
    return command, missing
