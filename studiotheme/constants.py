"""Mappings from Roblox Studio script editor settings to VS Code theme keys.

``BASE_MAP`` maps a Studio setting to a key of the theme's ``colors`` object.
``TOKEN_SCOPE_MAP`` maps a Studio setting to TextMate scopes, tried in order.
The two tables target disjoint sets of Studio settings.
"""

from collections.abc import Mapping
from types import MappingProxyType

DEFAULT_EXTENSIONS_SUBDIR = (".vscode", "extensions")
MANIFEST_FILENAME = "package.json"
THEME_FILE_SUFFIX = ".json"

BASE_MAP: Mapping[str, str] = MappingProxyType(
    {
        "Background Color": "editor.background",
        "Text Color": "editor.foreground",
        "Selection Color": "editor.selectionForeground",
        "Selection Background Color": "editor.selectionBackground",
        "Find Selection Background Color": "editor.findMatchHighlightBackground",
        "Matching Word Background Color": "editor.wordHighlightBackground",
        "Current Line Highlight Color": "editor.lineHighlightBackground",
        "Whitespace Color": "editorWhitespace.foreground",
        "Ruler Color": "editorRuler.foreground",
        "Error Color": "editorError.foreground",
        "Warning Color": "editorWarning.foreground",
        "Menu Item Background Color": "editorSuggestWidget.background",
        "Selected Menu Item Background Color": "editorSuggestWidget.selectedBackground",
        "Primary Text Color": "editorSuggestWidget.foreground",
        "Script Editor Scrollbar Background Color": "editor.background",
        "Script Editor Scrollbar Handle Color": "scrollbarSlider.background",
        "Debugger Current Line Color": "editor.stackFrameHighlightBackground",
        "Debugger Error Line Color": "editor.focusedStackFrameHighlightBackground",
    }
)

TOKEN_SCOPE_MAP: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "Comment Color": ("comment", "punctuation.definition.comment"),
        "TODO Color": ("comment.todo", "keyword.todo", "comment"),
        "Keyword Color": ("keyword.control", "keyword"),
        "Operator Color": ("keyword.operator", "keyword"),
        "Bool Color": ("constant.language.boolean", "constant.language"),
        "Nil Color": ("constant.language.nil", "constant.language"),
        "Number Color": ("constant.numeric", "constant"),
        "String Color": ("string", "string.quoted"),
        "Bracket Color": ("punctuation.bracket", "meta.brace", "punctuation"),
        "Built-in Function Color": ("support.function", "support.function.builtin", "entity.name.function"),
        "Function Name Color": ("entity.name.function", "meta.function-call"),
        "Method Color": ("entity.name.function.member", "meta.method-call", "entity.name.function"),
        "Property Color": ("variable.other.property", "support.type.property-name", "variable.other.object.property"),
        "Type Color": ("entity.name.type", "support.type", "storage.type"),
        '"function" Color': ("storage.type.function", "keyword.function", "storage.type"),
        '"local" Color': ("storage.modifier", "keyword.local", "storage.type"),
        '"self" Color': ("variable.language.self", "variable.language"),
        "Luau Keyword Color": ("keyword.control.luau", "keyword.control"),
    }
)
