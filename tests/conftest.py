"""Shared test fixtures for studiotheme."""

import json
import os
import tempfile
from collections.abc import Callable
from pathlib import Path

import pytest

# Keep test runs from writing logs into the real user data directory
os.environ.setdefault("STUDIOTHEME_LOG_DIR", tempfile.mkdtemp(prefix="studiotheme-logs-"))


@pytest.fixture
def sample_theme_data() -> dict[str, object]:
    """A small theme with base colors, scoped tokens and a global style."""
    return {
        "name": "Sample Dark",
        "colors": {
            "editor.background": "#1E1E1E",
            "editor.foreground": "#D4D4D4",
            "editor.selectionBackground": "#264F78",
            "editor.lineHighlightBackground": "#2A2D2E80",
        },
        "tokenColors": [
            {"settings": {"foreground": "#D4D4D4"}},
            {"scope": ["comment", "punctuation.definition.comment"], "settings": {"foreground": "#6A9955"}},
            {"scope": "keyword", "settings": {"foreground": "#569CD6"}},
            {"scope": "keyword.control", "settings": {"foreground": "#C586C0", "fontStyle": "italic"}},
            {"scope": "string", "settings": {"foreground": "#CE9178"}},
            {"scope": "constant.numeric", "settings": {"foreground": "#B5CEA8"}},
            {"scope": "markup.bold", "settings": {"fontStyle": "bold"}},
        ],
    }


@pytest.fixture
def sample_theme_file(tmp_path: Path, sample_theme_data: dict[str, object]) -> Path:
    """Write the sample theme to disk with a comment and trailing comma."""
    theme_path = tmp_path / "sample-dark.json"
    body = json.dumps(sample_theme_data, indent=2)
    # JSON5 features found in real theme files
    theme_path.write_text("// Sample Dark theme\n" + body[:-2] + ",\n}\n", encoding="utf-8")
    return theme_path


@pytest.fixture
def make_extension(tmp_path: Path) -> Callable[..., Path]:
    """Factory creating fake VS Code extensions under ``tmp_path / 'extensions'``.

    Returns:
        A callable taking the extension directory name and the raw manifest
        text (or None for no manifest), returning the extension directory.
    """
    extensions_dir = tmp_path / "extensions"
    extensions_dir.mkdir(exist_ok=True)

    def _make(name: str, manifest: str | None) -> Path:
        extension_dir = extensions_dir / name
        extension_dir.mkdir()
        if manifest is not None:
            (extension_dir / "package.json").write_text(manifest, encoding="utf-8")
        return extension_dir

    return _make


@pytest.fixture
def extensions_dir(
    tmp_path: Path,
    make_extension: Callable[..., Path],
    sample_theme_data: dict[str, object],
) -> Path:
    """An extensions directory with one theme extension and some broken ones."""
    theme_ext = make_extension(
        "acme.sample-theme-1.0.0",
        json.dumps(
            {
                "name": "sample-theme",
                "contributes": {
                    "themes": [
                        {"label": "Sample Dark", "uiTheme": "vs-dark", "path": "./themes/sample-dark.json"},
                        {"label": "Sample Light", "uiTheme": "vs", "path": "./themes/sample-light.json"},
                    ]
                },
            }
        ),
    )
    (theme_ext / "themes").mkdir()
    (theme_ext / "themes" / "sample-dark.json").write_text(json.dumps(sample_theme_data), encoding="utf-8")

    make_extension("broken.manifest-0.1.0", "{ this is not json")
    make_extension("no.manifest-0.1.0", None)
    make_extension("ms-python.python-2024.1.0", json.dumps({"name": "python", "contributes": {"languages": []}}))
    (tmp_path / "extensions" / "extensions.json").write_text("[]", encoding="utf-8")
    return tmp_path / "extensions"
