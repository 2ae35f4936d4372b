"""Tests for theme document parsing."""

from pathlib import Path

import pytest
from studiotheme.document import ThemeDocument, TokenStyle, load_theme_document
from studiotheme.errors import ThemeFileError


class TestTokenStyle:
    """Tests for TokenStyle.from_mapping."""

    def test_string_scope(self) -> None:
        token = TokenStyle.from_mapping({"scope": "comment", "settings": {"foreground": "#6A9955"}})
        assert token.scope == "comment"
        assert token.foreground == "#6A9955"
        assert not token.is_global

    def test_list_scope(self) -> None:
        token = TokenStyle.from_mapping({"scope": ["string", "string.quoted"], "settings": {"foreground": "#CE9178"}})
        assert token.scope == ("string", "string.quoted")

    def test_missing_scope_is_global(self) -> None:
        token = TokenStyle.from_mapping({"settings": {"foreground": "#D4D4D4"}})
        assert token.scope is None
        assert token.is_global

    def test_null_scope_is_not_global(self) -> None:
        token = TokenStyle.from_mapping({"scope": None, "settings": {"foreground": "#D4D4D4"}})
        assert token.scope == ()
        assert not token.is_global

    def test_missing_foreground(self) -> None:
        token = TokenStyle.from_mapping({"scope": "markup.bold", "settings": {"fontStyle": "bold"}})
        assert token.foreground is None

    def test_missing_settings(self) -> None:
        assert TokenStyle.from_mapping({"scope": "comment"}).foreground is None


class TestThemeDocument:
    """Tests for ThemeDocument.from_mapping."""

    def test_from_sample(self, sample_theme_data: dict[str, object]) -> None:
        doc = ThemeDocument.from_mapping(sample_theme_data)
        assert doc.colors["editor.background"] == "#1E1E1E"
        assert len(doc.token_colors) == 7
        assert doc.token_colors[0].is_global

    def test_missing_sections_are_empty(self) -> None:
        doc = ThemeDocument.from_mapping({"name": "Empty"})
        assert doc.colors == {}
        assert doc.token_colors == ()

    def test_non_object_tokens_are_ignored(self) -> None:
        doc = ThemeDocument.from_mapping({"tokenColors": ["oops", {"scope": "string", "settings": {}}]})
        assert len(doc.token_colors) == 1


class TestLoadThemeDocument:
    """Tests for load_theme_document."""

    @pytest.mark.asyncio
    async def test_loads_json5(self, sample_theme_file: Path) -> None:
        doc = await load_theme_document(sample_theme_file)
        assert doc.colors["editor.foreground"] == "#D4D4D4"

    @pytest.mark.asyncio
    async def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ThemeFileError, match="Could not load theme file"):
            await load_theme_document(tmp_path / "missing.json")

    @pytest.mark.asyncio
    async def test_non_utf8_file(self, tmp_path: Path) -> None:
        theme_path = tmp_path / "latin1.json"
        theme_path.write_bytes(b'{"colors": {"editor.background": "\xff"}}')
        with pytest.raises(ThemeFileError, match="Could not load theme file"):
            await load_theme_document(theme_path)

    @pytest.mark.asyncio
    async def test_invalid_json(self, tmp_path: Path) -> None:
        theme_path = tmp_path / "broken.json"
        theme_path.write_text("{ colors: ", encoding="utf-8")
        with pytest.raises(ThemeFileError, match="invalid JSON"):
            await load_theme_document(theme_path)

    @pytest.mark.asyncio
    async def test_non_object(self, tmp_path: Path) -> None:
        theme_path = tmp_path / "list.json"
        theme_path.write_text("[1, 2, 3]", encoding="utf-8")
        with pytest.raises(ThemeFileError, match="not an object"):
            await load_theme_document(theme_path)
