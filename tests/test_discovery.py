"""Tests for theme discovery."""

from __future__ import annotations

import json
import textwrap

import pytest

from theme_compiler.cli import BUNDLED_THEMES_DIR
from theme_compiler.discovery import discover_themes, load_theme_source, theme_sources
from theme_compiler.errors import ThemeCompilerError
from theme_compiler.palette import Palette

THEME_MODULE = textwrap.dedent(
    """
    from theme_compiler.semantic import ThemeConfig
    from theme_compiler.vscode import VSCodeTheme

    config = ThemeConfig.from_dict({document!r})

    module_theme = VSCodeTheme(config)
    alias = module_theme
    not_a_theme = "module_theme"
    """
)


@pytest.fixture
def themes_dir(tmp_path, config_document):
    directory = tmp_path / "themes"
    directory.mkdir()
    (directory / "json_theme.json").write_text(json.dumps(config_document))

    dark_document = dict(config_document, name="Module Theme", fileName="module.json", type="dark")
    (directory / "module_theme.py").write_text(THEME_MODULE.format(document=dark_document))

    (directory / "_private.py").write_text("raise RuntimeError('not imported')\n")
    (directory / "test_theme.py").write_text("raise RuntimeError('not imported')\n")
    (directory / "notes.txt").write_text("ignored")
    return directory


class TestThemeSources:
    def test_filters_and_sorts(self, themes_dir):
        names = [path.rsplit("/", 1)[-1] for path in theme_sources(str(themes_dir))]
        assert names == ["json_theme.json", "module_theme.py"]


class TestLoadThemeSource:
    def test_json_config(self, themes_dir):
        [(name, theme)] = load_theme_source(str(themes_dir / "json_theme.json"))
        assert name == "json_theme"
        assert theme.name == "Json Theme"

    def test_module_exports(self, themes_dir):
        found = load_theme_source(str(themes_dir / "module_theme.py"))
        assert [name for name, _ in found] == ["module_theme", "alias"]
        assert found[0][1] is found[1][1]

    def test_json_config_uses_palette(self, themes_dir):
        with pytest.raises(ThemeCompilerError):
            load_theme_source(str(themes_dir / "json_theme.json"), palette=Palette({}))


class TestDiscoverThemes:
    def test_discover(self, themes_dir):
        themes = discover_themes(str(themes_dir))
        assert [theme.name for theme in themes] == ["Json Theme", "Module Theme"]

    def test_failure_names_source(self, themes_dir, config_document):
        config_document["theme"]["code"]["comment"] = "invalid.color"
        (themes_dir / "broken.json").write_text(json.dumps(config_document))

        with pytest.raises(ThemeCompilerError, match=r"broken\.json: .*invalid\.color"):
            discover_themes(str(themes_dir))

    def test_bundled_themes(self):
        themes = discover_themes(BUNDLED_THEMES_DIR)
        assert [(theme.name, theme.type) for theme in themes] == [
            ("Lagoon Dark", "dark"),
            ("Lagoon Light", "light"),
        ]
        assert themes[0].to_json()["colors"]["activityBarBadge.background"] == "#7dd3fc"
