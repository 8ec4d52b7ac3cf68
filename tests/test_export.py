"""Tests for writing theme files and updating the extension manifest."""

from __future__ import annotations

import json

from theme_compiler.export import (
    clean_output_dir,
    export_opencode_theme,
    export_theme,
    theme_contributions,
    update_manifest,
)


class TestJsonExport:
    def test_clean_output_dir(self, tmp_path):
        (tmp_path / "old.json").write_text("{}")
        (tmp_path / "keep.txt").write_text("x")

        removed = clean_output_dir(str(tmp_path))

        assert removed == ["old.json"]
        assert not (tmp_path / "old.json").exists()
        assert (tmp_path / "keep.txt").exists()

    def test_clean_missing_dir(self, tmp_path):
        assert clean_output_dir(str(tmp_path / "missing")) == []

    def test_export_theme(self, tmp_path, make_theme):
        theme = make_theme()
        path = export_theme(theme, str(tmp_path / "themes"))

        assert path.endswith("test-theme.json")
        with open(path) as f:
            assert f.read() == theme.to_string()

    def test_export_opencode_theme(self, tmp_path):
        path = export_opencode_theme('{"defs": {}}', str(tmp_path / "out" / "lagoon.json"))
        with open(path) as f:
            assert json.load(f) == {"defs": {}}


class TestManifest:
    def test_contributions(self, make_theme):
        themes = [make_theme(), make_theme(name="Light", file_name="light.json", type="light")]
        assert theme_contributions(themes) == [
            {"label": "Test Theme", "uiTheme": "vs-dark", "path": "./themes/test-theme.json"},
            {"label": "Light", "uiTheme": "vs", "path": "./themes/light.json"},
        ]

    def test_update_manifest(self, tmp_path, make_theme):
        path = tmp_path / "package.json"
        path.write_text(
            json.dumps(
                {
                    "name": "lagoon",
                    "contributes": {"themes": [{"label": "Old"}], "commands": []},
                }
            )
        )

        update_manifest([make_theme()], str(path))

        text = path.read_text()
        assert text.endswith("}\n")
        assert text.startswith('{\n  "name"')
        manifest = json.loads(text)
        assert manifest["name"] == "lagoon"
        assert manifest["contributes"]["commands"] == []
        assert manifest["contributes"]["themes"] == [
            {"label": "Test Theme", "uiTheme": "vs-dark", "path": "./themes/test-theme.json"}
        ]

    def test_update_manifest_creates_contributes(self, tmp_path, make_theme):
        path = tmp_path / "package.json"
        path.write_text('{"name": "lagoon"}')

        manifest = update_manifest([make_theme()], str(path))

        assert manifest["contributes"]["themes"][0]["label"] == "Test Theme"


class TestEncoding:
    def test_non_ascii_names_are_utf8(self, tmp_path, make_theme):
        theme = make_theme(name="Lagune Grün", file_name="grun.json")
        path = tmp_path / "package.json"
        path.write_text('{"name": "lagoon"}', encoding="utf-8")

        update_manifest([theme], str(path))
        export_path = export_theme(theme, str(tmp_path / "themes"))

        assert '"Lagune Grün"' in path.read_text(encoding="utf-8")
        with open(export_path, encoding="utf-8") as f:
            assert json.load(f)["name"] == "Lagune Grün"
