"""Tests for the theme-compiler command."""

from __future__ import annotations

import json

import pytest

from theme_compiler.cli import BUNDLED_THEMES_DIR, main


@pytest.fixture
def output_dir(tmp_path):
    directory = tmp_path / "out"
    directory.mkdir()
    (directory / "stale.json").write_text("{}")
    return directory


class TestMain:
    def test_build_bundled_themes(self, output_dir, capsys):
        main([BUNDLED_THEMES_DIR, "-o", str(output_dir)])

        assert sorted(p.name for p in output_dir.iterdir()) == [
            "lagoon-dark.json",
            "lagoon-light.json",
        ]
        data = json.loads((output_dir / "lagoon-dark.json").read_text())
        assert data["name"] == "Lagoon Dark"

        out = capsys.readouterr().out
        assert "Removed stale.json" in out
        assert "Found theme: Lagoon Dark (dark)" in out
        assert "=" * 60 in out

    def test_manifest_and_opencode(self, tmp_path, output_dir):
        manifest = tmp_path / "package.json"
        manifest.write_text('{"name": "lagoon"}')

        main(
            [
                BUNDLED_THEMES_DIR,
                "-o",
                str(output_dir),
                "--manifest",
                str(manifest),
                "--opencode",
                "lagoon",
            ]
        )

        themes = json.loads(manifest.read_text())["contributes"]["themes"]
        assert themes == [
            {"label": "Lagoon Dark", "uiTheme": "vs-dark", "path": "./themes/lagoon-dark.json"},
            {"label": "Lagoon Light", "uiTheme": "vs", "path": "./themes/lagoon-light.json"},
        ]

        opencode = json.loads((output_dir / "lagoon.json").read_text())
        assert opencode["theme"]["primary"] == {"dark": "sky300", "light": "sky600"}
        assert opencode["theme"]["border"] == {"dark": "slate500", "light": "zinc300"}

    def test_opencode_needs_both_variants(self, tmp_path, output_dir, config_document, capsys):
        themes_dir = tmp_path / "themes"
        themes_dir.mkdir()
        (themes_dir / "light.json").write_text(json.dumps(config_document))

        with pytest.raises(SystemExit) as excinfo:
            main([str(themes_dir), "-o", str(output_dir), "--opencode", "solo"])

        assert excinfo.value.code == 1
        assert "needs a dark theme" in capsys.readouterr().err

    def test_invalid_theme_exits_with_source(self, tmp_path, output_dir, config_document, capsys):
        themes_dir = tmp_path / "themes"
        themes_dir.mkdir()
        config_document["theme"]["interface"]["accent"] = "sky.301"
        (themes_dir / "broken.json").write_text(json.dumps(config_document))

        with pytest.raises(SystemExit) as excinfo:
            main([str(themes_dir), "-o", str(output_dir)])

        assert excinfo.value.code == 1
        err = capsys.readouterr().err
        assert "broken.json" in err
        assert 'Unknown color "sky.301" in theme.interface.accent' in err

    def test_custom_palette(self, tmp_path, output_dir, config_document):
        themes_dir = tmp_path / "themes"
        themes_dir.mkdir()
        (themes_dir / "light.json").write_text(json.dumps(config_document))

        palette = {ref: "#010203" for ref in _references(config_document)}
        palette_path = tmp_path / "palette.json"
        palette_path.write_text(json.dumps(palette))

        main([str(themes_dir), "-o", str(output_dir), "--palette", str(palette_path)])

        data = json.loads((output_dir / "json-theme.json").read_text())
        assert data["colors"]["activityBarBadge.background"] == "#010203"

    def test_no_themes(self, tmp_path, output_dir, capsys):
        empty = tmp_path / "empty"
        empty.mkdir()

        main([str(empty), "-o", str(output_dir)])

        assert "No themes found" in capsys.readouterr().out
        assert list(output_dir.iterdir()) == []

    def test_refuses_to_clean_themes_dir(self, tmp_path, config_document):
        themes_dir = tmp_path / "themes"
        themes_dir.mkdir()
        (themes_dir / "mine.json").write_text(json.dumps(config_document))

        with pytest.raises(SystemExit) as excinfo:
            main([str(themes_dir), "-o", str(themes_dir / ".")])

        assert excinfo.value.code == 2
        assert (themes_dir / "mine.json").exists()

    def test_missing_themes_dir(self, tmp_path):
        with pytest.raises(SystemExit) as excinfo:
            main([str(tmp_path / "missing")])
        assert excinfo.value.code == 2


def _references(document):
    theme = document["theme"]
    refs = set(theme["code"].values())
    for value in theme["interface"].values():
        if isinstance(value, list):
            refs.update(value)
        else:
            refs.add(value)
    refs.update(document.get("colorOverrides", {}).values())
    return refs
