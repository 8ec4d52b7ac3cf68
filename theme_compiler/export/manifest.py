import json
import logging

logger = logging.getLogger(__name__)


def theme_contributions(themes):
    """Build the extension manifest `contributes.themes` entries.

    Args:
        themes: Iterable of VSCodeTheme objects

    Returns:
        list: One {"label", "uiTheme", "path"} dict per theme
    """
    return [
        {
            "label": theme.name,
            "uiTheme": theme.ui_theme,
            "path": f"./themes/{theme.file_name}",
        }
        for theme in themes
    ]


def update_manifest(themes, package_json_path):
    """Rewrite the theme list of an extension's package.json.

    Every other manifest key is left untouched; `contributes` is created when
    absent.

    Args:
        themes: Iterable of VSCodeTheme objects
        package_json_path: Path to the package.json file

    Returns:
        dict: The updated manifest
    """
    with open(package_json_path, encoding="utf-8") as f:
        manifest = json.load(f)

    contributions = theme_contributions(themes)
    manifest.setdefault("contributes", {})["themes"] = contributions

    with open(package_json_path, "w", encoding="utf-8") as f:
        f.write(json.dumps(manifest, indent=2, ensure_ascii=False) + "\n")

    logger.info("Updated %s with %d theme(s)", package_json_path, len(contributions))
    return manifest
