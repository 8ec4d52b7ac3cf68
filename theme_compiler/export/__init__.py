from .json_export import clean_output_dir, export_opencode_theme, export_theme
from .manifest import theme_contributions, update_manifest

__all__ = [
    "clean_output_dir",
    "export_opencode_theme",
    "export_theme",
    "theme_contributions",
    "update_manifest",
]
