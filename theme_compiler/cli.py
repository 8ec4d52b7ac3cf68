import argparse
import logging
import os
import sys

from .discovery import discover_themes
from .errors import ThemeCompilerError
from .export import clean_output_dir, export_opencode_theme, export_theme, update_manifest
from .opencode import generate_opencode_theme
from .palette import load_palette_from_json

BUNDLED_THEMES_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "themes")


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Compile semantic theme definitions into VS Code and OpenCode themes"
    )
    parser.add_argument(
        "themes_dir",
        nargs="?",
        default=BUNDLED_THEMES_DIR,
        help="Directory of theme modules and JSON theme configs (default: bundled themes)",
    )
    parser.add_argument(
        "--output", "-o",
        metavar="DIR",
        default="themes",
        help="Output directory for the generated theme files (default: ./themes)",
    )
    parser.add_argument(
        "--manifest",
        metavar="PACKAGE_JSON",
        help="Extension package.json whose contributes.themes list is rewritten",
    )
    parser.add_argument(
        "--opencode",
        metavar="NAME",
        help="Also write NAME.json in OpenCode format from the first dark and light themes",
    )
    parser.add_argument(
        "--palette",
        metavar="JSON",
        help="Palette JSON file used to compile JSON theme configs (default: Tailwind)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log debug output",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not os.path.isdir(args.themes_dir):
        parser.error(f"Themes directory not found: {args.themes_dir}")
    if args.manifest and not os.path.isfile(args.manifest):
        parser.error(f"Manifest not found: {args.manifest}")
    if args.palette and not os.path.isfile(args.palette):
        parser.error(f"Palette not found: {args.palette}")
    if os.path.realpath(args.output) == os.path.realpath(args.themes_dir):
        parser.error("Output directory must differ from the themes directory")

    try:
        _run_build(args)
    except ThemeCompilerError as e:
        print(f"\nError: {e}", file=sys.stderr)
        sys.exit(1)


def _run_build(args):
    """Clean the output directory, compile every theme and write the outputs."""
    output_dir = args.output
    palette = load_palette_from_json(args.palette) if args.palette else None

    print(f"Cleaning: {output_dir}")
    removed = clean_output_dir(output_dir)
    for filename in removed:
        print(f"  Removed {filename}")
    if not removed:
        print("  No files to remove")

    print(f"\nDiscovering themes in: {args.themes_dir}")
    themes = discover_themes(args.themes_dir, palette=palette)
    for theme in themes:
        print(f"  Found theme: {theme.name} ({theme.type})")

    if not themes:
        print("\nNo themes found. Theme modules must export a VSCodeTheme instance.")
        return

    exported = []
    for theme in themes:
        exported.append((export_theme(theme, output_dir), theme))

    if args.manifest:
        update_manifest(themes, args.manifest)

    opencode_path = None
    if args.opencode:
        opencode_path = _run_opencode(args.opencode, themes, output_dir)

    print("\n" + "=" * 60)
    print("Exported:")
    for path, theme in exported:
        print(f"  - {path} ({theme.name}, {theme.type})")
    if opencode_path:
        print(f"  - {opencode_path} (OpenCode)")
    if args.manifest:
        print(f"\nUpdated {args.manifest} with {len(themes)} theme(s)")
    print("=" * 60)


def _run_opencode(name, themes, output_dir):
    """Compile the first dark and first light theme into one OpenCode theme."""
    dark = next((t for t in themes if t.type == "dark"), None)
    light = next((t for t in themes if t.type == "light"), None)
    if dark is None or light is None:
        missing = "dark" if dark is None else "light"
        raise ThemeCompilerError(f"--opencode needs a {missing} theme, none was found")

    filename = name if name.endswith(".json") else f"{name}.json"
    data = generate_opencode_theme(dark.config, light.config, palette=dark.palette)
    return export_opencode_theme(data, os.path.join(output_dir, filename))


if __name__ == "__main__":
    main()
