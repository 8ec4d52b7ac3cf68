import glob
import logging
import os

logger = logging.getLogger(__name__)


def clean_output_dir(output_dir):
    """Remove generated *.json files from an output directory.

    A missing directory is not an error.

    Returns:
        list: Names of the removed files
    """
    if not os.path.isdir(output_dir):
        logger.debug("Output directory %s does not exist yet", output_dir)
        return []

    removed = []
    for path in sorted(glob.glob(os.path.join(output_dir, "*.json"))):
        os.remove(path)
        removed.append(os.path.basename(path))
    logger.debug("Removed %d files from %s", len(removed), output_dir)
    return removed


def export_theme(theme, output_dir):
    """Write a VSCodeTheme to `<output_dir>/<file_name>` as indented JSON.

    Args:
        theme: The VSCodeTheme to serialize
        output_dir: Output directory, created if needed

    Returns:
        str: Path of the written file
    """
    os.makedirs(output_dir, exist_ok=True)
    filepath = os.path.join(output_dir, theme.file_name)
    with open(filepath, "w", encoding="utf-8") as f:
        f.write(theme.to_string())
    logger.info("Wrote %s", filepath)
    return filepath


def export_opencode_theme(data, filepath):
    """Write a generated OpenCode theme JSON string to `filepath`."""
    directory = os.path.dirname(filepath)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(filepath, "w", encoding="utf-8") as f:
        f.write(data)
    logger.info("Wrote %s", filepath)
    return filepath
