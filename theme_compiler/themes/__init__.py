"""Bundled themes, the default input of the ``theme-compiler`` command."""
