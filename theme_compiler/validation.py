import logging
from dataclasses import fields

logger = logging.getLogger(__name__)


def iter_color_references(config):
    """Yield (location, reference) for every color a config refers to.

    Order is deterministic: interface roles, code roles, then the color and
    semantic token override maps in insertion order. Unset optional roles and
    empty override values are skipped.
    """
    for section, roles in (("theme.interface", config.interface), ("theme.code", config.code)):
        for f in fields(roles):
            value = getattr(roles, f.name)
            if value is None:
                continue
            if isinstance(value, tuple):
                for index, reference in enumerate(value):
                    yield f"{section}.{f.name}[{index}]", reference
            else:
                yield f"{section}.{f.name}", value

    for key, reference in config.color_overrides.items():
        if not reference:
            continue
        yield f"color_overrides[{key!r}]", reference

    for selector, reference in config.semantic_token_colors.items():
        if not reference:
            continue
        yield f"semantic_token_colors[{selector!r}]", reference


def validate_config(config, palette):
    """Check that every color reference in `config` exists in `palette`.

    Stops at the first unknown reference.

    Raises:
        UnresolvedColorReference: Naming the reference and where it was found
    """
    count = 0
    for location, reference in iter_color_references(config):
        palette.resolve(reference, location=location)
        count += 1
    logger.debug("Validated %d color references in %s", count, config.name)
