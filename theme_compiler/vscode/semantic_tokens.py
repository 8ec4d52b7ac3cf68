import logging

logger = logging.getLogger(__name__)

# Semantic token selector -> SemanticCodeTheme field
SEMANTIC_TOKEN_ROLES = {
    # Operators
    "operator": "import_",
    "memberOperatorOverload": "import_",
    "operatorOverload": "import_",
    # Types and interfaces
    "interface": "type",
    "type": "type",
}


def build_semantic_token_colors(code, overrides=None):
    """Map the semantic code theme to semantic token colors.

    Overrides replace generated selectors by name; selectors that are not
    generated are added as given.

    Returns:
        dict: Selector -> palette reference
    """
    colors = {selector: getattr(code, role) for selector, role in SEMANTIC_TOKEN_ROLES.items()}
    if overrides:
        for selector, reference in overrides.items():
            if reference:
                colors[selector] = reference
    logger.debug("Generated %d semantic token colors", len(colors))
    return colors
