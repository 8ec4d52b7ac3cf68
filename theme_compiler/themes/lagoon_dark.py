from theme_compiler.semantic import SemanticCodeTheme, SemanticInterfaceTheme, ThemeConfig
from theme_compiler.vscode import VSCodeTheme

config = ThemeConfig(
    name="Lagoon Dark",
    file_name="lagoon-dark.json",
    type="dark",
    interface=SemanticInterfaceTheme(
        # Text
        foreground="slate.300",
        text_secondary="slate.200",
        text_muted="slate.500",
        text_inactive="slate.400",
        # Backgrounds
        background_editor="sky.950",
        background_sidebar="slate.600",
        background_activity_bar="slate.700",
        background_hover="slate.600",
        # Accent and status
        accent="sky.300",
        error="red.400",
        warning="orange.400",
        success="green.500",
        info="blue.500",
        modified="amber.400",
        # Cursor and selection
        cursor="slate.300",
        selection="blue.500",
        bracket_colors=(
            "rose.400",
            "amber.400",
            "green.400",
            "blue.400",
            "violet.400",
            "cyan.400",
        ),
        border="slate.500",
    ),
    code=SemanticCodeTheme(
        foreground="slate.200",
        comment="slate.500",
        string="lime.500",
        number="amber.400",
        punctuation="orange.400",
        keyword="purple.300",
        control_flow="rose.400",
        storage="rose.200",
        import_="orange.400",
        type="amber.200",
        modifier="amber.300",
        primitive="amber.500",
        function="teal.400",
        parameter="sky.300",
        property="blue.400",
        attribute="purple.300",
        tag="rose.400",
    ),
    semantic_token_colors={
        "operator": "orange.400",
        "memberOperatorOverload": "orange.400",
        "operatorOverload": "orange.400",
        "interface": "amber.200",
        "type": "amber.200",
    },
)

lagoon_dark = VSCodeTheme(config)
