from theme_compiler.semantic import SemanticCodeTheme, SemanticInterfaceTheme, ThemeConfig
from theme_compiler.vscode import VSCodeTheme

config = ThemeConfig(
    name="Lagoon Light",
    file_name="lagoon-light.json",
    type="light",
    interface=SemanticInterfaceTheme(
        # Text
        foreground="gray.900",
        text_secondary="gray.700",
        text_muted="gray.500",
        text_inactive="gray.400",
        # Backgrounds
        background_editor="gray.100",
        background_sidebar="gray.200",
        background_activity_bar="gray.300",
        background_hover="zinc.200",
        # Accent and status
        accent="sky.600",
        error="red.400",
        warning="orange.400",
        success="green.600",
        info="blue.500",
        modified="amber.500",
        # Cursor and selection
        cursor="zinc.600",
        selection="blue.500",
        bracket_colors=(
            "rose.600",
            "amber.600",
            "green.600",
            "blue.600",
            "violet.600",
            "cyan.600",
        ),
        border="zinc.300",
    ),
    code=SemanticCodeTheme(
        foreground="gray.600",
        comment="zinc.400",
        string="lime.700",
        number="amber.600",
        punctuation="orange.500",
        keyword="purple.600",
        control_flow="rose.400",
        storage="rose.400",
        import_="orange.500",
        type="amber.600",
        modifier="amber.500",
        primitive="amber.500",
        function="teal.600",
        parameter="cyan.600",
        property="sky.600",
        attribute="purple.500",
        tag="rose.400",
    ),
)

lagoon_light = VSCodeTheme(config)
