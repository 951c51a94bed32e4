"""
Tema visual y configuracion de colores para Inventario
Paleta: Apple iOS - Glassmorphism Design System
"""

# Colores del sistema - iOS Palette
COLORS = {
    # Fondos
    "bg_primary": "#F7F7F7",
    "bg_dark": "#1F1F21",

    # Colores primarios iOS
    "primary": "#007AFF",           # iOS Blue
    "purple": "#5856D6",            # iOS Purple
    "pink": "#FF2D55",              # iOS Pink
    "teal": "#5AC8FA",              # iOS Light Blue

    # Estados semanticos
    "success": "#4CD964",           # iOS Green
    "warning": "#FF9500",           # iOS Orange
    "danger": "#FF3B30",            # iOS Red
    "info": "#5AC8FA",

    # Grises iOS
    "text_primary": "#1F1F21",
    "text_secondary": "#8E8E93",
    "text_muted": "#BDBEC2",
    "border": "#C7C7CC",
    "grid_color": "rgba(199, 199, 204, 0.3)",
}

# Colores por tendencia de ventas
TREND_COLORS = {
    "rising": COLORS["success"],
    "falling": COLORS["danger"],
    "stable": COLORS["text_secondary"],
}

# Color bootstrap equivalente (para dbc.Badge)
TREND_BADGE_COLORS = {
    "rising": "success",
    "falling": "danger",
    "stable": "secondary",
}


def color_con_alpha(color_key: str, alpha: float = 0.2) -> str:
    """
    Convierte un color HEX de COLORS a RGBA con alpha especificado.
    Util para fillcolor de graficos Plotly.

    Args:
        color_key: Clave del color en COLORS dict
        alpha: Valor de opacidad (0.0 - 1.0)

    Returns:
        String RGBA, ej: "rgba(0, 122, 255, 0.2)"
    """
    hex_color = COLORS.get(color_key, '#007AFF').lstrip('#')
    r, g, b = int(hex_color[0:2], 16), int(hex_color[2:4], 16), int(hex_color[4:6], 16)
    return f"rgba({r}, {g}, {b}, {alpha})"


# Template de Plotly para tema iOS
PLOTLY_TEMPLATE = {
    "layout": {
        "paper_bgcolor": "rgba(0, 0, 0, 0)",
        "plot_bgcolor": "rgba(0, 0, 0, 0)",
        "font": {
            "color": "#1F1F21",
            "family": "-apple-system, BlinkMacSystemFont, 'SF Pro Text', system-ui, sans-serif",
            "size": 12
        },
        "xaxis": {
            "gridcolor": "rgba(60, 60, 67, 0.08)",
            "linecolor": "rgba(60, 60, 67, 0.12)",
            "tickfont": {"color": "#8E8E93", "size": 10}
        },
        "yaxis": {
            "gridcolor": "rgba(60, 60, 67, 0.08)",
            "linecolor": "rgba(60, 60, 67, 0.12)",
            "zerolinecolor": "rgba(60, 60, 67, 0.12)",
            "tickfont": {"color": "#8E8E93", "size": 10},
            "rangemode": "tozero"
        },
        "hoverlabel": {
            "bgcolor": "rgba(28, 28, 30, 0.95)",
            "font": {"color": "#FFFFFF", "size": 12}
        },
        "margin": {"l": 40, "r": 12, "t": 36, "b": 36}
    }
}
